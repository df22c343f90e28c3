"""
Dashboard navigation menus per role.

Pure data: the menu a role sees in the dashboard sidebar. Showing an entry
grants nothing; every endpoint still authorizes the request on its own.
"""
from apps.authz.types import Role


def _item(key, label, icon, path):
    return {'key': key, 'label': label, 'icon': icon, 'path': path}


DASHBOARD = _item('dashboard', 'Dashboard', 'BarChart3', '/dashboard')
USERS = _item('users', 'User Management', 'Users', '/users')
PAYMENT_GATEWAYS = _item('payment_gateways', 'Payment Gateways', 'CreditCard', '/payment-gateways')
COLLABORATORS = _item('collaborators', 'Team', 'Users', '/collaborators')
WHATSAPP_INSTANCES = _item('whatsapp_instances', 'WhatsApp', 'MessageSquare', '/whatsapp-instances')
ACCOUNTING = _item('accounting', 'Accounting', 'DollarSign', '/accounting')
CUSTOMER_PLANS = _item('customer_plans', 'Plans', 'Package', '/customer-plans')
PRICE_TABLES = _item('price_tables', 'Price Tables', 'FileText', '/price-tables')
PROFILE = _item('profile', 'Profile', 'User', '/profile')
PRICING = _item('pricing', 'Pricing', 'Star', '/pricing')

MENUS = {
    Role.SUPER_ADMIN: (
        DASHBOARD, USERS, PAYMENT_GATEWAYS, COLLABORATORS, WHATSAPP_INSTANCES,
        ACCOUNTING, CUSTOMER_PLANS, PRICE_TABLES,
    ),
    Role.ENTREPRENEUR: (
        DASHBOARD, PAYMENT_GATEWAYS, COLLABORATORS, WHATSAPP_INSTANCES,
        ACCOUNTING, CUSTOMER_PLANS, PRICE_TABLES, PROFILE,
    ),
    Role.COLLABORATOR: (
        DASHBOARD, PAYMENT_GATEWAYS, COLLABORATORS, WHATSAPP_INSTANCES,
        ACCOUNTING, CUSTOMER_PLANS, PRICE_TABLES, PROFILE,
    ),
    Role.CUSTOMER: (
        DASHBOARD, CUSTOMER_PLANS, PRICE_TABLES, PROFILE,
    ),
    Role.VISITOR: (
        PRICING,
    ),
}


def menu_for_role(role):
    """
    Return the menu entries for role as a list of dicts.

    Unknown roles get an empty menu.
    """
    role = Role.coerce(role)
    return [dict(item) for item in MENUS.get(role, ())]
