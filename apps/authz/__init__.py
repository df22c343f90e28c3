"""
Authorization core: identity, role policy, tenant scoping and mutation guard.

Storage-agnostic. The API layer calls authorize() before every read or write
and re-applies the returned predicate when it touches storage.
"""
default_app_config = 'apps.authz.apps.AuthzConfig'
