"""
Users, authentication and audit.

Provides:
- User model with a single dashboard role and tenant link
- JWT authentication and identity resolution middleware
- Role reassignment
- Audit logging
"""
