"""
Custom authentication backend for the dashboard.

Provides email-based authentication for Django admin. Only active
super-admins pass the admin's is_staff check.
"""
from django.contrib.auth.backends import BaseBackend
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError

User = get_user_model()


class EmailAuthBackend(BaseBackend):
    """
    Authenticate using email address instead of username.
    """

    def authenticate(self, request, username=None, password=None, **kwargs):
        """
        Authenticate user by email and password.

        Args:
            request: HTTP request object
            username: Email address (Django admin passes email as 'username')
            password: Plain text password

        Returns:
            User instance if authentication succeeds, None otherwise
        """
        email = username or kwargs.get('email')

        if not email or not password:
            return None

        user = User.objects.by_email(email)
        if user is None:
            # Run the default password hasher once to reduce timing
            # difference between existing and non-existing users
            User().set_password(password)
            return None

        if user.check_password(password) and user.is_active:
            return user

        return None

    def get_user(self, user_id):
        try:
            return User.objects.filter(pk=user_id, is_active=True).first()
        except ValidationError:
            return None
