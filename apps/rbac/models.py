"""
User and audit models.

- User: dashboard identity with a single role and, for collaborators and
  customers, the entrepreneur (tenant) it belongs to
- AuditLog: trail of every mutation performed through the API
"""
import logging
from django.db import models
from django.contrib.auth.hashers import make_password, check_password
from django.utils import timezone

from apps.authz.types import Role
from apps.core.models import BaseModel, BaseModelManager

logger = logging.getLogger(__name__)


class UserManager(BaseModelManager):
    """
    Manager for User queries.

    Compatible with Django's authentication system and admin interface.
    """

    def active(self):
        return self.filter(is_active=True)

    def by_email(self, email):
        return self.filter(email__iexact=self.normalize_email(email)).first()

    def entrepreneurs(self):
        return self.filter(role=Role.ENTREPRENEUR.value, is_active=True)

    def create_user(self, email, password=None, **extra_fields):
        """Create a new user with a hashed password."""
        if not email:
            raise ValueError('Email address is required')

        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', Role.CUSTOMER.value)

        user = self.model(email=self.normalize_email(email), **extra_fields)
        if password:
            user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """Create a super-admin. Required by Django's createsuperuser command."""
        extra_fields['role'] = Role.SUPER_ADMIN.value
        extra_fields['entrepreneur'] = None
        return self.create_user(email, password, **extra_fields)

    @staticmethod
    def normalize_email(email):
        """Lowercase the domain part of the email address."""
        email = (email or '').strip()
        try:
            email_name, domain_part = email.rsplit('@', 1)
        except ValueError:
            return email
        return email_name + '@' + domain_part.lower()

    def get_by_natural_key(self, email):
        return self.get(**{self.model.USERNAME_FIELD: email})


class User(BaseModel):
    """
    Dashboard user.

    Super-admins and entrepreneurs have no entrepreneur link; collaborators
    and customers always belong to exactly one entrepreneur. Role changes go
    through the role reassignment endpoint, never through a plain update.

    This is the AUTH_USER_MODEL for the entire application, including Django admin.
    """

    ROLE_CHOICES = [
        (Role.SUPER_ADMIN.value, 'Super admin'),
        (Role.ENTREPRENEUR.value, 'Entrepreneur'),
        (Role.COLLABORATOR.value, 'Collaborator'),
        (Role.CUSTOMER.value, 'Customer'),
    ]

    email = models.EmailField(
        help_text="User email address (unique among live users)"
    )
    name = models.CharField(
        max_length=255,
        blank=True,
        help_text="Display name"
    )
    password_hash = models.CharField(
        max_length=255,
        help_text="Hashed password"
    )
    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=Role.CUSTOMER.value,
        db_index=True,
        help_text="Dashboard role"
    )
    entrepreneur = models.ForeignKey(
        'self',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='members',
        help_text="Owning entrepreneur (collaborators and customers only)"
    )
    avatar = models.URLField(
        max_length=500,
        blank=True,
        help_text="Avatar image URL"
    )
    is_active = models.BooleanField(
        default=True,
        db_index=True,
        help_text="Whether user account is active"
    )
    last_login_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Last login timestamp"
    )

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = []

    objects = UserManager()

    class Meta:
        db_table = 'users'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['role', 'is_active'], name='users_role_active_idx'),
            models.Index(fields=['entrepreneur', 'role'], name='users_tenant_role_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['email'],
                condition=models.Q(deleted_at__isnull=True),
                name='unique_live_user_email',
            ),
        ]

    def __str__(self):
        return self.email

    @property
    def password(self):
        """Alias for password_hash. Django admin expects a 'password' attribute."""
        return self.password_hash

    @password.setter
    def password(self, value):
        self.password_hash = value

    def check_password(self, raw_password):
        return check_password(raw_password, self.password_hash)

    def set_password(self, raw_password):
        self.password_hash = make_password(raw_password)

    def get_username(self):
        return self.email

    def get_full_name(self):
        return self.name or self.email

    def update_last_login(self):
        self.last_login_at = timezone.now()
        self.save(update_fields=['last_login_at', 'updated_at'])

    @property
    def tenant_id(self):
        """Entrepreneur whose data this user works on (None for super-admins)."""
        if self.role == Role.ENTREPRENEUR.value:
            return self.id
        return self.entrepreneur_id

    @property
    def is_authenticated(self):
        return True

    @property
    def is_anonymous(self):
        return False

    @property
    def is_superuser(self):
        return self.role == Role.SUPER_ADMIN.value

    @property
    def is_staff(self):
        """Super-admins may use Django admin."""
        return self.is_superuser and self.is_active

    def has_perm(self, perm, obj=None):
        return self.is_staff

    def has_perms(self, perm_list, obj=None):
        return self.is_staff

    def has_module_perms(self, app_label):
        return self.is_staff

    def natural_key(self):
        return (self.email,)


class AuditLogManager(models.Manager):
    """Manager for AuditLog queries."""

    def for_entrepreneur(self, entrepreneur_id):
        return self.filter(entrepreneur_id=entrepreneur_id)

    def by_target(self, target_type, target_id=None):
        qs = self.filter(target_type=target_type)
        if target_id:
            qs = qs.filter(target_id=target_id)
        return qs


class AuditLog(BaseModel):
    """
    Audit trail of mutations performed through the API.

    Records creates, updates, deletes and role changes with the actor, the
    tenant the target belongs to and the changed fields.
    """

    entrepreneur = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tenant_audit_logs',
        help_text="Tenant the target belongs to (null for global rows)"
    )
    user = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_logs',
        help_text="User who performed the action"
    )

    action = models.CharField(
        max_length=100,
        db_index=True,
        help_text="Action performed (e.g. 'payment_gateway.created', 'user.role_changed')"
    )
    target_type = models.CharField(
        max_length=50,
        db_index=True,
        help_text="Type of target entity (e.g. 'PaymentGateway')"
    )
    target_id = models.UUIDField(
        null=True,
        blank=True,
        db_index=True,
        help_text="ID of target entity"
    )
    diff = models.JSONField(
        default=dict,
        blank=True,
        help_text="Changed fields"
    )

    ip_address = models.GenericIPAddressField(null=True, blank=True)
    user_agent = models.TextField(blank=True)
    request_id = models.CharField(max_length=64, blank=True, db_index=True)

    metadata = models.JSONField(default=dict, blank=True)

    objects = AuditLogManager()

    class Meta:
        db_table = 'audit_logs'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['entrepreneur', 'created_at'], name='audit_entrepreneur_created_idx'),
            models.Index(fields=['target_type', 'target_id'], name='audit_target_idx'),
        ]

    def __str__(self):
        user_str = self.user.email if self.user else 'System'
        return f"{user_str} - {self.action}"

    @classmethod
    def log_action(cls, action, user=None, entrepreneur_id=None, target_type=None,
                   target_id=None, diff=None, metadata=None, request=None):
        """
        Create an audit log entry.

        Failures are logged and swallowed so that auditing never breaks the
        operation being audited.

        Returns:
            AuditLog instance, or None if the entry could not be written
        """
        if user is not None and not user.is_authenticated:
            user = None

        log_data = {
            'action': action,
            'user': user,
            'entrepreneur_id': entrepreneur_id,
            'target_type': target_type or '',
            'target_id': target_id,
            'diff': diff or {},
            'metadata': metadata or {},
        }

        if request is not None:
            log_data['ip_address'] = cls._get_client_ip(request)
            log_data['user_agent'] = request.META.get('HTTP_USER_AGENT', '')
            log_data['request_id'] = (getattr(request, 'request_id', None) or '')[:64]

        try:
            return cls.objects.create(**log_data)
        except Exception as e:
            logger.error(
                f"Failed to create audit log: {str(e)}",
                extra={'action': action, 'entrepreneur_id': str(entrepreneur_id) if entrepreneur_id else None},
                exc_info=True
            )
            return None

    @staticmethod
    def _get_client_ip(request):
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            return x_forwarded_for.split(',')[0].strip()
        return request.META.get('REMOTE_ADDR')
