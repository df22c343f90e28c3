import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when the record was last updated')),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, help_text='Timestamp when the record was soft deleted', null=True)),
                ('email', models.EmailField(help_text='User email address (unique among live users)', max_length=254)),
                ('name', models.CharField(blank=True, help_text='Display name', max_length=255)),
                ('password_hash', models.CharField(help_text='Hashed password', max_length=255)),
                ('role', models.CharField(choices=[('super-admin', 'Super admin'), ('entrepreneur', 'Entrepreneur'), ('collaborator', 'Collaborator'), ('customer', 'Customer')], db_index=True, default='customer', help_text='Dashboard role', max_length=20)),
                ('avatar', models.URLField(blank=True, help_text='Avatar image URL', max_length=500)),
                ('is_active', models.BooleanField(db_index=True, default=True, help_text='Whether user account is active')),
                ('last_login_at', models.DateTimeField(blank=True, help_text='Last login timestamp', null=True)),
                ('entrepreneur', models.ForeignKey(blank=True, help_text='Owning entrepreneur (collaborators and customers only)', null=True, on_delete=django.db.models.deletion.PROTECT, related_name='members', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'users',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['role', 'is_active'], name='users_role_active_idx'),
                    models.Index(fields=['entrepreneur', 'role'], name='users_tenant_role_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(('deleted_at__isnull', True)), fields=('email',), name='unique_live_user_email'),
                ],
            },
        ),
        migrations.CreateModel(
            name='AuditLog',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when the record was last updated')),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, help_text='Timestamp when the record was soft deleted', null=True)),
                ('action', models.CharField(db_index=True, help_text="Action performed (e.g. 'payment_gateway.created', 'user.role_changed')", max_length=100)),
                ('target_type', models.CharField(db_index=True, help_text="Type of target entity (e.g. 'PaymentGateway')", max_length=50)),
                ('target_id', models.UUIDField(blank=True, db_index=True, help_text='ID of target entity', null=True)),
                ('diff', models.JSONField(blank=True, default=dict, help_text='Changed fields')),
                ('ip_address', models.GenericIPAddressField(blank=True, null=True)),
                ('user_agent', models.TextField(blank=True)),
                ('request_id', models.CharField(blank=True, db_index=True, max_length=64)),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('entrepreneur', models.ForeignKey(blank=True, help_text='Tenant the target belongs to (null for global rows)', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='tenant_audit_logs', to=settings.AUTH_USER_MODEL)),
                ('user', models.ForeignKey(blank=True, help_text='User who performed the action', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='audit_logs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'audit_logs',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['entrepreneur', 'created_at'], name='audit_entrepreneur_created_idx'),
                    models.Index(fields=['target_type', 'target_id'], name='audit_target_idx'),
                ],
            },
        ),
    ]
