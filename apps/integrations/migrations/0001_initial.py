import uuid

import apps.core.fields
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='PaymentGateway',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when the record was last updated')),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, help_text='Timestamp when the record was soft deleted', null=True)),
                ('name', models.CharField(help_text='Display name', max_length=255)),
                ('type', models.CharField(choices=[('asaas', 'Asaas'), ('mercado_pago', 'Mercado Pago'), ('pagseguro', 'PagSeguro')], db_index=True, help_text='Payment provider', max_length=50)),
                ('api_url', models.URLField(help_text='Provider API base URL', max_length=500)),
                ('public_key', apps.core.fields.EncryptedCharField(help_text='Provider public key (encrypted)', max_length=1000)),
                ('token', apps.core.fields.EncryptedTextField(help_text='Provider API token (encrypted)')),
                ('email', models.EmailField(blank=True, help_text='Email registered with the provider', max_length=254)),
                ('is_active', models.BooleanField(db_index=True, default=True, help_text='Whether the gateway accepts payments')),
                ('created_by', models.ForeignKey(blank=True, help_text='User who created this row', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('entrepreneur', models.ForeignKey(help_text='Entrepreneur that owns this row', on_delete=django.db.models.deletion.PROTECT, related_name='owned_paymentgateways', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'payment_gateways',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['entrepreneur', 'is_active'], name='pg_entrepreneur_active_idx'),
                ],
            },
        ),
    ]
