import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='CustomerPlan',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when the record was last updated')),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, help_text='Timestamp when the record was soft deleted', null=True)),
                ('plan_type', models.CharField(choices=[('3x', '3 instalments'), ('12x', '12 instalments')], default='3x', max_length=3)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('pay_hash', models.CharField(blank=True, help_text='Gateway payment reference', max_length=255)),
                ('pay_status', models.CharField(choices=[('pending', 'Pending'), ('paid', 'Paid'), ('failed', 'Failed'), ('expired', 'Expired')], db_index=True, default='pending', max_length=10)),
                ('pay_date', models.DateTimeField(blank=True, null=True)),
                ('pay_link', models.URLField(blank=True, max_length=500)),
                ('pay_expiration', models.DateTimeField(blank=True, null=True)),
                ('plan_expiration_date', models.DateField(blank=True, null=True)),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('created_by', models.ForeignKey(blank=True, help_text='User who created this row', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('customer', models.ForeignKey(help_text='Customer that bought the plan', on_delete=django.db.models.deletion.PROTECT, related_name='customer_plans', to=settings.AUTH_USER_MODEL)),
                ('entrepreneur', models.ForeignKey(help_text='Entrepreneur that owns this row', on_delete=django.db.models.deletion.PROTECT, related_name='owned_customerplans', to=settings.AUTH_USER_MODEL)),
                ('price_table', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='customer_plans', to='catalog.pricetable')),
            ],
            options={
                'db_table': 'customer_plans',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['entrepreneur', 'pay_status'], name='plan_entrepreneur_status_idx'),
                    models.Index(fields=['customer', 'is_active'], name='plan_customer_active_idx'),
                ],
            },
        ),
    ]
