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
    ]

    operations = [
        migrations.CreateModel(
            name='AccountingEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when the record was last updated')),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, help_text='Timestamp when the record was soft deleted', null=True)),
                ('category', models.CharField(db_index=True, max_length=100)),
                ('description', models.TextField()),
                ('date', models.DateField(db_index=True)),
                ('type', models.CharField(choices=[('receives', 'Receives'), ('expenses', 'Expenses')], db_index=True, max_length=10)),
                ('amount', models.DecimalField(decimal_places=2, help_text='Positive amount; the sign comes from type', max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('created_by', models.ForeignKey(blank=True, help_text='User who created this row', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('entrepreneur', models.ForeignKey(help_text='Entrepreneur that owns this row', on_delete=django.db.models.deletion.PROTECT, related_name='owned_accountingentrys', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name_plural': 'accounting entries',
                'db_table': 'accounting_entries',
                'ordering': ['-date', '-created_at'],
                'indexes': [
                    models.Index(fields=['entrepreneur', 'date'], name='acct_entrepreneur_date_idx'),
                ],
            },
        ),
    ]
