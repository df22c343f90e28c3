import uuid

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
            name='WhatsappInstance',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when the record was last updated')),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, help_text='Timestamp when the record was soft deleted', null=True)),
                ('name', models.CharField(max_length=255)),
                ('instance_number', models.CharField(help_text='Phone number in E.164 format', max_length=50)),
                ('api_url', models.URLField(help_text='Instance API base URL', max_length=500)),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('created_by', models.ForeignKey(blank=True, help_text='User who created this row', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('entrepreneur', models.ForeignKey(help_text='Entrepreneur that owns this row', on_delete=django.db.models.deletion.PROTECT, related_name='owned_whatsappinstances', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'whatsapp_instances',
                'ordering': ['-created_at'],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(('deleted_at__isnull', True)), fields=('instance_number',), name='unique_live_whatsapp_instance_number'),
                ],
            },
        ),
    ]
