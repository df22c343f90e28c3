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
            name='Collaborator',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when the record was last updated')),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, help_text='Timestamp when the record was soft deleted', null=True)),
                ('name', models.CharField(max_length=255)),
                ('email', models.EmailField(help_text='Contact email (unique per entrepreneur)', max_length=254)),
                ('position', models.CharField(help_text='Job title', max_length=255)),
                ('department', models.CharField(blank=True, max_length=255)),
                ('phone', models.CharField(blank=True, max_length=50)),
                ('skills', models.JSONField(blank=True, default=list, help_text='List of skill labels')),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('hire_date', models.DateField(blank=True, null=True)),
                ('created_by', models.ForeignKey(blank=True, help_text='User who created this row', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('entrepreneur', models.ForeignKey(help_text='Entrepreneur that owns this row', on_delete=django.db.models.deletion.PROTECT, related_name='owned_collaborators', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'collaborators',
                'ordering': ['name'],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(('deleted_at__isnull', True)), fields=('entrepreneur', 'email'), name='unique_collaborator_email_per_entrepreneur'),
                ],
            },
        ),
    ]
