import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='PriceTable',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when the record was last updated')),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, help_text='Timestamp when the record was soft deleted', null=True)),
                ('title', models.CharField(max_length=255)),
                ('subtitle', models.CharField(blank=True, max_length=500)),
                ('advantages', models.JSONField(blank=True, default=list, help_text='List of advantage lines shown on the card')),
                ('old_price_3x', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('current_price_3x', models.DecimalField(decimal_places=2, max_digits=10)),
                ('old_price_12x', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('current_price_12x', models.DecimalField(decimal_places=2, max_digits=10)),
                ('months', models.PositiveIntegerField(default=3)),
                ('image1', models.URLField(blank=True, max_length=500)),
                ('image2', models.URLField(blank=True, max_length=500)),
                ('buy_link', models.URLField(max_length=500)),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('display_order', models.IntegerField(db_index=True, default=0)),
            ],
            options={
                'db_table': 'price_tables',
                'ordering': ['display_order', 'created_at'],
            },
        ),
    ]
