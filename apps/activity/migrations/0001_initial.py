import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='ActivityLog',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('user_id', models.UUIDField(blank=True, db_index=True, null=True)),
                ('action', models.CharField(help_text='Action performed (e.g., BINGO_ACHIEVED)', max_length=50)),
                ('target_type', models.CharField(help_text='Type of object acted on (e.g., Square)', max_length=50)),
                ('target_id', models.UUIDField(help_text='ID of the object acted on')),
                ('target_label', models.CharField(blank=True, help_text='Human-readable label of the object', max_length=255)),
                ('performed_at', models.DateTimeField(auto_now_add=True)),
                ('context', models.JSONField(blank=True, default=dict, help_text='Additional context/metadata')),
            ],
            options={
                'verbose_name': 'Activity Log',
                'verbose_name_plural': 'Activity Logs',
                'ordering': ['-performed_at'],
            },
        ),
    ]
