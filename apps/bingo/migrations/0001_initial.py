import django.db.models.deletion
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Board',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('user_id', models.UUIDField(db_index=True)),
                ('size', models.PositiveSmallIntegerField(default=3)),
                ('month', models.PositiveSmallIntegerField()),
                ('year', models.PositiveIntegerField()),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['-year', '-month', '-created_at'],
                'indexes': [models.Index(fields=['user_id', 'year', 'month'], name='bingo_board_user_month_idx')],
            },
        ),
        migrations.CreateModel(
            name='Square',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('position', models.PositiveSmallIntegerField()),
                ('content', models.CharField(max_length=255)),
                ('kind', models.CharField(choices=[('TOLERATION', 'Toleration'), ('TASK', 'Task'), ('FREE_SPACE', 'Free Space')], default='TASK', max_length=20)),
                ('is_completed', models.BooleanField(default=False)),
                ('completed_at', models.DateTimeField(blank=True, null=True)),
                ('board', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='squares', to='bingo.board')),
            ],
            options={
                'ordering': ['position'],
                'unique_together': {('board', 'position')},
            },
        ),
        migrations.CreateModel(
            name='Bingo',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('line_type', models.CharField(choices=[('ROW', 'Row'), ('COLUMN', 'Column'), ('DIAGONAL', 'Diagonal')], max_length=20)),
                ('line_index', models.PositiveSmallIntegerField()),
                ('achieved_at', models.DateTimeField(auto_now_add=True)),
                ('board', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bingos', to='bingo.board')),
            ],
            options={
                'ordering': ['achieved_at'],
                'constraints': [models.UniqueConstraint(fields=('board', 'line_type', 'line_index'), name='unique_bingo_per_board_line')],
            },
        ),
    ]
