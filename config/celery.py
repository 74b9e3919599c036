"""
Celery configuration for the Productivity Bingo project.
"""
import os
from celery import Celery
from celery.schedules import crontab

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

app = Celery('config')
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()

# Celery Beat Schedule
app.conf.beat_schedule = {
    'deactivate-stale-boards': {
        'task': 'apps.bingo.tasks.deactivate_stale_boards',
        'schedule': crontab(day_of_month='1', hour='0', minute='0'),
    },
}
