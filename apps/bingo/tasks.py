"""Celery tasks for Bingo app."""
from celery import shared_task
from . import services


@shared_task
def deactivate_stale_boards():
    """
    Close out boards from past months.
    Scheduled for midnight on the 1st of each month (see config/celery.py).

    Returns count of deactivated boards for logging.
    """
    count = services.deactivate_stale_boards()
    return f"Deactivated {count} stale boards"
