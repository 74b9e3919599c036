"""
Lambda Handlers - Entry points for AWS Lambda functions.

This module provides Lambda handlers for:
1. Scheduled Events - EventBridge triggers for the monthly board rollover
2. Django API (via Mangum) - HTTP requests through API Gateway

The handlers use Django's setup to access models and services.
"""

import os
import sys
import json
import logging

# Ensure the project root is in the path for Lambda
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

# Configure Django before importing any models
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

import django
django.setup()

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def scheduled_deactivate_stale_boards(event, context):
    """
    EventBridge scheduled handler: close out last month's boards.

    Schedule: 1st of each month at 00:00
    """
    from apps.bingo import services

    logger.info("Running scheduled deactivate_stale_boards")
    count = services.deactivate_stale_boards()

    return {
        'statusCode': 200,
        'body': json.dumps({
            'deactivated_count': count
        })
    }


# =============================================================================
# Django API Handler (Mangum)
# =============================================================================

_asgi_handler = None


def api_handler(event, context):
    """
    AWS Lambda handler for HTTP requests via API Gateway.

    Uses Mangum to wrap Django's ASGI application.
    """
    global _asgi_handler

    if _asgi_handler is None:
        from mangum import Mangum
        from config.asgi import application
        _asgi_handler = Mangum(application, lifespan="off")

    return _asgi_handler(event, context)
