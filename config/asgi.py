"""
ASGI config for the Productivity Bingo project.

Serves the API under any ASGI server (Uvicorn, Daphne) and, wrapped by
Mangum, behind API Gateway on AWS Lambda.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

# Initialize Django at import time so Lambda pays the cost once per container
from django.core.asgi import get_asgi_application

application = get_asgi_application()

