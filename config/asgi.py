"""
ASGI config for the TaskMaster API.

Served by uvicorn through `manage.py serve`; any other ASGI server can
point at `config.asgi:application`.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

# Initialize Django at module load time, before the first request
application = get_asgi_application()
