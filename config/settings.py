"""
Django settings for the TaskMaster API.

All values are read once from the environment (and an optional .env
file in the project root) at startup:
- PORT          HTTP port used by `manage.py serve` (default 3000)
- APP_ENV       Environment name (default "development")
- DATABASE_URL  Store connection string (default local SQLite file)
"""
import os
from pathlib import Path

from config.database import get_database_config
from config.environment import load_env_file

BASE_DIR = Path(__file__).resolve().parent.parent

# Must run before any os.getenv below
load_env_file(BASE_DIR)

PORT = int(os.getenv('PORT', '3000'))
APP_ENV = os.getenv('APP_ENV', 'development')
IS_PRODUCTION = APP_ENV == 'production'
IS_DEVELOPMENT = APP_ENV == 'development'

SECRET_KEY = os.getenv('SECRET_KEY', 'django-insecure-taskmaster-dev-key')
DEBUG = os.getenv('DJANGO_DEBUG', '').lower() == 'true'
ALLOWED_HOSTS = [h.strip() for h in os.getenv('ALLOWED_HOSTS', '*').split(',') if h.strip()]

INSTALLED_APPS = [
    'django.contrib.staticfiles',
    'ninja',
    'apps.core',
    'apps.tasks',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'apps.core.middleware.RouteNotFoundMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {'context_processors': []},
    },
]

ASGI_APPLICATION = 'config.asgi.application'

DATABASES = {
    'default': get_database_config(BASE_DIR),
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True
TIME_ZONE = 'UTC'

STATIC_URL = 'static/'

# Trailing-slash redirects would turn unmatched API paths into 301s
APPEND_SLASH = False

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': os.getenv('LOG_LEVEL', 'INFO'),
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': False,
        },
    },
}
