# task_service/settings.py
"""
Django settings for the task service.

Everything deployment-specific comes from ``TASKS_*`` environment variables,
optionally loaded from a local ``.env`` file when python-dotenv is installed.
"""
import os
from pathlib import Path

try:
    from dotenv import load_dotenv
except ImportError:
    load_dotenv = None

if load_dotenv is not None:
    load_dotenv(override=False)

BASE_DIR = Path(__file__).resolve().parent.parent


def _env(name, default=''):
    value = os.getenv(name)
    return default if value is None or value.strip() == '' else value.strip()


def _env_bool(name, default):
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {'1', 'true', 'yes', 'y', 'on'}


def _env_list(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return list(default)
    return [p.strip() for p in raw.replace(',', ' ').split() if p.strip()]


def _env_path(name, default):
    raw = _env(name)
    if not raw:
        return default
    return Path(raw).expanduser()


SECRET_KEY = _env('TASKS_SECRET_KEY', 'django-insecure-task-service-dev-key')
DEBUG = _env_bool('TASKS_DEBUG', False)
ALLOWED_HOSTS = _env_list('TASKS_ALLOWED_HOSTS', ['*'])

INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'rest_framework',
    'tasks',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'task_service.urls'
WSGI_APPLICATION = 'task_service.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': _env_path('TASKS_DB_PATH', BASE_DIR / 'db.sqlite3'),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

# Routes are exposed without a trailing slash (/tasks, /tasks/<id>).
APPEND_SLASH = False

TASKS_IMPORT_FILE = _env_path('TASKS_IMPORT_FILE', Path('tasks.csv'))

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
    'DEFAULT_PARSER_CLASSES': ['rest_framework.parsers.JSONParser'],
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'EXCEPTION_HANDLER': 'tasks.exceptions.task_exception_handler',
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
}

LOG_LEVEL = _env('TASKS_LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'default',
        },
    },
    'loggers': {
        'tasks': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
    },
}
