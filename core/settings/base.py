from pathlib import Path

from celery.schedules import crontab
from environs import Env

env = Env()
env.read_env(recurse=False)

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = env.str('SECRET_KEY', 'django-insecure-4c1q$z8o)v7w!xk2fm#p0ht9r^3e_ls6yb+nd5ua@jgi=w1cqe')

DEBUG = env.bool('DEBUG', False)

ALLOWED_HOSTS = env.list('ALLOWED_HOSTS', [])

INSTALLED_APPS = [
    'catalog',
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': env.str('SQLITE_PATH', str(BASE_DIR / 'db.sqlite3')),
    }
}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Logging
LOG_LEVEL = env.str('LOG_LEVEL', 'INFO')
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '[{asctime} {levelname}] {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'catalog': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}

# Product sync job
SYNC_INTERVAL_MINUTES = env.int('SYNC_INTERVAL_MINUTES', 10)
SYNC_MAX_RETRY_ATTEMPTS = env.int('SYNC_MAX_RETRY_ATTEMPTS', 3)
SYNC_RETRY_DELAY_SECONDS = env.float('SYNC_RETRY_DELAY_SECONDS', 2.0)
SYNC_STALE_AFTER_MINUTES = env.int('SYNC_STALE_AFTER_MINUTES', 60)
SYNC_LOCK_TIMEOUT = env.int('SYNC_LOCK_TIMEOUT', 3600)

# Record store: swap via env or override in prod.py/test.py
SYNC_STORE_CLASS = env.str('SYNC_STORE_CLASS', 'catalog.stores.django_store.DjangoProductStore')

# Celery
CELERY_BROKER_URL = env.str('CELERY_BROKER_URL', 'redis://localhost:6379/0')
CELERY_RESULT_BACKEND = CELERY_BROKER_URL
CELERY_TIMEZONE = TIME_ZONE
CELERY_BEAT_SCHEDULE = {
    'sync-products': {
        'task': 'catalog.tasks.sync_products',
        'schedule': crontab(minute=f'*/{SYNC_INTERVAL_MINUTES}'),
    },
}

# Shared cache so the sync job lock holds across worker processes
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.redis.RedisCache',
        'LOCATION': env.str('REDIS_CACHE_URL', CELERY_BROKER_URL),
    }
}
