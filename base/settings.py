"""
Django settings for the formfields project.
"""
from pathlib import Path

from .env_config import (
    DEBUG as ENV_DEBUG,
    FORMFIELDS_DEFAULT_FORM_CONTROL as ENV_FORM_CONTROL,
    LOG_LEVEL,
    SECRET_KEY as ENV_SECRET_KEY,
    get_env_variable,
)

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = ENV_SECRET_KEY or 'formfields-development-key-not-for-production'

DEBUG = ENV_DEBUG

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'formfields',
]

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [],
        },
    },
]

DATABASES = {}

# Internationalization
LANGUAGE_CODE = get_env_variable('LANGUAGE_CODE', 'en-us')
USE_I18N = True
USE_TZ = True
TIME_ZONE = 'UTC'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Form control prefix used when a form does not name its own
FORMFIELDS_DEFAULT_FORM_CONTROL = ENV_FORM_CONTROL

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'filters': {
        'field_context': {
            '()': 'formfields.logging_filters.FieldContextFilter',
        },
    },
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} [{form_control}:{field_id}] {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
            'filters': ['field_context'],
        },
    },
    'loggers': {
        'formfields': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
