"""
Django settings for the collection form helpers project.

Used by the test suite and for rendering templates that load
``formcollections_tags``. No database, URLs or views are configured.
"""

import os
from pathlib import Path

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# =============================================================================
# SECURITY SETTINGS
# =============================================================================

SECRET_KEY = os.environ.get('SECRET_KEY', 'fallback-key-for-development-only')

DEBUG = os.environ.get('DJANGO_DEBUG', 'False').lower() in ('true', '1', 'yes')

# =============================================================================
# APPLICATION DEFINITION
# =============================================================================

INSTALLED_APPS = [
    'formcollections.apps.FormCollectionsConfig',
]

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {},
    },
]

DATABASES = {}

USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# =============================================================================
# FORM COLLECTIONS
# =============================================================================

# Emit one hidden "" field after check box collections so an empty selection is still submitted.
FORM_COLLECTIONS_INCLUDE_HIDDEN = os.environ.get('FORM_COLLECTIONS_INCLUDE_HIDDEN', 'True').lower() in ('true', '1', 'yes')

# "xhtml" -> checked="checked", "html5" -> checked
FORM_COLLECTIONS_BOOLEAN_ATTRIBUTES = os.environ.get('FORM_COLLECTIONS_BOOLEAN_ATTRIBUTES', 'xhtml')

# =============================================================================
# LOGGING
# =============================================================================

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'formcollections': {
            'handlers': ['console'],
            'level': os.environ.get('FORM_COLLECTIONS_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
