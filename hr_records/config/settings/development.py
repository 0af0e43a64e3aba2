from .base import *

# Use file-based SQLite for local development
DEBUG = True
DEBUG_PROPAGATE_EXCEPTIONS = True

ALLOWED_HOSTS = ["*"]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

# Verbose logging to console and file
LOGGING['handlers']['file'] = {
    'class': 'logging.FileHandler',
    'filename': BASE_DIR / 'django.log',
    'formatter': 'verbose',
}
LOGGING['root'] = {'handlers': ['console', 'file'], 'level': 'DEBUG'}
LOGGING['loggers']['hr_records']['handlers'] = ['console', 'file']
LOGGING['loggers']['hr_records']['level'] = 'DEBUG'
