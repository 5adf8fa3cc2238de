"""
Django settings for the dog shelter site (local development).

Production overrides live in ``config.production`` and are selected
automatically when ``WEBSITE_HOSTNAME`` is present in the environment.
"""

import os
import secrets
import platform
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured
from dotenv import load_dotenv

# Load environment variables from the project root .env file
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent


def env_flag(name, default='false'):
    """Interpret an environment variable as a boolean switch."""
    return os.environ.get(name, default).strip().lower() in ('true', 'on', '1', 'yes')


def ensure_data_directory():
    """Ensure the data directory (database + uploaded media) exists."""
    data_dir = Path(os.environ.get('DATA_DIR') or BASE_DIR / 'data')
    media_dir = data_dir / 'media'
    data_dir.mkdir(parents=True, exist_ok=True)
    media_dir.mkdir(parents=True, exist_ok=True)

    # Only set Unix permissions on non-Windows systems
    if platform.system() != 'Windows':
        try:
            os.chmod(data_dir, 0o755)
            os.chmod(media_dir, 0o755)
        except PermissionError:
            # Mounted volumes may not allow chmod
            pass
    return data_dir


DATA_DIR = ensure_data_directory()

DEBUG = env_flag('DEBUG')

SECRET_KEY = os.environ.get('SECRET_KEY')
if not SECRET_KEY:
    if DEBUG:
        # Per-process key: only safe for a single dev server process
        SECRET_KEY = secrets.token_hex(32)
    else:
        raise ImproperlyConfigured("No SECRET_KEY set for the shelter site. Please set it in your .env file.")

ALLOWED_HOSTS = [h.strip() for h in os.environ.get('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if h.strip()]

SITE_NAME = os.environ.get('SITE_NAME', 'Dog Shelters')

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'shelters.apps.SheltersConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'shelters.context_processors.site_config',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': DATA_DIR / 'shelters.db',
    }
}

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
        'OPTIONS': {'min_length': int(os.environ.get('PASSWORD_MIN_LENGTH', 8))},
    },
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

LOGIN_URL = 'login'
LOGIN_REDIRECT_URL = 'shelters:shelter_list'
LOGOUT_REDIRECT_URL = 'shelters:shelter_list'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = os.environ.get('TIMEZONE') or 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATICFILES_DIRS = [BASE_DIR / 'static']
STATIC_ROOT = BASE_DIR / 'staticfiles'

MEDIA_URL = 'media/'
MEDIA_ROOT = DATA_DIR / 'media'

# Gunicorn does not serve static files; turn this on where no proxy does either
SERVE_STATIC = env_flag('SERVE_STATIC')

# File uploads
DATA_UPLOAD_MAX_MEMORY_SIZE = 10 * 1024 * 1024

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Shared by every worker process; table created by migrations and `createcachetable`
SHELTER_CACHE_TABLE = 'shelter_cache'
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.db.DatabaseCache',
        'LOCATION': SHELTER_CACHE_TABLE,
    }
}
SHELTER_CACHE_TTL = int(os.environ.get('SHELTER_CACHE_TTL', 300))

DOGS_PER_PAGE = int(os.environ.get('DOGS_PER_PAGE', 20))

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s %(levelname)s [%(name)s] %(message)s',
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
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': os.environ.get('DJANGO_LOG_LEVEL', 'WARNING').upper(),
            'propagate': False,
        },
        'shelters': {
            'level': LOG_LEVEL,
        },
    },
}
