"""
Production settings for Azure App Service.

App Service injects ``WEBSITE_HOSTNAME``; the database and secret key come
from application settings (``DBHOST``, ``DBNAME``, ``DBUSER``, ``DBPASS``,
``SECRET_KEY``) or a single ``DATABASE_URL``.
"""

import os

from django.core.exceptions import ImproperlyConfigured

from .settings import *  # noqa: F401,F403
from .settings import env_flag
from .database import database_config_from_env

try:
    WEBSITE_HOSTNAME = os.environ['WEBSITE_HOSTNAME']
    SECRET_KEY = os.environ['SECRET_KEY']
except KeyError as exc:
    raise ImproperlyConfigured(f"The {exc.args[0]} environment variable must be set in production") from exc

DEBUG = False

ALLOWED_HOSTS = [WEBSITE_HOSTNAME]
CSRF_TRUSTED_ORIGINS = ['https://' + WEBSITE_HOSTNAME]

DATABASES = {
    'default': database_config_from_env(),
}

# App Service terminates TLS in front of the container
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

SERVE_STATIC = env_flag('SERVE_STATIC', 'true')
