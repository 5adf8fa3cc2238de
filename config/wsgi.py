"""
WSGI entry point used by gunicorn (``gunicorn config.wsgi``).

Production settings are selected when running on Azure App Service,
which always sets ``WEBSITE_HOSTNAME``.
"""

from django.core.wsgi import get_wsgi_application

from config import configure_settings_module

configure_settings_module()

application = get_wsgi_application()
