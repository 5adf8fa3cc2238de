"""ASGI entry point; settings selection mirrors ``config.wsgi``."""

from django.core.asgi import get_asgi_application

from config import configure_settings_module

configure_settings_module()

application = get_asgi_application()
