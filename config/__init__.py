import os

DEVELOPMENT_SETTINGS = 'config.settings'
PRODUCTION_SETTINGS = 'config.production'


def select_settings_module(env=None):
    """Azure App Service always sets ``WEBSITE_HOSTNAME``; use production settings there."""
    env = os.environ if env is None else env
    return PRODUCTION_SETTINGS if 'WEBSITE_HOSTNAME' in env else DEVELOPMENT_SETTINGS


def configure_settings_module():
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', select_settings_module())
    return os.environ['DJANGO_SETTINGS_MODULE']
