"""Template context processors for values every page needs."""

from datetime import date

from django.conf import settings


def site_config(request):
    """Make site configuration available in all templates."""
    return {
        'site_name': settings.SITE_NAME,
        'today': date.today(),
    }
