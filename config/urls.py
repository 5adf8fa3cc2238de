"""
Root URL configuration.

/admin/     -> Django admin site
/accounts/  -> Django auth views (login, logout, password change)
/           -> shelters app
"""

from django.conf import settings
from django.contrib import admin
from django.urls import include, path, re_path
from django.views.static import serve

admin.site.site_header = f"{settings.SITE_NAME} Administration"
admin.site.site_title = settings.SITE_NAME
admin.site.index_title = "Shelter management"

urlpatterns = [
    path('admin/', admin.site.urls),
    path('accounts/', include('django.contrib.auth.urls')),
    path('', include('shelters.urls')),
]

# Uploaded photos are always served by Django; static files only when asked to
urlpatterns += [
    re_path(r'^%s(?P<path>.*)$' % settings.MEDIA_URL.lstrip('/'), serve, {'document_root': settings.MEDIA_ROOT}),
]
if settings.SERVE_STATIC:
    urlpatterns += [
        re_path(r'^%s(?P<path>.*)$' % settings.STATIC_URL.lstrip('/'), serve, {'document_root': settings.STATIC_ROOT}),
    ]
