from django.contrib import admin
from django.urls import path, include

from apps.core.views import health_check_view

# JSON error bodies for requests DRF never sees (unknown routes, crashes)
handler404 = 'apps.core.views.not_found_view'
handler500 = 'apps.core.views.server_error_view'

# Main URL Configuration
# Routes all requests to appropriate apps
# API paths carry no trailing slash: /auth/login, /organizations/<id>

urlpatterns = [

    path('admin/', admin.site.urls),
    path('auth/', include('apps.accounts.urls')),
    path('organizations', include('apps.core.urls')),
    path('contacts', include('apps.contacts.urls')),
    path('interactions', include('apps.interactions.urls')),
    path('pipelines', include('apps.pipelines.urls')),
    path('reports', include('apps.reports.urls')),
    path('', health_check_view, name='health_check'),

]
