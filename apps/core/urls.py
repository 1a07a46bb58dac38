from django.urls import path
from . import views


app_name = 'core'

# Mounted at /organizations (no trailing slash)
urlpatterns = [
    path('', views.OrganizationListView.as_view(), name='organization_list'),
    path('/<str:pk>', views.OrganizationDetailView.as_view(), name='organization_detail'),
]
