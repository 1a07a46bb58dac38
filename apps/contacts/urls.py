from django.urls import path
from . import views

app_name = 'contacts'

# Mounted at /contacts (no trailing slash)
urlpatterns = [
    path('', views.ContactListView.as_view(), name='contact_list'),
    path('/<str:pk>', views.ContactDetailView.as_view(), name='contact_detail'),
]
