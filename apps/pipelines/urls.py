from django.urls import path
from . import views

app_name = 'pipelines'

urlpatterns = [
    path('', views.PipelineListView.as_view(), name='pipeline_list'),
]
