# core/urls.py

from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    path('settings', views.site_settings, name='settings'),

    path('alumni', views.alumni_collection, name='alumni'),
    path('alumni/<uuid:pk>', views.alumni_detail, name='alumni_detail'),

    path('featured-teachers', views.featured_teacher_collection, name='featured_teachers'),
    path('featured-teachers/<uuid:pk>', views.featured_teacher_detail, name='featured_teacher_detail'),
]
