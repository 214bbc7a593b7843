# notices/urls.py

from django.urls import path
from . import views

app_name = 'notices'

urlpatterns = [
    path('notices', views.notices, name='notices'),
    path('notices/<uuid:pk>', views.notice_detail, name='notice_detail'),
]
