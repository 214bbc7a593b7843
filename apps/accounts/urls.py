# accounts/urls.py

from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Session
    path('auth/csrf', views.csrf_view, name='csrf'),
    path('auth/login', views.login_view, name='login'),
    path('auth/me', views.me_view, name='me'),
    path('auth/logout', views.logout_view, name='logout'),
    path('navigation', views.navigation_view, name='navigation'),
    path('navigation/resolve', views.route_check_view, name='route_check'),

    # Users
    path('users', views.users_collection, name='users'),
    path('users/staff', views.staff_list, name='staff_list'),
    path('users/students', views.student_list, name='student_list'),
    path('users/<uuid:pk>/bank-details', views.update_bank_details, name='update_bank_details'),
]
