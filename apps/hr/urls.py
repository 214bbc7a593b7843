# hr/urls.py

from django.urls import path
from . import views

app_name = 'hr'

urlpatterns = [
    path('payroll', views.payroll_list, name='payroll'),
    path('payroll/process', views.process_payroll, name='process_payroll'),
    path('payroll/export', views.export_payroll_excel, name='export_payroll'),
]
