# fees/urls.py

from django.urls import path
from . import views

app_name = 'fees'

urlpatterns = [
    path('fee-structures', views.fee_structures, name='fee_structures'),
    path('fee-structures/<uuid:pk>', views.fee_structure_detail, name='fee_structure_detail'),
]
