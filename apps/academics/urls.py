# academics/urls.py

from django.urls import path
from . import views

app_name = 'academics'

urlpatterns = [
    path('classes', views.classes, name='classes'),
    path('subjects', views.subjects, name='subjects'),
    path('timetable', views.timetable, name='timetable'),
    path('timetable/<uuid:pk>', views.timetable_detail, name='timetable_detail'),
    path('results', views.results, name='results'),
    path('results/slip.pdf', views.export_result_slip_pdf, name='result_slip_pdf'),
]
