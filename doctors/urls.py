"""
Doctor URLs
"""
from django.urls import path
from .views import DoctorList, DoctorDetail, ToggleDoctorStatus

urlpatterns = [
    path('', DoctorList.as_view(), name='doctor-list'),  # GET list (?active=1, ?specialty=), POST create
    path('<int:pk>/', DoctorDetail.as_view(), name='doctor-detail'),  # GET / PUT / PATCH / DELETE
    path('<int:pk>/toggle-status/', ToggleDoctorStatus.as_view(), name='doctor-toggle-status'),  # POST
]
