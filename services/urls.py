"""
Service URLs
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import ServiceViewSet

router = DefaultRouter()
router.register(r'', ServiceViewSet, basename='service')

urlpatterns = [
    path('', include(router.urls)),
    # GET/POST /services/
    # GET/PUT/PATCH/DELETE /services/{id}/
]
