"""
Reservation URLs
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import ReservationViewSet

router = DefaultRouter()
router.register(r'', ReservationViewSet, basename='reservation')

urlpatterns = [
    path('', include(router.urls)),
    # POST /reservations/ - book (public, queue ticket assigned)
    # GET /reservations/ - list, ?doctor_id= &status= &date= (admin)
    # GET/PUT/PATCH/DELETE /reservations/{id}/ (admin)
    # POST /reservations/{id}/confirm/ | cancel/ | complete/ | status/ (admin)
    # GET /reservations/queue/?date= - queue board (public)
    # GET /reservations/time-slots/ - bookable slots (public)
]
