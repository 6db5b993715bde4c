from django.contrib import admin
from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = ['id', 'queue_number', 'patient_name', 'doctor', 'service', 'appointment_date', 'appointment_time', 'status', 'created_at']
    list_filter = ['status', 'appointment_date', 'doctor']
    search_fields = ['queue_number', 'patient_name', 'email', 'phone']
    readonly_fields = ['queue_number', 'created_at', 'updated_at']
    date_hierarchy = 'appointment_date'
