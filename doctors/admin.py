from django.contrib import admin
from .models import Doctor


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'specialty', 'status', 'created_at']
    list_filter = ['specialty', 'status', 'created_at']
    search_fields = ['name', 'specialty']
