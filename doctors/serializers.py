"""
Doctor serializers
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers
from .models import Doctor, WEEKDAYS, validate_schedule


class DoctorSerializer(serializers.ModelSerializer):
    """Doctor serializer"""

    class Meta:
        model = Doctor
        fields = ['id', 'name', 'specialty', 'status', 'image_url', 'schedule', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_schedule(self, value):
        try:
            validate_schedule(value)
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.messages)
        # store every weekday so clients always see the full week
        return {day: value.get(day) for day in WEEKDAYS}
