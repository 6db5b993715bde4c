from rest_framework import serializers
from .models import Service


class ServiceSerializer(serializers.ModelSerializer):
    """Service serializer"""

    class Meta:
        model = Service
        fields = ['id', 'name', 'description', 'price', 'duration', 'icon', 'color', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_duration(self, value):
        if value == 0:
            raise serializers.ValidationError('Durasi harus lebih dari 0 menit')
        return value
