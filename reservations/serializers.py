"""
Reservation serializers
"""
from rest_framework import serializers
from django.utils import timezone
from doctors.models import Doctor
from doctors.serializers import DoctorSerializer
from services.models import Service
from services.serializers import ServiceSerializer
from .booking import create_reservation, reschedule_reservation
from .models import Reservation, STATUS_CHOICES, TIME_SLOTS


class ReservationSerializer(serializers.ModelSerializer):
    """Reservation serializer, doctor and service embedded on read"""
    doctor_id = serializers.PrimaryKeyRelatedField(source='doctor', queryset=Doctor.objects.all())
    service_id = serializers.PrimaryKeyRelatedField(source='service', queryset=Service.objects.all())
    doctor = DoctorSerializer(read_only=True)
    service = ServiceSerializer(read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = Reservation
        fields = ['id', 'queue_number', 'patient_name', 'email', 'phone',
                  'doctor_id', 'service_id', 'doctor', 'service',
                  'appointment_date', 'appointment_time', 'status', 'status_display',
                  'notes', 'created_at', 'updated_at']
        read_only_fields = ['id', 'queue_number', 'status', 'created_at', 'updated_at']

    def _changes(self, field, value):
        return self.instance is None or getattr(self.instance, field) != value

    def validate_appointment_date(self, value):
        """No bookings in the past, an unchanged date on an edit is left alone"""
        if self._changes('appointment_date', value) and value < timezone.localdate():
            raise serializers.ValidationError('Tidak dapat memesan tanggal yang sudah lewat')
        return value

    def validate_appointment_time(self, value):
        if value not in TIME_SLOTS:
            raise serializers.ValidationError(f'Jam kunjungan harus salah satu dari: {", ".join(TIME_SLOTS)}')
        return value

    def validate(self, attrs):
        """Slot must not have passed and the doctor must practise at that time"""
        instance = self.instance
        appointment_date = attrs.get('appointment_date', getattr(instance, 'appointment_date', None))
        appointment_time = attrs.get('appointment_time', getattr(instance, 'appointment_time', None))
        doctor = attrs.get('doctor', getattr(instance, 'doctor', None))

        # only re-check the schedule when the booking itself changes
        changed = {
            key for key in ('appointment_date', 'appointment_time', 'doctor')
            if key in attrs and self._changes(key, attrs[key])
        }
        if instance is not None and not changed:
            return attrs

        now = timezone.localtime()
        slot_moved = instance is None or changed & {'appointment_date', 'appointment_time'}
        if slot_moved and appointment_date == now.date() and appointment_time < now.strftime('%H:%M'):
            raise serializers.ValidationError({'appointment_time': 'Jam kunjungan hari ini sudah lewat'})

        if doctor is None:
            raise serializers.ValidationError({'doctor_id': 'Dokter wajib dipilih'})
        if not doctor.status:
            raise serializers.ValidationError({'doctor_id': 'Dokter sedang tidak aktif'})
        if not doctor.practices_at(appointment_date, appointment_time):
            raise serializers.ValidationError({'appointment_time': 'Dokter tidak praktik pada jadwal tersebut'})

        return attrs

    def create(self, validated_data):
        return create_reservation(**validated_data)

    def update(self, instance, validated_data):
        """Moving a reservation to another day issues a ticket for that day"""
        new_date = validated_data.get('appointment_date')
        if new_date is not None and new_date != instance.appointment_date:
            return reschedule_reservation(instance, **validated_data)
        return super().update(instance, validated_data)


class ReservationStatusSerializer(serializers.Serializer):
    """Status change payload"""
    status = serializers.ChoiceField(choices=STATUS_CHOICES)


class QueueEntrySerializer(serializers.Serializer):
    """One row of the queue board"""
    doctor = DoctorSerializer(read_only=True)
    current_queue = serializers.CharField(allow_null=True, read_only=True)
    waiting_count = serializers.IntegerField(read_only=True)
    estimated_time = serializers.CharField(read_only=True)
