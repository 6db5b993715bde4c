from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient

from doctors.models import Doctor, WEEKDAYS
from services.models import Service
from reservations.models import Reservation


FULL_WEEK = {day: {'start': '08:00', 'end': '18:00'} for day in WEEKDAYS}


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_user(db):
    return get_user_model().objects.create_superuser(
        email='admin@kliniksehat.id', password='admin@123', full_name='Admin Klinik'
    )


@pytest.fixture
def staff_user(db):
    return get_user_model().objects.create_user(
        email='staf@kliniksehat.id', password='staf@1234', full_name='Staf Klinik'
    )


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def make_doctor(db):
    def make(name='Dr. Sarah Wijaya, Sp.PD', specialty='Penyakit Dalam', status=True, schedule=None):
        return Doctor.objects.create(
            name=name,
            specialty=specialty,
            status=status,
            schedule=FULL_WEEK if schedule is None else schedule,
        )
    return make


@pytest.fixture
def doctor(make_doctor):
    return make_doctor()


@pytest.fixture
def service(db):
    return Service.objects.create(
        name='Konsultasi Umum',
        description='Pemeriksaan kesehatan umum',
        price=150000,
        duration=30,
    )


@pytest.fixture
def today():
    return timezone.localdate()


@pytest.fixture
def tomorrow(today):
    return today + timedelta(days=1)


@pytest.fixture
def make_reservation(db, doctor, service, today):
    def make(queue_number, status='waiting', appointment_date=None, **fields):
        fields.setdefault('doctor', doctor)
        fields.setdefault('service', service)
        return Reservation.objects.create(
            queue_number=queue_number,
            patient_name=fields.pop('patient_name', 'Ahmad Wijaya'),
            email=fields.pop('email', f'{queue_number.lower()}@example.com'),
            phone=fields.pop('phone', '081234567890'),
            appointment_date=appointment_date or today,
            appointment_time=fields.pop('appointment_time', '09:00'),
            status=status,
            **fields,
        )
    return make
