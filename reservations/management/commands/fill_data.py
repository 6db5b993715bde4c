"""
Seed demo doctors, services and today's reservations
Usage: python manage.py fill_data
python manage.py fill_data --clear  # wipe existing data first
"""
from django.core.management.base import BaseCommand
from django.utils import timezone
import random

from doctors.models import Doctor
from services.models import Service
from reservations.booking import create_reservation, update_reservation_status
from reservations.models import Reservation, TIME_SLOTS, STATUS_CONFIRMED, STATUS_COMPLETED


WEEKDAY_HOURS = {'start': '08:00', 'end': '18:00'}

DOCTORS = [
    ('Dr. Sarah Wijaya, Sp.PD', 'Penyakit Dalam'),
    ('Dr. Ahmad Hartono, Sp.JP', 'Jantung & Pembuluh Darah'),
    ('Dr. Lisa Andini, Sp.A', 'Anak'),
    ('Dr. Budi Santoso, Sp.OG', 'Kandungan'),
]

SERVICES = [
    ('Konsultasi Umum', 'Pemeriksaan kesehatan umum dan konsultasi dengan dokter', 150000, 30),
    ('Pemeriksaan Jantung', 'Pemeriksaan lengkap kesehatan jantung dan pembuluh darah', 500000, 60),
    ('Cek Kesehatan Rutin', 'Medical check-up lengkap untuk deteksi dini penyakit', 300000, 45),
    ('Konsultasi Spesialis', 'Konsultasi dengan dokter spesialis sesuai kebutuhan', 400000, 45),
]

PATIENTS = ['Ahmad Wijaya', 'Siti Nurhaliza', 'Budi Santoso', 'Lisa Rahmawati', 'Dewi Lestari',
            'Rudi Hartono', 'Maya Sari', 'Andi Pratama', 'Rina Kusuma', 'Agus Setiawan']


class Command(BaseCommand):
    help = 'Seed demo clinic data'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete existing data before seeding',
        )
        parser.add_argument(
            '--reservations',
            type=int,
            default=20,
            help='Number of reservations to book for today',
        )

    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write(self.style.WARNING('Clearing existing data...'))
            Reservation.objects.all().delete()
            Doctor.objects.all().delete()
            Service.objects.all().delete()
            self.stdout.write(self.style.SUCCESS('Data cleared'))

        doctors = self.create_doctors()
        self.stdout.write(self.style.SUCCESS(f'✓ {len(doctors)} doctors'))

        services = self.create_services()
        self.stdout.write(self.style.SUCCESS(f'✓ {len(services)} services'))

        reservations = self.create_reservations(doctors, services, options['reservations'])
        self.stdout.write(self.style.SUCCESS(f'✓ {len(reservations)} reservations for today'))

    def create_doctors(self):
        """Doctors practising every day so today's bookings always fit"""
        schedule = {day: dict(WEEKDAY_HOURS) for day in
                    ['senin', 'selasa', 'rabu', 'kamis', 'jumat', 'sabtu', 'minggu']}
        return [
            Doctor.objects.create(name=name, specialty=specialty, status=True, schedule=schedule)
            for name, specialty in DOCTORS
        ]

    def create_services(self):
        return [
            Service.objects.create(name=name, description=description, price=price, duration=duration)
            for name, description, price, duration in SERVICES
        ]

    def create_reservations(self, doctors, services, count):
        today = timezone.localdate()
        reservations = []
        for i in range(count):
            name = random.choice(PATIENTS)
            reservation = create_reservation(
                patient_name=name,
                email=f'{name.lower().replace(" ", ".")}{i}@example.com',
                phone=f'0812{random.randint(10000000, 99999999)}',
                doctor=random.choice(doctors),
                service=random.choice(services),
                appointment_date=today,
                appointment_time=random.choice(TIME_SLOTS),
            )
            # walk part of the day through the lifecycle
            roll = random.random()
            if roll < 0.5:
                update_reservation_status(reservation.id, STATUS_CONFIRMED)
            if roll < 0.25:
                update_reservation_status(reservation.id, STATUS_COMPLETED)
            reservations.append(reservation)
        return reservations
