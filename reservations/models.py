"""
Reservation model
"""
from django.db import models
from doctors.models import Doctor
from services.models import Service


STATUS_WAITING = 'waiting'
STATUS_CONFIRMED = 'confirmed'
STATUS_CANCELLED = 'cancelled'
STATUS_COMPLETED = 'completed'

STATUS_CHOICES = [
    (STATUS_WAITING, 'Menunggu'),
    (STATUS_CONFIRMED, 'Dikonfirmasi'),
    (STATUS_CANCELLED, 'Dibatalkan'),
    (STATUS_COMPLETED, 'Selesai'),
]

# Reservations that still hold a place in the queue
ACTIVE_STATUSES = (STATUS_WAITING, STATUS_CONFIRMED)

ALLOWED_TRANSITIONS = {
    STATUS_WAITING: {STATUS_CONFIRMED, STATUS_CANCELLED},
    STATUS_CONFIRMED: {STATUS_COMPLETED, STATUS_CANCELLED},
    STATUS_CANCELLED: set(),
    STATUS_COMPLETED: set(),
}

TIME_SLOTS = [
    '08:00', '09:00', '10:00', '11:00',
    '13:00', '14:00', '15:00', '16:00', '17:00',
]


class ReservationQuerySet(models.QuerySet):
    def for_date(self, day):
        return self.filter(appointment_date=day)

    def active(self):
        return self.filter(status__in=ACTIVE_STATUSES)

    def find_by_queue_number(self, day, queue_number):
        return self.filter(appointment_date=day, queue_number=queue_number).first()


class Reservation(models.Model):
    """Patient reservation holding a per-day queue ticket"""
    queue_number = models.CharField('Nomor antrian', max_length=10)
    patient_name = models.CharField('Nama pasien', max_length=100)
    email = models.EmailField('Email')
    phone = models.CharField('Telepon', max_length=20)
    doctor = models.ForeignKey(Doctor, on_delete=models.SET_NULL, null=True, blank=True, related_name='reservations')
    service = models.ForeignKey(Service, on_delete=models.SET_NULL, null=True, blank=True, related_name='reservations')
    appointment_date = models.DateField('Tanggal kunjungan')
    appointment_time = models.CharField('Jam kunjungan', max_length=5)  # HH:MM from TIME_SLOTS
    status = models.CharField('Status', max_length=20, choices=STATUS_CHOICES, default=STATUS_WAITING)
    notes = models.TextField('Catatan', blank=True, null=True)
    created_at = models.DateTimeField('Dibuat', auto_now_add=True)
    updated_at = models.DateTimeField('Diperbarui', auto_now=True)

    objects = ReservationQuerySet.as_manager()

    class Meta:
        db_table = 'reservation'
        verbose_name = 'Reservasi'
        verbose_name_plural = 'Reservasi'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['appointment_date', 'queue_number'], name='unique_queue_number_per_day'),
        ]
        indexes = [
            models.Index(fields=['appointment_date', 'status'], name='reservation_day_status_idx'),
        ]

    def __str__(self):
        return f'{self.queue_number} - {self.patient_name} - {self.appointment_date}'

    def can_transition_to(self, status):
        return status in ALLOWED_TRANSITIONS.get(self.status, set())
