"""
Reservation creation and status changes
"""
import logging

from django.conf import settings
from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotFound, ValidationError

from .exceptions import InvalidStatusTransition, QueueNumberUnavailable
from .models import Reservation, STATUS_CHOICES
from .queue import generate_queue_number

queue_logger = logging.getLogger('queue_logger')

RESERVATION_NOT_FOUND = 'Reservasi tidak ditemukan'


def create_reservation(**fields):
    """
    Persist a reservation with a freshly generated queue ticket.

    The (appointment_date, queue_number) unique constraint catches a ticket
    taken between generation and insert; the insert is then retried with a
    new ticket up to RESERVATION_CREATE_RETRIES times.
    """
    appointment_date = fields['appointment_date']
    attempts = settings.RESERVATION_CREATE_RETRIES

    for attempt in range(1, attempts + 1):
        queue_number = generate_queue_number(appointment_date)
        try:
            with transaction.atomic():
                return Reservation.objects.create(queue_number=queue_number, **fields)
        except IntegrityError:
            queue_logger.warning(
                f'Queue number {queue_number} on {appointment_date} taken during insert (attempt {attempt}/{attempts}).'
            )

    raise QueueNumberUnavailable()


def reschedule_reservation(reservation, **fields):
    """
    Move ``reservation`` to ``fields['appointment_date']`` with a ticket for
    that day, saving any other changed ``fields`` along with it.

    Retried on a taken ticket the same way as ``create_reservation``.
    """
    appointment_date = fields['appointment_date']
    attempts = settings.RESERVATION_CREATE_RETRIES
    for attr, value in fields.items():
        setattr(reservation, attr, value)

    for attempt in range(1, attempts + 1):
        reservation.queue_number = generate_queue_number(appointment_date)
        try:
            with transaction.atomic():
                reservation.save()
                return reservation
        except IntegrityError:
            queue_logger.warning(
                f'Queue number {reservation.queue_number} on {appointment_date} taken during reschedule '
                f'(attempt {attempt}/{attempts}).'
            )

    raise QueueNumberUnavailable()


def update_reservation_status(reservation_id, status):
    """Move a reservation along its lifecycle, rejecting illegal transitions."""
    if status not in dict(STATUS_CHOICES):
        raise ValidationError({'status': f'Status tidak dikenal: {status}'})

    with transaction.atomic():
        reservation = (
            Reservation.objects.select_for_update()
            .select_related('doctor', 'service')
            .filter(pk=reservation_id)
            .first()
        )
        if reservation is None:
            raise NotFound(RESERVATION_NOT_FOUND)
        if not reservation.can_transition_to(status):
            raise InvalidStatusTransition(reservation.status, status)

        reservation.status = status
        reservation.save(update_fields=['status', 'updated_at'])

    return reservation
