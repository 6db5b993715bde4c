"""
Queue ticket numbering and live queue board
"""
import logging
import string
from collections import defaultdict

from django.conf import settings
from django.utils import timezone

from doctors.models import Doctor
from .exceptions import QueueNumberUnavailable
from .models import Reservation, ACTIVE_STATUSES

queue_logger = logging.getLogger('queue_logger')

PREFIXES = string.ascii_uppercase


def format_queue_number(ordinal):
    """
    Ticket for the ``ordinal``-th reservation of a day (1-based).

    The letter advances every QUEUE_NUMBERS_PER_PREFIX tickets and cycles
    through A-Z, so 1 -> A001, 999 -> A999, 1000 -> B001. After 26 full
    prefixes the letters wrap around.
    """
    if ordinal < 1:
        raise ValueError('ordinal must be >= 1')
    per_prefix = settings.QUEUE_NUMBERS_PER_PREFIX
    prefix = PREFIXES[(ordinal - 1) // per_prefix % len(PREFIXES)]
    number = (ordinal - 1) % per_prefix + 1
    return f'{prefix}{number:03d}'


def clock_queue_number(prefix, now):
    """Prefix plus the last three digits of the millisecond clock."""
    millis = int(now.timestamp()) * 1000 + now.microsecond // 1000
    return f'{prefix}{millis % 1000:03d}'


def generate_queue_number(target_date=None, now=None):
    """
    Next queue ticket for ``target_date`` (defaults to today).

    The ordinal is derived from the number of reservations already recorded
    for the day, so two concurrent callers can compute the same candidate.
    The candidate is re-checked against storage; when it is taken the ticket
    falls back to the prefix plus clock digits, stepping forward until a free
    one is found. Nothing is written here, the caller persists the ticket.
    """
    target_date = target_date or timezone.localdate()
    day_reservations = Reservation.objects.for_date(target_date)

    candidate = format_queue_number(day_reservations.count() + 1)
    if day_reservations.find_by_queue_number(target_date, candidate) is None:
        return candidate

    now = now or timezone.now()
    prefix = candidate[0]
    fallback = clock_queue_number(prefix, now)
    start = int(fallback[1:])
    for step in range(1000):
        fallback = f'{prefix}{(start + step) % 1000:03d}'
        if day_reservations.find_by_queue_number(target_date, fallback) is None:
            queue_logger.warning(f'Queue number {candidate} taken on {target_date}, issued {fallback} instead.')
            return fallback

    raise QueueNumberUnavailable()


def estimate_wait(waiting_count):
    """Waiting time label, a fixed number of minutes per patient ahead."""
    return f'{waiting_count * settings.QUEUE_MINUTES_PER_PATIENT} menit'


def build_queue_board(doctors, reservations):
    """
    Per-doctor queue state from already loaded doctors and reservations.

    Only active reservations count. Reservations without a doctor, or whose
    doctor is not in ``doctors``, are left out. The current ticket is the
    smallest queue number as a plain string.
    """
    tickets = defaultdict(list)
    for reservation in reservations:
        if reservation.doctor_id is None or reservation.status not in ACTIVE_STATUSES:
            continue
        tickets[reservation.doctor_id].append(reservation.queue_number)

    board = []
    for doctor in sorted(doctors, key=lambda d: (d.name, d.id)):
        doctor_tickets = tickets.get(doctor.id, [])
        waiting_count = len(doctor_tickets)
        board.append({
            'doctor': doctor,
            'current_queue': min(doctor_tickets) if doctor_tickets else None,
            'waiting_count': waiting_count,
            'estimated_time': estimate_wait(waiting_count),
        })
    return board


def get_queue_status(target_date=None):
    """Live queue board of every active doctor for ``target_date`` (defaults to today)."""
    target_date = target_date or timezone.localdate()

    # both reads complete before anything is computed
    doctors = list(Doctor.objects.active())
    reservations = list(
        Reservation.objects.for_date(target_date).active().only('id', 'doctor_id', 'queue_number', 'status')
    )
    return build_queue_board(doctors, reservations)
