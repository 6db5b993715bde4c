"""
Dashboard statistics
"""
from datetime import timedelta

from django.conf import settings
from django.db.models import Count, Q

from doctors.models import Doctor
from reservations.models import Reservation, ACTIVE_STATUSES, STATUS_COMPLETED


def average_wait(waiting):
    """
    Average wait in minutes for the summary card.

    Total estimated minutes divided by the number of waiting patients, which
    always comes out at QUEUE_MINUTES_PER_PATIENT (or 0 with nobody waiting).
    """
    if waiting <= 0:
        return 0
    return (waiting * settings.QUEUE_MINUTES_PER_PATIENT) / waiting


def get_queue_summary(target_date):
    """Totals shown above the queue board for one day"""
    counts = Reservation.objects.for_date(target_date).aggregate(
        total=Count('id'),
        served=Count('id', filter=Q(status=STATUS_COMPLETED)),
        waiting=Count('id', filter=Q(status__in=ACTIVE_STATUSES)),
    )
    return {
        'date': target_date,
        'total': counts['total'],
        'served': counts['served'],
        'waiting': counts['waiting'],
        'average_wait': average_wait(counts['waiting']),
    }


def get_dashboard_stats(today):
    """Admin dashboard counters relative to ``today``"""
    week_ago = today - timedelta(days=7)

    today_reservations = Reservation.objects.for_date(today).count()
    week_reservations = Reservation.objects.filter(appointment_date__gte=week_ago).count()
    active_doctors = Doctor.objects.filter(status=True).count()
    # distinct patients (by email) who booked during the last week
    new_patients = (
        Reservation.objects.filter(created_at__date__gte=week_ago)
        .order_by()
        .values('email')
        .distinct()
        .count()
    )

    return {
        'today_reservations': today_reservations,
        'week_reservations': week_reservations,
        'active_doctors': active_doctors,
        'new_patients': new_patients,
    }
