from datetime import datetime, timezone as dt_timezone
from unittest import mock

import pytest

from reservations.booking import create_reservation
from reservations.exceptions import QueueNumberUnavailable
from reservations.models import Reservation
from reservations.queue import format_queue_number, clock_queue_number, generate_queue_number


def bulk_reserve(day, doctor, service, ordinals):
    Reservation.objects.bulk_create([
        Reservation(
            queue_number=format_queue_number(n),
            patient_name=f'Pasien {n}',
            email=f'pasien{n}@example.com',
            phone='081234567890',
            doctor=doctor,
            service=service,
            appointment_date=day,
            appointment_time='09:00',
        )
        for n in ordinals
    ])


@pytest.mark.parametrize('ordinal, expected', [
    (1, 'A001'),
    (2, 'A002'),
    (999, 'A999'),
    (1000, 'B001'),
    (1998, 'B999'),
    (1999, 'C001'),
    (26 * 999, 'Z999'),
    (26 * 999 + 1, 'A001'),
])
def test_format_queue_number_rolls_prefix_every_999(ordinal, expected):
    assert format_queue_number(ordinal) == expected


def test_format_queue_number_rejects_zero():
    with pytest.raises(ValueError):
        format_queue_number(0)


def test_clock_queue_number_uses_last_three_millisecond_digits():
    now = datetime(2026, 10, 19, 2, 0, 0, 456789, tzinfo=dt_timezone.utc)
    assert clock_queue_number('A', now) == 'A456'


@pytest.mark.django_db
def test_first_ticket_of_the_day_is_a001(today):
    assert generate_queue_number(today) == 'A001'


@pytest.mark.django_db
def test_generate_defaults_to_today(make_reservation):
    make_reservation('A001')
    assert generate_queue_number() == 'A002'


@pytest.mark.django_db
def test_tickets_are_issued_in_order(doctor, service, tomorrow):
    issued = [
        create_reservation(
            patient_name=f'Pasien {i}', email=f'p{i}@example.com', phone='0812',
            doctor=doctor, service=service, appointment_date=tomorrow, appointment_time='09:00',
        ).queue_number
        for i in range(5)
    ]
    assert issued == ['A001', 'A002', 'A003', 'A004', 'A005']


@pytest.mark.django_db
def test_ticket_after_999_reservations_is_b001(doctor, service, today):
    bulk_reserve(today, doctor, service, range(1, 1000))
    assert generate_queue_number(today) == 'B001'


@pytest.mark.django_db
def test_ticket_after_1000_reservations_is_b002(doctor, service, today):
    bulk_reserve(today, doctor, service, range(1, 1001))
    assert generate_queue_number(today) == 'B002'


@pytest.mark.django_db
def test_days_are_numbered_independently(make_reservation, today, tomorrow):
    make_reservation('A001', appointment_date=today)
    assert generate_queue_number(tomorrow) == 'A001'

    make_reservation('A001', appointment_date=tomorrow)
    assert Reservation.objects.filter(queue_number='A001').count() == 2


@pytest.mark.django_db
def test_taken_candidate_falls_back_to_clock_digits(make_reservation, today):
    # ten reservations already recorded, one of them holds A011 (a racing request won)
    for n in list(range(1, 10)) + [11]:
        make_reservation(format_queue_number(n))
    now = datetime(2026, 10, 19, 2, 0, 0, 456000, tzinfo=dt_timezone.utc)

    ticket = generate_queue_number(today, now=now)

    assert ticket == 'A456'
    assert ticket != 'A011'


@pytest.mark.django_db
def test_taken_fallback_steps_forward(make_reservation, today):
    # count 10 -> candidate A011 is taken, clock ticket A456 is taken too
    for n in list(range(1, 9)) + [11]:
        make_reservation(format_queue_number(n))
    make_reservation('A456')
    now = datetime(2026, 10, 19, 2, 0, 0, 456000, tzinfo=dt_timezone.utc)

    assert generate_queue_number(today, now=now) == 'A457'


@pytest.mark.django_db
def test_generated_tickets_are_unique_within_a_day(doctor, service, tomorrow):
    for i in range(30):
        create_reservation(
            patient_name=f'Pasien {i}', email=f'p{i}@example.com', phone='0812',
            doctor=doctor, service=service, appointment_date=tomorrow, appointment_time='10:00',
        )
    tickets = list(Reservation.objects.for_date(tomorrow).values_list('queue_number', flat=True))
    assert len(tickets) == len(set(tickets)) == 30


@pytest.mark.django_db
def test_insert_retries_when_ticket_is_taken_meanwhile(make_reservation, doctor, service, today):
    make_reservation('A001')
    with mock.patch('reservations.booking.generate_queue_number', side_effect=['A001', 'A002']):
        reservation = create_reservation(
            patient_name='Siti', email='siti@example.com', phone='0812',
            doctor=doctor, service=service, appointment_date=today, appointment_time='10:00',
        )
    assert reservation.queue_number == 'A002'


@pytest.mark.django_db
def test_insert_gives_up_after_configured_retries(make_reservation, doctor, service, today, settings):
    settings.RESERVATION_CREATE_RETRIES = 2
    make_reservation('A001')
    with mock.patch('reservations.booking.generate_queue_number', return_value='A001') as generate:
        with pytest.raises(QueueNumberUnavailable):
            create_reservation(
                patient_name='Siti', email='siti@example.com', phone='0812',
                doctor=doctor, service=service, appointment_date=today, appointment_time='10:00',
            )
    assert generate.call_count == 2
    assert Reservation.objects.for_date(today).count() == 1


def test_rollover_every_prefix_size_follows_setting(settings):
    settings.QUEUE_NUMBERS_PER_PREFIX = 10
    assert format_queue_number(10) == 'A010'
    assert format_queue_number(11) == 'B001'


@pytest.mark.django_db
def test_early_fallback_ticket_pushes_later_booking_onto_fallback(make_reservation, today):
    # A012 went out early as a fallback, so the 12th booking finds its ticket taken
    for n in range(1, 11):
        make_reservation(format_queue_number(n))
    make_reservation('A012')
    now = datetime(2026, 10, 19, 2, 0, 0, 789000, tzinfo=dt_timezone.utc)

    ticket = generate_queue_number(today, now=now)

    assert ticket == 'A789'
    assert generate_queue_number(today) != 'A012'
