import pytest
from rest_framework.exceptions import NotFound, ValidationError

from reservations.booking import update_reservation_status
from reservations.exceptions import InvalidStatusTransition
from reservations.filters import ReservationFilter
from reservations.models import Reservation


@pytest.mark.django_db
def test_reservation_goes_through_the_lifecycle(make_reservation):
    reservation = make_reservation('A001')

    assert update_reservation_status(reservation.id, 'confirmed').status == 'confirmed'
    assert update_reservation_status(reservation.id, 'completed').status == 'completed'
    reservation.refresh_from_db()
    assert reservation.status == 'completed'


@pytest.mark.parametrize('start, target', [
    ('waiting', 'cancelled'),
    ('confirmed', 'cancelled'),
])
@pytest.mark.django_db
def test_active_reservation_can_be_cancelled(make_reservation, start, target):
    reservation = make_reservation('A001', status=start)
    assert update_reservation_status(reservation.id, target).status == target


@pytest.mark.parametrize('start, target', [
    ('waiting', 'completed'),
    ('waiting', 'waiting'),
    ('confirmed', 'waiting'),
    ('completed', 'cancelled'),
    ('completed', 'waiting'),
    ('cancelled', 'confirmed'),
    ('cancelled', 'waiting'),
])
@pytest.mark.django_db
def test_illegal_transitions_are_rejected(make_reservation, start, target):
    reservation = make_reservation('A001', status=start)

    with pytest.raises(InvalidStatusTransition):
        update_reservation_status(reservation.id, target)

    reservation.refresh_from_db()
    assert reservation.status == start


@pytest.mark.django_db
def test_unknown_status_is_rejected(make_reservation):
    reservation = make_reservation('A001')
    with pytest.raises(ValidationError):
        update_reservation_status(reservation.id, 'no-show')


@pytest.mark.django_db
def test_missing_reservation_is_not_found():
    with pytest.raises(NotFound):
        update_reservation_status(999, 'confirmed')


def test_filter_treats_all_as_no_constraint():
    params = {'doctor_id': 'all', 'status': 'all', 'date': ''}
    assert ReservationFilter.from_query_params(params) == ReservationFilter()


@pytest.mark.parametrize('params', [
    {'doctor_id': 'abc'},
    {'status': 'Menunggu'},
    {'date': '19-10-2026'},
])
def test_filter_rejects_bad_values(params):
    with pytest.raises(ValidationError):
        ReservationFilter.from_query_params(params)


@pytest.mark.django_db
def test_filter_combines_constraints(make_doctor, make_reservation, today, tomorrow):
    other = make_doctor(name='Dr. Ahmad Hartono, Sp.JP')
    wanted = make_reservation('A001', status='confirmed')
    make_reservation('A002')
    make_reservation('A003', status='confirmed', doctor=other)
    make_reservation('A001', status='confirmed', appointment_date=tomorrow)

    reservation_filter = ReservationFilter.from_query_params({
        'doctor_id': str(wanted.doctor_id),
        'status': 'confirmed',
        'date': today.strftime('%Y-%m-%d'),
    })

    assert list(reservation_filter.apply(Reservation.objects.all())) == [wanted]
