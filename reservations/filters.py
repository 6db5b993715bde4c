"""
Reservation list filters
"""
from dataclasses import dataclass
import datetime
from typing import Optional

from rest_framework.exceptions import ValidationError

from .models import STATUS_CHOICES

# value sent by the admin screens for "no filter"
ALL = 'all'


@dataclass
class ReservationFilter:
    """Optional constraints on the reservation list, combined with AND."""
    doctor_id: Optional[int] = None   # reservations of this doctor
    status: Optional[str] = None      # reservations in this lifecycle status
    date: Optional[datetime.date] = None  # reservations on this appointment date

    @classmethod
    def from_query_params(cls, params):
        doctor_id = params.get('doctor_id')
        status = params.get('status')
        day = params.get('date')

        if doctor_id in (None, '', ALL):
            doctor_id = None
        else:
            try:
                doctor_id = int(doctor_id)
            except (TypeError, ValueError):
                raise ValidationError({'doctor_id': 'doctor_id harus berupa angka'})

        if status in (None, '', ALL):
            status = None
        elif status not in dict(STATUS_CHOICES):
            raise ValidationError({'status': f'Status tidak dikenal: {status}'})

        if day in (None, ''):
            day = None
        else:
            day = parse_date_param(day, 'date')

        return cls(doctor_id=doctor_id, status=status, date=day)

    def apply(self, queryset):
        if self.doctor_id is not None:
            queryset = queryset.filter(doctor_id=self.doctor_id)
        if self.status is not None:
            queryset = queryset.filter(status=self.status)
        if self.date is not None:
            queryset = queryset.filter(appointment_date=self.date)
        return queryset


def parse_date_param(value, field='date'):
    """YYYY-MM-DD query parameter to a date"""
    try:
        return datetime.datetime.strptime(value, '%Y-%m-%d').date()
    except (TypeError, ValueError):
        raise ValidationError({field: 'Format tanggal harus YYYY-MM-DD'})
