"""
Doctor model
"""
import re

from django.core.exceptions import ValidationError
from django.db import models


# Weekday keys in date.weekday() order (Monday first)
WEEKDAYS = ['senin', 'selasa', 'rabu', 'kamis', 'jumat', 'sabtu', 'minggu']

TIME_PATTERN = re.compile(r'^([01]\d|2[0-3]):[0-5]\d$')


def empty_schedule():
    return {day: None for day in WEEKDAYS}


def validate_schedule(value):
    """
    Weekly schedule: weekday -> {"start": "HH:MM", "end": "HH:MM"} or null.
    Missing weekdays are treated as days off.
    """
    if not isinstance(value, dict):
        raise ValidationError('Jadwal harus berupa objek per hari')

    unknown = set(value) - set(WEEKDAYS)
    if unknown:
        raise ValidationError(f'Hari tidak dikenal: {", ".join(sorted(unknown))}')

    for day, slot in value.items():
        if slot is None:
            continue
        if not isinstance(slot, dict) or set(slot) != {'start', 'end'}:
            raise ValidationError(f'Jadwal {day} harus berisi start dan end')
        start, end = slot['start'], slot['end']
        if not (isinstance(start, str) and TIME_PATTERN.match(start)):
            raise ValidationError(f'Jam mulai {day} harus berformat HH:MM')
        if not (isinstance(end, str) and TIME_PATTERN.match(end)):
            raise ValidationError(f'Jam selesai {day} harus berformat HH:MM')
        if start >= end:
            raise ValidationError(f'Jam mulai {day} harus sebelum jam selesai')


class DoctorQuerySet(models.QuerySet):
    def active(self):
        return self.filter(status=True).order_by('name')


class Doctor(models.Model):
    """Doctor"""
    name = models.CharField('Nama', max_length=100)
    specialty = models.CharField('Spesialisasi', max_length=100)
    status = models.BooleanField('Aktif', default=True)
    image_url = models.URLField('Foto', blank=True, null=True)
    schedule = models.JSONField('Jadwal praktik', default=empty_schedule, validators=[validate_schedule])
    created_at = models.DateTimeField('Dibuat', auto_now_add=True)
    updated_at = models.DateTimeField('Diperbarui', auto_now=True)

    objects = DoctorQuerySet.as_manager()

    class Meta:
        db_table = 'doctor'
        verbose_name = 'Dokter'
        verbose_name_plural = 'Dokter'
        ordering = ['name']

    def __str__(self):
        return f'{self.name} - {self.specialty}'

    def schedule_for(self, day):
        """Practice hours on the weekday of ``day``, or None on a day off."""
        return (self.schedule or {}).get(WEEKDAYS[day.weekday()])

    def practices_at(self, day, time_slot):
        """Whether ``time_slot`` (HH:MM) falls inside the practice hours of ``day``."""
        hours = self.schedule_for(day)
        if not hours:
            return False
        # zero padded HH:MM strings compare in clock order
        return hours['start'] <= time_slot < hours['end']
