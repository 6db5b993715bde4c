"""
Clinic service model
"""
from django.db import models


class Service(models.Model):
    """Bookable clinic service"""
    name = models.CharField('Nama layanan', max_length=100)
    description = models.TextField('Deskripsi', blank=True, null=True)
    price = models.PositiveIntegerField('Harga (Rp)')
    duration = models.PositiveIntegerField('Durasi (menit)')
    icon = models.CharField('Ikon', max_length=50, default='stethoscope')
    color = models.CharField('Warna', max_length=50, default='blue')
    created_at = models.DateTimeField('Dibuat', auto_now_add=True)
    updated_at = models.DateTimeField('Diperbarui', auto_now=True)

    class Meta:
        db_table = 'service'
        verbose_name = 'Layanan'
        verbose_name_plural = 'Layanan'
        ordering = ['name']

    def __str__(self):
        return self.name
