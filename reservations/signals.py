"""
Reservation audit log
"""
import logging

from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver
from .models import Reservation

reservation_logger = logging.getLogger('reservation_logger')


@receiver(post_save, sender=Reservation)
def log_reservation_saved(sender, instance, created, update_fields=None, **kwargs):
    if created:
        reservation_logger.info(
            f"Reservation {instance.queue_number} created for {instance.appointment_date} "
            f"{instance.appointment_time} (doctor={instance.doctor_id}, service={instance.service_id})."
        )
    elif update_fields and 'status' in update_fields:
        reservation_logger.info(
            f"Reservation {instance.queue_number} on {instance.appointment_date} is now {instance.status}."
        )


@receiver(post_delete, sender=Reservation)
def log_reservation_deleted(sender, instance, **kwargs):
    reservation_logger.info(f"Reservation {instance.queue_number} on {instance.appointment_date} deleted.")
