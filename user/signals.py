from django.contrib.auth import get_user_model
from django.db.models.signals import post_save
from django.dispatch import receiver
import logging

user_creation_logger = logging.getLogger('user_creation_logger')
User = get_user_model()


@receiver(post_save, sender=User)
def handle_user_created(sender, instance, created, **kwargs):
    """Audit staff account creation"""
    if created:
        user_creation_logger.info(f"User created: '{instance.email}' role={instance.role}.")
