from django.apps import AppConfig


class ReservationsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'reservations'
    verbose_name = 'Reservasi & antrian'

    def ready(self):
        """Register signals"""
        import reservations.signals  # noqa: F401
