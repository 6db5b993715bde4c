from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
from decouple import config


class Command(BaseCommand):
    help = 'Create a single default admin if none exists (idempotent).'

    def handle(self, *args, **options):
        User = get_user_model()
        if User.objects.filter(role='admin').exists():
            self.stdout.write(self.style.WARNING('Admin already exists. No action taken.'))
            return
        # read from .env, with defaults
        email = config('ADMIN_EMAIL', default='admin@kliniksehat.id')
        password = config('ADMIN_PASSWORD', default='admin@123')
        full_name = config('ADMIN_NAME', default='Administrator Klinik')
        user = User.objects.create_superuser(email=email, password=password, full_name=full_name)
        self.stdout.write(self.style.SUCCESS(f'Created admin: {user.email}'))
