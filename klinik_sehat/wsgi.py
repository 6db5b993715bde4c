"""
WSGI config for klinik_sehat project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'klinik_sehat.settings')

application = get_wsgi_application()
