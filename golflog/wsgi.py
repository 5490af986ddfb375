"""
WSGI config for the golflog project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'golflog.settings')

application = get_wsgi_application()
