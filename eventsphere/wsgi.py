"""
WSGI config for eventsphere project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'eventsphere.settings')

application = get_wsgi_application()
