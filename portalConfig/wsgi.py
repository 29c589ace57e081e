"""
WSGI config for the admission portal backend.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'portalConfig.settings')

application = get_wsgi_application()
