# coding=utf-8
"""
Biodiversity Hub.

.. note:: WSGI config.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'core.settings.prod')

application = get_wsgi_application()
