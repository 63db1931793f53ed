# coding=utf-8
"""
Biodiversity Hub.

.. note:: Development settings.
"""

from .project import *  # noqa

DEBUG = TEMPLATE_DEBUG = True
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'
