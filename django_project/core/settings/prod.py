# coding=utf-8
"""
Biodiversity Hub.

.. note:: Production settings.
"""

from .project import *  # noqa

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
