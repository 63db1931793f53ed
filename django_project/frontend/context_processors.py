# coding=utf-8
"""
Biodiversity Hub.

.. note:: Context processors of the presentation shell.
"""

from django.conf import settings


def hub_base_context(request):
    """Return context shared by every page."""
    user = getattr(request, 'user', None)
    return {
        'hub_base_context': {
            'title': settings.SITE_TITLE,
            'description': settings.SITE_DESCRIPTION,
            'is_authenticated': bool(user and user.is_authenticated),
            'username': (
                user.get_username() if user and user.is_authenticated
                else None
            ),
            'navigation': [
                {'name': 'Species', 'url': '/species/'},
            ]
        }
    }
