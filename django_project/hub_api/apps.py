# coding=utf-8
"""
Biodiversity Hub.

.. note:: App Config for Hub API
"""

from django.apps import AppConfig


class HubApiConfig(AppConfig):
    """App Config for Hub API."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hub_api'
