# coding=utf-8
"""
Biodiversity Hub.

.. note:: Frontend Config

    Presentation shell: layout, navbar, theme toggle,
    authentication status and toast notifications.
"""

from django.apps import AppConfig


class FrontendConfig(AppConfig):
    """App Config for Frontend."""

    name = 'frontend'
