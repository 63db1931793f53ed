# coding=utf-8
"""
Biodiversity Hub.

.. note:: Species Config

    Catalogue of species records: the species entity, its validation
    schema and the dialogs used to view and edit a record.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class SpeciesConfig(AppConfig):
    """App Config for Species."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'species'
    verbose_name = _('species')
