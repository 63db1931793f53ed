# coding=utf-8
"""
Biodiversity Hub.

.. note:: Species template tags.
"""

from django import template

from species.cards import (
    DESCRIPTION_PREVIEW_LENGTH,
    truncate_description as _truncate_description
)

register = template.Library()


@register.filter
def truncate_description(value, length=DESCRIPTION_PREVIEW_LENGTH):
    """Truncate description for species card."""
    return _truncate_description(value, int(length))
