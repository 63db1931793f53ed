# coding=utf-8
"""
Biodiversity Hub.

.. note:: API permissions.
"""

from rest_framework.permissions import BasePermission, SAFE_METHODS

from species.exceptions import SpeciesAuthorizationException


class IsSpeciesAuthorOrReadOnly(BasePermission):
    """Only the author of a species may change it."""

    message = SpeciesAuthorizationException().message

    def has_object_permission(self, request, view, obj):
        """Check whether request user is the author of the species."""
        if request.method in SAFE_METHODS:
            return True
        return obj.is_author(request.user)
