# coding=utf-8
"""
Biodiversity Hub.

.. note:: Frontend views.
"""

from django.urls import reverse
from django.views.generic.base import RedirectView


class HomeView(RedirectView):
    """Redirect to species list or to login page."""

    permanent = False

    def get_redirect_url(self, *args, **kwargs):
        """Return absolute URL to redirect to."""
        if self.request.user.is_authenticated:
            return reverse('species:list')
        return reverse('login')
