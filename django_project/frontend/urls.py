# coding=utf-8
"""
Biodiversity Hub.

.. note:: Frontend urls.
"""

from django.urls import path

from frontend.views import HomeView

urlpatterns = [
    path('', HomeView.as_view(), name='home'),
]
