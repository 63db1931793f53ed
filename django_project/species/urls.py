# coding=utf-8
"""
Biodiversity Hub.

.. note:: Species urls.
"""

from django.urls import path

from species.views import (
    SpeciesListView, SpeciesDetailView, SpeciesEditView
)

urlpatterns = [
    path('', SpeciesListView.as_view(), name='list'),
    path('<int:pk>/', SpeciesDetailView.as_view(), name='detail'),
    path('<int:pk>/edit/', SpeciesEditView.as_view(), name='edit'),
]
