# coding=utf-8
"""
Biodiversity Hub.

.. note:: Species views.
"""

from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404
from django.shortcuts import redirect
from django.urls import reverse
from django.views.generic import TemplateView

from species.cards import SpeciesCard, species_detail_rows
from species.dialog import EditSpeciesDialog
from species.exceptions import SpeciesNotFoundException
from species.forms import SpeciesForm
from species.notifications import MessageNotifier
from species.repository import SpeciesRepository


class SpeciesListView(LoginRequiredMixin, TemplateView):
    """Gallery of species cards."""

    template_name = 'species/list.html'
    repository_class = SpeciesRepository

    def setup(self, request, *args, **kwargs):
        """Set the repository of the view."""
        super().setup(request, *args, **kwargs)
        self.repository = self.repository_class()

    def get_species(self):
        """Return species from url, raise 404 if missing."""
        try:
            return self.repository.get(self.kwargs['pk'])
        except SpeciesNotFoundException:
            raise Http404('Species does not exist.')

    def get_context_data(self, **kwargs):
        """Return context with species cards."""
        context = super().get_context_data(**kwargs)
        user = self.request.user
        context['cards'] = [
            {
                'card': SpeciesCard.from_species(species),
                'can_edit': species.is_author(user)
            }
            for species in self.repository.list()
        ]
        return context


class SpeciesDetailView(SpeciesListView):
    """Gallery with read-only detail dialog of a species."""

    def get_context_data(self, **kwargs):
        """Return context with detail of the species."""
        context = super().get_context_data(**kwargs)
        species = self.get_species()
        context['dialog'] = 'detail'
        context['species'] = species
        context['detail_rows'] = species_detail_rows(species)
        return context


class SpeciesEditView(SpeciesListView):
    """Gallery with edit dialog of a species."""

    def setup(self, request, *args, **kwargs):
        """Set refresh flag of the view."""
        super().setup(request, *args, **kwargs)
        self.refreshed = False

    def refresh(self):
        """Ask the listing to fetch the data again."""
        self.refreshed = True

    def get_dialog(self):
        """Return opened edit dialog of the species."""
        dialog = EditSpeciesDialog(
            self.get_species(),
            self.request.user,
            repository=self.repository,
            notifier=MessageNotifier(self.request),
            refresher=self.refresh
        )
        dialog.open()
        return dialog

    def get_context_data(self, dialog=None, form=None, **kwargs):
        """Return context with the edit form."""
        context = super().get_context_data(**kwargs)
        dialog = dialog or self.get_dialog()
        context['dialog'] = 'edit'
        context['species'] = dialog.species
        context['form'] = form or SpeciesForm(initial=dialog.values)
        return context

    def post(self, request, *args, **kwargs):
        """Submit the edit form."""
        if 'cancel' in request.POST:
            return redirect(reverse('species:list'))

        dialog = self.get_dialog()
        data = {
            field: request.POST.get(field)
            for field in SpeciesForm.base_fields if field in request.POST
        }
        if dialog.submit(data) and self.refreshed:
            return redirect(reverse('species:list'))

        form = SpeciesForm(data=dialog.values)
        form.is_valid()
        return self.render_to_response(
            self.get_context_data(dialog=dialog, form=form)
        )
