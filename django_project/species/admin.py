# coding=utf-8
"""
Biodiversity Hub.

.. note:: Species admins
"""
from django import forms
from django.contrib import admin

from species.models import Species


class SpeciesAdminForm(forms.ModelForm):
    """Species admin form, blank optional values are stored as NULL."""

    class Meta:  # noqa: D106
        model = Species
        fields = '__all__'
        widgets = {
            'image': forms.TextInput(attrs={'size': 80}),
        }


@admin.register(Species)
class SpeciesAdmin(admin.ModelAdmin):
    """Species admin."""

    form = SpeciesAdminForm
    list_display = (
        'scientific_name', 'common_name', 'kingdom', 'total_population',
        'author', 'updated_at'
    )
    list_filter = ('kingdom',)
    search_fields = ('scientific_name', 'common_name')
    readonly_fields = ('created_at', 'updated_at')

    def get_readonly_fields(self, request, obj=None):
        """Author can not be changed once the species exists."""
        if obj:
            return self.readonly_fields + ('author',)
        return self.readonly_fields
