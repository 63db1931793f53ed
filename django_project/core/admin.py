# coding=utf-8
"""
Biodiversity Hub.

.. note:: Core admin
"""
from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin

from core.forms import GenerateApiTokenForm, ApiToken

User = get_user_model()

admin.site.site_header = 'Biodiversity Hub'
admin.site.unregister(User)


@admin.register(User)
class CustomUserAdmin(UserAdmin):
    """User admin that shows the number of authored species."""

    list_display = (
        'username', 'email', 'first_name', 'last_name', 'is_staff',
        'species_count'
    )

    def species_count(self, obj):
        """Return number of species authored by user."""
        return obj.species.count()


@admin.register(ApiToken)
class ApiTokenAdmin(admin.ModelAdmin):
    """Generate API token of a user."""

    add_form = GenerateApiTokenForm

    def get_form(self, request, obj=None, **kwargs):
        """Get form of admin."""
        if not obj:
            kwargs['form'] = self.add_form
        form = super(ApiTokenAdmin, self).get_form(request, obj, **kwargs)
        form.request = request
        return form

    def has_change_permission(self, request, obj=None):
        """Token can not be changed."""
        return False

    def has_view_permission(self, request, obj=None):
        """Token digest is not shown."""
        return False
