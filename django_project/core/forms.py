# coding=utf-8
"""
Biodiversity Hub.

.. note:: API token form.
"""
from datetime import timedelta

from django import forms
from django.contrib import messages
from django.contrib.auth import get_user_model
from knox.models import AuthToken

User = get_user_model()


class ApiToken(AuthToken):
    """Proxy of knox token so it can be generated from admin."""

    class Meta:
        app_label = 'knox'
        proxy = True
        verbose_name = 'API token'


class GenerateApiTokenForm(forms.ModelForm):
    """Generate API token for a user."""

    user = forms.ModelChoiceField(
        queryset=User.objects.filter(is_active=True)
    )
    expiry_days = forms.IntegerField(
        min_value=1, required=False,
        help_text='Leave empty for a token that never expires.'
    )

    class Meta:  # noqa: D106
        model = ApiToken
        fields = ['user']

    def save(self, commit=True):
        """Create the token and show it once to the admin."""
        instance = super(GenerateApiTokenForm, self).save(commit=False)
        expiry_days = self.cleaned_data.get('expiry_days')
        obj, token = AuthToken.objects.create(
            user=instance.user,
            expiry=timedelta(days=expiry_days) if expiry_days else None
        )
        request = getattr(self, 'request', None)
        if request is not None:
            messages.add_message(
                request, messages.SUCCESS,
                f'The new token has been generated, please copy : {token}'
            )
        return obj
