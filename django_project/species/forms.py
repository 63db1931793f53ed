# coding=utf-8
"""
Biodiversity Hub.

.. note:: Species forms.

    The edit form is the canonical shape of a species submission.
    Every field is trimmed first, blank optional values become None,
    then the type and the range/membership checks are applied.
"""

from django import forms
from django.core.validators import URLValidator
from django.utils.translation import gettext_lazy as _

from species.models import Kingdom, Species

# largest value of a bigint column
MAX_TOTAL_POPULATION = 9223372036854775807


class TrimmedIntegerField(forms.IntegerField):
    """Integer field that trims text input before parsing it."""

    def to_python(self, value):
        """Trim string value, blank becomes None."""
        if isinstance(value, str):
            value = value.strip()
        if isinstance(value, bool):
            raise forms.ValidationError(
                self.error_messages['invalid'], code='invalid'
            )
        return super().to_python(value)


class KingdomField(forms.ChoiceField):
    """Closed choice of kingdom, falls back to the default when blank."""

    def __init__(self, **kwargs):
        """Initialize the field with the fixed kingdom choices."""
        kwargs.setdefault('choices', Kingdom.choices)
        kwargs.setdefault('required', False)
        super().__init__(**kwargs)

    def to_python(self, value):
        """Return trimmed kingdom or the default one."""
        value = super().to_python(value)
        value = value.strip() if isinstance(value, str) else value
        return value or Kingdom.default()


class SpeciesForm(forms.Form):
    """Validation schema for a species edit submission."""

    scientific_name = forms.CharField(
        label=_('Scientific Name'),
        max_length=512
    )
    common_name = forms.CharField(
        label=_('Common Name'),
        max_length=512,
        required=False,
        empty_value=None
    )
    total_population = TrimmedIntegerField(
        label=_('Total population'),
        min_value=1,
        max_value=MAX_TOTAL_POPULATION,
        required=False
    )
    kingdom = KingdomField(
        label=_('Kingdom')
    )
    image = forms.CharField(
        label=_('Image URL'),
        required=False,
        empty_value=None,
        validators=[URLValidator()],
        widget=forms.Textarea(attrs={'rows': 2})
    )
    description = forms.CharField(
        label=_('Description'),
        required=False,
        empty_value=None,
        widget=forms.Textarea(attrs={'rows': 4})
    )

    @classmethod
    def initial_from_species(cls, species: Species) -> dict:
        """Return the form values of an existing species."""
        initial = {
            field: getattr(species, field) for field in Species.MUTABLE_FIELDS
        }
        if not initial['kingdom']:
            initial['kingdom'] = Kingdom.default()
        return initial

    def field_errors(self) -> dict:
        """Return errors as dictionary of field name to list of messages."""
        return {
            field: [str(message) for message in messages]
            for field, messages in self.errors.items()
        }
