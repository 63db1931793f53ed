# coding=utf-8
"""
Biodiversity Hub.

.. note:: Species serializer class.
"""

from rest_framework import serializers

from species.forms import MAX_TOTAL_POPULATION, SpeciesForm
from species.models import Kingdom, Species


class SpeciesSerializer(serializers.ModelSerializer):
    """Serializer for Species."""

    author_username = serializers.CharField(
        source='author.username', read_only=True
    )

    class Meta:  # noqa
        model = Species
        fields = [
            'id', 'author', 'author_username', 'scientific_name',
            'common_name', 'kingdom', 'description', 'total_population',
            'image', 'created_at', 'updated_at'
        ]
        read_only_fields = fields
        swagger_schema_fields = {
            'title': 'Species',
            'example': {
                'id': 1,
                'author': 1,
                'author_username': 'jane.doe',
                'scientific_name': 'Panthera leo',
                'common_name': 'Lion',
                'kingdom': 'Animalia',
                'description': 'Large cat of the genus Panthera.',
                'total_population': 20000,
                'image': 'https://example.com/lion.jpg',
                'created_at': '2024-10-01T00:00:00Z',
                'updated_at': '2024-10-02T00:00:00Z'
            }
        }


class SpeciesFormSerializer(serializers.Serializer):
    """Validate a species submission with :class:`SpeciesForm`.

    Values missing from the request are taken from the species in
    the serializer context, if any.

    The declared fields only describe the request body in the API docs,
    `to_internal_value` validates with :class:`SpeciesForm` instead.
    """

    scientific_name = serializers.CharField()
    common_name = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    kingdom = serializers.ChoiceField(
        choices=Kingdom.values, required=False
    )
    description = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    total_population = serializers.IntegerField(
        required=False, allow_null=True, min_value=1,
        max_value=MAX_TOTAL_POPULATION
    )
    image = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )

    def get_initial_values(self) -> dict:
        """Return current values of the species in the context."""
        species = self.context.get('species', None)
        if species is None:
            return {}
        return SpeciesForm.initial_from_species(species)

    def to_internal_value(self, data):
        """Run the species form, return its cleaned data."""
        values = self.get_initial_values()
        values.update({
            field: data[field] for field in SpeciesForm.base_fields
            if field in data
        })
        form = SpeciesForm(data=values)
        if not form.is_valid():
            raise serializers.ValidationError(form.field_errors())
        return form.cleaned_data


class SpeciesValidationSerializer(serializers.Serializer):
    """Result of live validation."""

    valid = serializers.BooleanField()
    errors = serializers.DictField(
        child=serializers.ListField(child=serializers.CharField())
    )
