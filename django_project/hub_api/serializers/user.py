# coding=utf-8
"""
Biodiversity Hub.

.. note:: User serializer class.
"""

from django.contrib.auth import get_user_model
from rest_framework import serializers

User = get_user_model()


class UserInfoSerializer(serializers.ModelSerializer):
    """Serializer for the authenticated user.

    The id is compared with the author of a species.
    """

    species_count = serializers.SerializerMethodField()

    def get_species_count(self, obj):
        """Return number of species authored by the user."""
        return obj.species.count()

    class Meta:  # noqa
        model = User
        fields = [
            'id', 'username', 'email', 'first_name', 'last_name',
            'species_count'
        ]
        swagger_schema_fields = {
            'title': 'User Info',
            'example': {
                'id': 1,
                'username': 'jane.doe@example.com',
                'email': 'jane.doe@example.com',
                'first_name': 'Jane',
                'last_name': 'Doe',
                'species_count': 3
            }
        }
