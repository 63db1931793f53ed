# coding=utf-8
"""
Biodiversity Hub.

.. note:: Common serializer class.
"""

from rest_framework import serializers


class APIErrorSerializer(serializers.Serializer):
    """Serializer for error in the API."""

    detail = serializers.CharField()


class FieldErrorSerializer(serializers.Serializer):
    """Serializer for field validation errors."""

    scientific_name = serializers.ListField(
        child=serializers.CharField(), required=False
    )
    common_name = serializers.ListField(
        child=serializers.CharField(), required=False
    )
    kingdom = serializers.ListField(
        child=serializers.CharField(), required=False
    )
    description = serializers.ListField(
        child=serializers.CharField(), required=False
    )
    total_population = serializers.ListField(
        child=serializers.CharField(), required=False
    )
    image = serializers.ListField(
        child=serializers.CharField(), required=False
    )
