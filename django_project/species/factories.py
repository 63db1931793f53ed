# coding=utf-8
"""
Biodiversity Hub.

.. note:: Factory classes for Species
"""
import factory
from factory.django import DjangoModelFactory

from core.factories import UserF
from species.models import Kingdom, Species


class SpeciesFactory(DjangoModelFactory):
    """Factory class for Species model."""

    class Meta:  # noqa
        model = Species

    author = factory.SubFactory(UserF)
    scientific_name = factory.Sequence(
        lambda n: f'Genus species{n}'
    )
    common_name = factory.Faker('word')
    kingdom = Kingdom.ANIMALIA
    description = factory.Faker('paragraph')
    total_population = factory.Faker('pyint', min_value=1, max_value=100000)
    image = factory.Sequence(
        lambda n: f'https://example.com/species/{n}.jpg'
    )
