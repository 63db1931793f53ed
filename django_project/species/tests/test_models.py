# coding=utf-8
"""
Biodiversity Hub.

.. note:: Unit tests for Species Models.
"""

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.test import TestCase

from core.factories import UserF
from species.factories import SpeciesFactory
from species.models import Kingdom, Species


class SpeciesTest(TestCase):
    """Species test case."""

    def test_create(self):
        """Test create object."""
        species = SpeciesFactory(
            scientific_name='Panthera leo', common_name='Lion'
        )
        self.assertEqual(str(species), 'Lion (Panthera leo)')
        species.common_name = None
        self.assertEqual(str(species), 'Panthera leo')
        self.assertEqual(
            Species(author=species.author).kingdom, Kingdom.ANIMALIA
        )

    def test_is_author(self):
        """Test author check."""
        species = SpeciesFactory()
        self.assertTrue(species.is_author(species.author))
        self.assertFalse(species.is_author(UserF.create()))
        self.assertFalse(species.is_author(None))

    def test_clean(self):
        """Test clean normalizes the text fields."""
        species = SpeciesFactory.build(
            author=UserF.create(),
            scientific_name=' Panthera leo ',
            common_name='   ',
            description='',
            image=' ',
            kingdom=''
        )
        species.clean()
        self.assertEqual(species.scientific_name, 'Panthera leo')
        self.assertIsNone(species.common_name)
        self.assertIsNone(species.description)
        self.assertIsNone(species.image)
        self.assertEqual(species.kingdom, Kingdom.ANIMALIA)

    def test_clean_scientific_name_required(self):
        """Test clean rejects empty scientific name."""
        species = SpeciesFactory.build(
            author=UserF.create(), scientific_name='  '
        )
        with self.assertRaises(ValidationError):
            species.clean()

    def test_constraints(self):
        """Test invalid values are rejected by the database."""
        invalid_values = [
            {'total_population': 0},
            {'scientific_name': ''},
            {'kingdom': 'Viruses'},
        ]
        for values in invalid_values:
            with self.assertRaises(IntegrityError):
                with transaction.atomic():
                    SpeciesFactory(**values)
