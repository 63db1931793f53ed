# coding=utf-8
"""
Biodiversity Hub.

.. note:: Unit tests for species form.
"""

from django.test import SimpleTestCase

from species.forms import MAX_TOTAL_POPULATION, SpeciesForm
from species.models import Kingdom


class SpeciesFormTest(SimpleTestCase):
    """Validation and normalization of species submission."""

    def _data(self, **kwargs):
        """Return valid submission overridden by kwargs."""
        data = {
            'scientific_name': 'Panthera leo',
            'common_name': 'Lion',
            'kingdom': 'Animalia',
            'description': 'Big cat.',
            'total_population': 20000,
            'image': 'https://example.com/lion.jpg'
        }
        data.update(kwargs)
        return data

    def _clean(self, **kwargs):
        """Return cleaned data of a valid submission."""
        form = SpeciesForm(data=self._data(**kwargs))
        self.assertTrue(form.is_valid(), form.errors)
        return form.cleaned_data

    def _errors(self, **kwargs):
        """Return field errors of an invalid submission."""
        form = SpeciesForm(data=self._data(**kwargs))
        self.assertFalse(form.is_valid())
        return form.field_errors()

    def test_valid(self):
        """Test valid data is preserved."""
        cleaned = self._clean()
        self.assertEqual(cleaned, self._data())

    def test_scientific_name_required(self):
        """Test scientific name that trims to empty."""
        for value in ['', '   ', '\t\n', None]:
            errors = self._errors(scientific_name=value)
            self.assertEqual(list(errors.keys()), ['scientific_name'])

    def test_scientific_name_trimmed(self):
        """Test scientific name is trimmed."""
        cleaned = self._clean(scientific_name='  Panthera leo ')
        self.assertEqual(cleaned['scientific_name'], 'Panthera leo')

    def test_optional_text_blank_is_none(self):
        """Test blank common name and description become None."""
        for value in ['', '  ', '\n\t', None]:
            cleaned = self._clean(common_name=value, description=value)
            self.assertIsNone(cleaned['common_name'])
            self.assertIsNone(cleaned['description'])

    def test_optional_text_none_is_idempotent(self):
        """Test validating normalized data again gives the same data."""
        cleaned = self._clean(common_name='   ', description='')
        cleaned_again = SpeciesForm(data=cleaned)
        self.assertTrue(cleaned_again.is_valid())
        self.assertEqual(cleaned_again.cleaned_data, cleaned)

    def test_optional_text_trimmed(self):
        """Test common name and description are trimmed."""
        cleaned = self._clean(common_name=' Lion ', description=' Cat. ')
        self.assertEqual(cleaned['common_name'], 'Lion')
        self.assertEqual(cleaned['description'], 'Cat.')

    def test_kingdom_valid(self):
        """Test every kingdom passes unchanged."""
        for kingdom in Kingdom.values:
            cleaned = self._clean(kingdom=kingdom)
            self.assertEqual(cleaned['kingdom'], kingdom)
        self.assertEqual(len(Kingdom.values), 6)

    def test_kingdom_invalid(self):
        """Test kingdom outside of the choices."""
        for kingdom in ['Animal', 'animalia', 'Chromista', 'Viruses', '1']:
            errors = self._errors(kingdom=kingdom)
            self.assertEqual(list(errors.keys()), ['kingdom'])

    def test_kingdom_default(self):
        """Test kingdom defaults to Animalia when unspecified."""
        data = self._data()
        del data['kingdom']
        form = SpeciesForm(data=data)
        self.assertTrue(form.is_valid())
        self.assertEqual(form.cleaned_data['kingdom'], Kingdom.ANIMALIA)
        self.assertEqual(self._clean(kingdom='')['kingdom'], 'Animalia')

    def test_total_population_valid(self):
        """Test positive integers are preserved."""
        for value in [1, 2, 20000, 8000000000]:
            cleaned = self._clean(total_population=value)
            self.assertEqual(cleaned['total_population'], value)
        self.assertEqual(
            self._clean(total_population=' 42 ')['total_population'], 42
        )

    def test_total_population_optional(self):
        """Test empty total population is None."""
        for value in [None, '', '   ']:
            cleaned = self._clean(total_population=value)
            self.assertIsNone(cleaned['total_population'])

    def test_total_population_invalid(self):
        """Test zero, negative and fractional values."""
        for value in [0, -1, -200, 1.5, '0', '-3', '2.5', 'many', True]:
            errors = self._errors(total_population=value)
            self.assertEqual(list(errors.keys()), ['total_population'])

    def test_total_population_too_large(self):
        """Test value larger than the database column can store."""
        cleaned = self._clean(total_population=MAX_TOTAL_POPULATION)
        self.assertEqual(cleaned['total_population'], MAX_TOTAL_POPULATION)
        for value in [MAX_TOTAL_POPULATION + 1, 10 ** 20, str(10 ** 20)]:
            errors = self._errors(total_population=value)
            self.assertEqual(list(errors.keys()), ['total_population'])

    def test_image_valid(self):
        """Test well formed url passes trimmed."""
        cleaned = self._clean(image='  https://example.com/a.png ')
        self.assertEqual(cleaned['image'], 'https://example.com/a.png')

    def test_image_optional(self):
        """Test empty image is None."""
        for value in [None, '', '  ']:
            self.assertIsNone(self._clean(image=value)['image'])

    def test_image_invalid(self):
        """Test malformed url."""
        for value in ['not a url', 'example', 'http://', 'www.example.com']:
            errors = self._errors(image=value)
            self.assertEqual(list(errors.keys()), ['image'])

    def test_multiple_errors(self):
        """Test every invalid field is reported."""
        errors = self._errors(
            scientific_name=' ', kingdom='Nope', total_population=0,
            image='nope'
        )
        self.assertEqual(
            sorted(errors.keys()),
            ['image', 'kingdom', 'scientific_name', 'total_population']
        )
