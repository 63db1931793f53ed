# coding=utf-8
"""
Biodiversity Hub.

.. note:: Species models.
"""

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator, URLValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class Kingdom(models.TextChoices):
    """Top-level taxonomic classification of a species."""

    ANIMALIA = 'Animalia', _('Animalia')
    PLANTAE = 'Plantae', _('Plantae')
    FUNGI = 'Fungi', _('Fungi')
    PROTISTA = 'Protista', _('Protista')
    ARCHAEA = 'Archaea', _('Archaea')
    BACTERIA = 'Bacteria', _('Bacteria')

    @classmethod
    def default(cls):
        """Return kingdom used when none is specified."""
        return cls.ANIMALIA.value


def blank_to_none(value):
    """Trim text value, return None when nothing remains."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


class Species(models.Model):
    """A catalogued organism entry.

    Attributes:
        author (User): User that created the record, the only one
            allowed to edit it.
        scientific_name (str): Binomial name, never empty.
        common_name (str): Vernacular name or None.
        kingdom (str): One of :class:`Kingdom`.
        description (str): Free text or None.
        total_population (int): Positive population estimate or None.
        image (str): External image URL or None.
    """

    MUTABLE_FIELDS = (
        'scientific_name', 'common_name', 'kingdom', 'description',
        'total_population', 'image'
    )

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='species'
    )
    scientific_name = models.CharField(
        max_length=512
    )
    common_name = models.CharField(
        max_length=512, null=True, blank=True
    )
    kingdom = models.CharField(
        max_length=16,
        choices=Kingdom.choices,
        default=Kingdom.ANIMALIA
    )
    description = models.TextField(
        null=True, blank=True
    )
    total_population = models.PositiveBigIntegerField(
        null=True, blank=True,
        validators=[MinValueValidator(1)]
    )
    image = models.TextField(
        null=True, blank=True,
        validators=[URLValidator()],
        help_text=_('External URL of the species image.')
    )
    created_at = models.DateTimeField(
        auto_now_add=True
    )
    updated_at = models.DateTimeField(
        auto_now=True
    )

    class Meta:  # noqa: D106
        ordering = ('scientific_name', 'id')
        db_table = 'species'
        verbose_name_plural = _('species')
        indexes = [
            models.Index(fields=['kingdom'], name='species_kingdom_idx'),
            models.Index(fields=['author'], name='species_author_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=~models.Q(scientific_name=''),
                name='species_scientific_name_not_empty'
            ),
            models.CheckConstraint(
                condition=models.Q(kingdom__in=Kingdom.values),
                name='species_kingdom_valid'
            ),
            models.CheckConstraint(
                condition=(
                    models.Q(total_population__isnull=True) |
                    models.Q(total_population__gte=1)
                ),
                name='species_total_population_positive'
            ),
        ]

    def __str__(self):
        """Return string representation of Species."""
        if self.common_name:
            return f'{self.common_name} ({self.scientific_name})'
        return self.scientific_name

    def clean(self):
        """Normalize text fields the same way the edit form does."""
        self.scientific_name = (self.scientific_name or '').strip()
        if not self.scientific_name:
            raise ValidationError({
                'scientific_name': _('This field is required.')
            })
        self.common_name = blank_to_none(self.common_name)
        self.description = blank_to_none(self.description)
        self.image = blank_to_none(self.image)
        if not self.kingdom:
            self.kingdom = Kingdom.default()

    def is_author(self, user) -> bool:
        """Return True when user is the author of this species."""
        if user is None or not getattr(user, 'pk', None):
            return False
        return self.author_id == user.pk
