# coding=utf-8
"""
Biodiversity Hub.

.. note:: Species card and detail presentation.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from species.models import Species

DESCRIPTION_PREVIEW_LENGTH = 150
ELLIPSIS = '...'


def truncate_description(
        description: Optional[str],
        length: int = DESCRIPTION_PREVIEW_LENGTH) -> str:
    """Return preview of description, empty string when absent."""
    if not description:
        return ''
    description = description.strip()
    if not description:
        return ''
    return description[:length] + ELLIPSIS


@dataclass
class SpeciesCard:
    """Compact preview of a species for the listing."""

    id: int
    scientific_name: str
    common_name: str
    image: Optional[str]
    description_preview: str

    @classmethod
    def from_species(cls, species: Species) -> 'SpeciesCard':
        """Build the card of a species."""
        return cls(
            id=species.pk,
            scientific_name=species.scientific_name,
            common_name=species.common_name or '',
            image=species.image or None,
            description_preview=truncate_description(species.description)
        )


DETAIL_FIELDS = (
    ('scientific_name', 'Scientific Name'),
    ('common_name', 'Common Name'),
    ('total_population', 'Total Population'),
    ('kingdom', 'Kingdom'),
    ('description', 'Description'),
    ('image', 'Image URL'),
)


def species_detail_rows(species: Species) -> List[Tuple[str, str]]:
    """Return label and value of every species field.

    Absent values are rendered as empty string.
    """
    rows = []
    for field, label in DETAIL_FIELDS:
        value = getattr(species, field)
        rows.append((label, '' if value is None else str(value)))
    return rows
