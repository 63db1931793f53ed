# coding=utf-8
"""
Biodiversity Hub.

.. note:: Species persistence.
"""

import logging

from django.db import DatabaseError, transaction

from species.exceptions import (
    SpeciesAuthorizationException,
    SpeciesNotFoundException,
    SpeciesPersistenceException
)
from species.models import Species

logger = logging.getLogger(__name__)


class SpeciesRepository:
    """Read and update species records in the database."""

    def list(self):
        """Return queryset of all species for listing."""
        return Species.objects.select_related('author').all()

    def get(self, species_id) -> Species:
        """Return a species by id.

        :param species_id: id of species
        :raises SpeciesNotFoundException: species does not exist
        """
        try:
            return Species.objects.select_related('author').get(
                pk=species_id
            )
        except (Species.DoesNotExist, ValueError, TypeError):
            raise SpeciesNotFoundException(species_id)

    def update(self, species_id, data: dict, user) -> Species:
        """Update mutable fields of a single species.

        The author is checked again against the locked row, a client
        side check is not enough to protect the record.

        :param species_id: id of species
        :param data: normalized field values
        :param user: acting user
        :raises SpeciesAuthorizationException: user is not the author
        :raises SpeciesPersistenceException: the update failed
        :return: updated species
        """
        values = {
            field: data[field] for field in Species.MUTABLE_FIELDS
            if field in data
        }
        try:
            with transaction.atomic():
                try:
                    species = Species.objects.select_for_update().get(
                        pk=species_id
                    )
                except (Species.DoesNotExist, ValueError, TypeError):
                    raise SpeciesNotFoundException(species_id)
                if not species.is_author(user):
                    raise SpeciesAuthorizationException(species_id)
                for field, value in values.items():
                    setattr(species, field, value)
                species.save(
                    update_fields=list(values.keys()) + ['updated_at']
                )
        except DatabaseError as ex:
            logger.error(f'Failed to update species {species_id}: {ex}')
            raise SpeciesPersistenceException(str(ex), species_id)
        logger.info(
            f'Species {species_id} updated by user {user.pk}: '
            f'{", ".join(values.keys())}'
        )
        return species
