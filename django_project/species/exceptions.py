# coding=utf-8
"""
Biodiversity Hub.

.. note:: Species exceptions.
"""


class SpeciesAuthorizationException(Exception):
    """User is not the author of the species."""

    def __init__(self, species_id=None):  # noqa
        self.species_id = species_id
        self.message = 'You must be the creator of this species'
        super().__init__(self.message)


class SpeciesPersistenceException(Exception):
    """Species could not be stored or fetched."""

    def __init__(self, message, species_id=None):  # noqa
        self.species_id = species_id
        self.message = message
        super().__init__(self.message)


class SpeciesNotFoundException(SpeciesPersistenceException):
    """Species does not exist."""

    def __init__(self, species_id):  # noqa
        super().__init__(
            f'Species with id {species_id} does not exist.', species_id
        )


class SpeciesDialogStateException(Exception):
    """Dialog action is not allowed in the current state."""

    def __init__(self, action, state):  # noqa
        self.message = f'Cannot {action} species dialog while {state}.'
        super().__init__(self.message)
