# coding=utf-8
"""
Biodiversity Hub.

.. note:: Edit species dialog.

    closed -> editing -> submitting -> closed (success)
                                    -> editing (persistence error)
    editing stays editing on validation or authorization failure.
"""

import logging

from species.exceptions import (
    SpeciesAuthorizationException,
    SpeciesDialogStateException,
    SpeciesPersistenceException
)
from species.forms import SpeciesForm
from species.models import Species
from species.notifications import Notification, NotificationVariant
from species.repository import SpeciesRepository

logger = logging.getLogger(__name__)


class DialogState:
    """State of the edit dialog."""

    CLOSED = 'closed'
    EDITING = 'editing'
    SUBMITTING = 'submitting'


class EditSpeciesDialog:
    """Let the acting user modify a species they authored.

    :param species: species being edited
    :param user: acting user
    :param repository: persistence collaborator, needs ``update``
    :param notifier: callable receiving :class:`Notification`
    :param refresher: callable asking the listing to re-fetch its data
    """

    AUTHORIZATION_ERROR_TITLE = 'You must be the creator of this species'
    PERSISTENCE_ERROR_TITLE = 'Something went wrong'

    def __init__(
            self, species: Species, user, repository=None, notifier=None,
            refresher=None):
        """Initialize the dialog in closed state."""
        self.species = species
        self.user = user
        self.repository = repository or SpeciesRepository()
        self.notifier = notifier or (lambda notification: None)
        self.refresher = refresher or (lambda: None)
        self.state = DialogState.CLOSED
        self.values = {}
        self.errors = {}

    @property
    def is_open(self) -> bool:
        """Return True when the dialog is shown."""
        return self.state != DialogState.CLOSED

    def _check_state(self, action, *states):
        """Raise if the action is not allowed in current state."""
        if self.state not in states:
            raise SpeciesDialogStateException(action, self.state)

    def open(self):
        """Open the dialog with the current values of the species."""
        self._check_state('open', DialogState.CLOSED)
        self.values = SpeciesForm.initial_from_species(self.species)
        self.errors = {}
        self.state = DialogState.EDITING

    def validate(self) -> SpeciesForm:
        """Validate current values and store the field errors."""
        form = SpeciesForm(data=self.values)
        self.errors = {} if form.is_valid() else form.field_errors()
        return form

    def change(self, field, value) -> dict:
        """Change a field value and validate again.

        :return: errors of the current values
        """
        self._check_state('change', DialogState.EDITING)
        if field not in SpeciesForm.base_fields:
            raise KeyError(field)
        self.values[field] = value
        self.validate()
        return self.errors

    def cancel(self):
        """Discard the edits and close the dialog."""
        self._check_state('cancel', DialogState.EDITING)
        self.values = {}
        self.errors = {}
        self.state = DialogState.CLOSED

    def submit(self, data: dict = None) -> bool:
        """Submit the values to the persistence collaborator.

        :param data: values to apply on top of current values
        :return: True when the species is updated and the dialog closed
        """
        if self.state == DialogState.SUBMITTING:
            logger.debug(
                f'Species {self.species.pk} submit ignored, '
                f'previous submit is still pending'
            )
            return False
        self._check_state('submit', DialogState.EDITING)
        if data is not None:
            self.values.update(data)

        form = self.validate()
        if self.errors:
            return False

        if not self.species.is_author(self.user):
            logger.warning(
                f'User {getattr(self.user, "pk", None)} is not the author '
                f'of species {self.species.pk}'
            )
            self.notifier(
                Notification(
                    title=self.AUTHORIZATION_ERROR_TITLE,
                    description='Only the author may edit this species.',
                    variant=NotificationVariant.DESTRUCTIVE
                )
            )
            return False

        self.state = DialogState.SUBMITTING
        try:
            self.species = self.repository.update(
                self.species.pk, form.cleaned_data, self.user
            )
        except SpeciesAuthorizationException as ex:
            self.state = DialogState.EDITING
            self.notifier(
                Notification(
                    title=self.AUTHORIZATION_ERROR_TITLE,
                    description=ex.message,
                    variant=NotificationVariant.DESTRUCTIVE
                )
            )
            return False
        except SpeciesPersistenceException as ex:
            self.state = DialogState.EDITING
            self.notifier(
                Notification(
                    title=self.PERSISTENCE_ERROR_TITLE,
                    description=ex.message,
                    variant=NotificationVariant.DESTRUCTIVE
                )
            )
            return False
        except Exception:
            self.state = DialogState.EDITING
            raise

        # show the normalized values if the dialog is opened again
        self.values = dict(form.cleaned_data)
        self.state = DialogState.CLOSED
        self.refresher()
        return True
