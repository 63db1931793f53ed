# coding=utf-8
"""
Biodiversity Hub.

.. note:: Transient user notifications (toasts).
"""

from dataclasses import dataclass

from django.contrib import messages


class NotificationVariant:
    """Severity marker of a notification."""

    DEFAULT = 'default'
    DESTRUCTIVE = 'destructive'


@dataclass
class Notification:
    """Short message shown to the user."""

    title: str
    description: str = ''
    variant: str = NotificationVariant.DEFAULT


class MessageNotifier:
    """Deliver notifications through django messages framework.

    The variant is stored in the message tags so the toast host can
    style destructive notifications.
    """

    LEVELS = {
        NotificationVariant.DEFAULT: messages.SUCCESS,
        NotificationVariant.DESTRUCTIVE: messages.ERROR,
    }

    def __init__(self, request):
        """Initialize the notifier for a request."""
        self.request = request

    def __call__(self, notification: Notification):
        """Add the notification to the request messages."""
        text = notification.title
        if notification.description:
            text = f'{notification.title}: {notification.description}'
        messages.add_message(
            self.request,
            self.LEVELS.get(notification.variant, messages.INFO),
            text,
            extra_tags=notification.variant
        )
