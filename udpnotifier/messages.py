"""Notification messages shown to the user."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass


class MessageIcon(enum.IntEnum):
    """Icon shown next to a notification."""

    NO_ICON = 0
    INFORMATION = 1
    WARNING = 2
    CRITICAL = 3


@dataclass(frozen=True)
class Message:
    """A notification: title, body text, icon and display time in milliseconds."""

    title: str = ""
    text: str = ""
    icon: MessageIcon = MessageIcon.NO_ICON
    delay: int = 0

    def with_default_delay(self, default_delay: int) -> Message:
        """Return this message, with ``default_delay`` if no delay was given."""
        if self.delay == 0:
            return dataclasses.replace(self, delay=default_delay)
        return self