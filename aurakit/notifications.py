"""Event data for in-app and shell notifications."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "NotificationSeverity",
    "NotificationSentEventArgs",
    "ShellNotificationSentEventArgs",
]


class NotificationSeverity(IntEnum):
    """Severities of a notification."""

    INFORMATIONAL = 0
    SUCCESS = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class NotificationSentEventArgs:
    """A notification message with its severity and an optional action."""

    message: str
    severity: NotificationSeverity
    action: str = ""
    action_param: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "severity", NotificationSeverity(self.severity))


@dataclass(frozen=True, init=False)
class ShellNotificationSentEventArgs(NotificationSentEventArgs):
    """A notification for the desktop shell, which also carries a title."""

    title: str = ""

    def __init__(
        self,
        title: str,
        message: str,
        severity: NotificationSeverity,
        action: str = "",
        action_param: str = "",
    ) -> None:
        super().__init__(message, severity, action, action_param)
        object.__setattr__(self, "title", title)