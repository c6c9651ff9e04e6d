"""Transient notifications shown to the shopper after an action."""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class Notification:
    title: str
    message: str
    color: str = "green"
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class NotificationCenter:
    """Collects notifications in the order they were raised."""

    def __init__(self):
        self.notifications: list[Notification] = []

    def success(self, message, title="Success!"):
        return self._push(Notification(title=title, message=message, color="green"))

    def error(self, message, title="Something went wrong"):
        return self._push(Notification(title=title, message=message, color="red"))

    @property
    def latest(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None

    def dismiss_all(self):
        self.notifications.clear()

    def _push(self, notification):
        self.notifications.append(notification)
        return notification
