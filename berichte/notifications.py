# berichte/notifications.py
import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol

logger = logging.getLogger(__name__)

SUCCESS = 'success'
ERROR = 'error'


@dataclass(frozen=True)
class Notification:
    severity: str
    title: str
    message: str


class NotificationObserver(Protocol):
    def notify(self, notification: Notification) -> None:
        ...


class LoggingObserver:
    """Schreibt Benachrichtigungen ins Log (Erfolg: INFO, Fehler: WARNING)."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def notify(self, notification: Notification) -> None:
        level = logging.WARNING if notification.severity == ERROR else logging.INFO
        self.log.log(level, "%s: %s", notification.title, notification.message)


class NotificationCollector(LoggingObserver):
    """Sammelt Benachrichtigungen einer Anfrage, z. B. für die HTTP-Antwort."""

    def __init__(self, log: Optional[logging.Logger] = None):
        super().__init__(log)
        self.notifications: List[Notification] = []

    def notify(self, notification: Notification) -> None:
        super().notify(notification)
        self.notifications.append(notification)

    @property
    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None

    @property
    def failed(self) -> bool:
        return any(n.severity == ERROR for n in self.notifications)
