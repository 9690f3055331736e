"""
Notification value objects.
Requests, rendered emails and delivery results for admin notifications.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class NotificationKind(str, Enum):
    """Form kinds that trigger an admin notification."""
    APPOINTMENT = "appointment"
    BUILD = "build"
    CONTACT = "contact"


class NotificationStatus(str, Enum):
    """Delivery outcome."""
    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"


MISSING_CREDENTIAL = "missing-credential"


@dataclass(frozen=True)
class NotificationRequest:
    """A notification to deliver for a freshly persisted submission."""

    kind: NotificationKind
    data: Dict[str, Any] = field(default_factory=dict)
    reply_to: Optional[str] = None


@dataclass(frozen=True)
class RenderedEmail:
    """Subject and bodies produced by the template renderer."""

    subject: str
    html: str
    text: str


@dataclass(frozen=True)
class NotificationResult:
    """
    Outcome of a notification attempt.

    Exactly one of three variants; build them with ``sent``, ``skipped`` or
    ``failed``. Results are returned, never raised.
    """

    status: NotificationStatus
    message_id: Optional[str] = None
    reason: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def sent(cls, message_id: Optional[str]) -> "NotificationResult":
        return cls(status=NotificationStatus.SENT, message_id=message_id)

    @classmethod
    def skipped(cls, reason: str = MISSING_CREDENTIAL) -> "NotificationResult":
        return cls(status=NotificationStatus.SKIPPED, reason=reason)

    @classmethod
    def failed(cls, error: str) -> "NotificationResult":
        return cls(status=NotificationStatus.FAILED, error=error)

    @property
    def is_sent(self) -> bool:
        return self.status == NotificationStatus.SENT

    @property
    def is_skipped(self) -> bool:
        return self.status == NotificationStatus.SKIPPED

    @property
    def is_failed(self) -> bool:
        return self.status == NotificationStatus.FAILED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "message_id": self.message_id,
            "reason": self.reason,
            "error": self.error,
        }
