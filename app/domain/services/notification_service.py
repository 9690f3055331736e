"""
Notification transport interface.
Delivers admin notifications for new submissions.
"""

from abc import ABC, abstractmethod

from app.domain.models.notification import NotificationRequest, NotificationResult


class NotificationTransport(ABC):
    """
    Transport interface.
    Implementations must report every outcome as a NotificationResult
    instead of raising.
    """

    name: str = "transport"

    @abstractmethod
    async def deliver(self, request: NotificationRequest) -> NotificationResult:
        """
        Deliver a notification for the given request.
        """
        pass
