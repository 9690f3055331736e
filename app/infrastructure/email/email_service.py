"""
Notification dispatcher for new lead submissions.
Picks the configured transport and reports every outcome as a result.
"""

import logging
from typing import Any, Dict, Optional

from app.config import settings
from app.domain.models.notification import (
    NotificationKind, NotificationRequest, NotificationResult
)
from app.domain.services.notification_service import NotificationTransport
from .resend_client import get_resend_client
from .template_renderer import EmailTemplateRenderer
from .transports import DirectEmailTransport, RemoteMailerTransport, UnavailableTransport


logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """
    Sends admin notifications for submissions.

    ``notify`` never raises: rendering and transport errors are logged and
    returned as a failed result, so a submission that has been stored is
    never turned into a failed request by its notification.
    """

    def __init__(self, transport: NotificationTransport):
        self.transport = transport

    async def notify(
        self,
        kind: NotificationKind,
        data: Dict[str, Any],
        reply_to: Optional[str] = None
    ) -> NotificationResult:
        """
        Notify the administrators about a submission.

        Args:
            kind: Submission kind
            data: Validated submission fields
            reply_to: Address replies should go to, usually the submitter

        Returns:
            Sent, skipped or failed result
        """
        try:
            request = NotificationRequest(kind=NotificationKind(kind), data=dict(data), reply_to=reply_to)
            result = await self.transport.deliver(request)
        except Exception as e:
            logger.error(f"Failed to dispatch {kind} notification via {self.transport.name}: {str(e)}")
            return NotificationResult.failed(str(e))

        if result.is_sent:
            logger.info(f"{request.kind.value} notification sent (id={result.message_id})")
        elif result.is_skipped:
            logger.warning(f"{request.kind.value} notification skipped: {result.reason}")
        else:
            logger.error(f"{request.kind.value} notification failed: {result.error}")

        return result


def build_transport() -> NotificationTransport:
    """Build the transport selected by NOTIFICATION_TRANSPORT."""
    if settings.notification_transport == "remote":
        return RemoteMailerTransport(
            endpoint=settings.mailer_endpoint,
            headers=settings.get_supabase_headers(),
            timeout=settings.http_timeout_seconds,
        )

    from app.infrastructure.db.database import SessionLocal
    from app.infrastructure.repositories.template_repository import SQLAlchemyEmailTemplateRepository

    return DirectEmailTransport(
        renderer=EmailTemplateRenderer(
            template_repository=SQLAlchemyEmailTemplateRepository(SessionLocal),
            currency_code=settings.budget_currency,
        ),
        client=get_resend_client(),
        from_address=settings.sender_address,
        recipients=settings.admin_recipients,
    )


# Singleton instance
_notification_dispatcher = None

def get_notification_dispatcher() -> NotificationDispatcher:
    """
    Get singleton notification dispatcher.

    Never raises: if the transport cannot be built, a dispatcher that reports
    every notification as failed is returned and the build is retried on the
    next call.
    """
    global _notification_dispatcher
    if _notification_dispatcher is None:
        try:
            transport = build_transport()
        except Exception as e:
            logger.error(f"Failed to build {settings.notification_transport} notification transport: {str(e)}")
            return NotificationDispatcher(UnavailableTransport(str(e)))
        _notification_dispatcher = NotificationDispatcher(transport)
    return _notification_dispatcher
