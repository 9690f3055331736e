"""
Notification transports.
Direct delivery through the Resend client, or delegation to the remote
mailer function over HTTP.
"""

import asyncio
import logging
from typing import Dict, List, Optional

import requests

from app.domain.models.notification import NotificationRequest, NotificationResult
from app.domain.services.notification_service import NotificationTransport
from .resend_client import ResendClient
from .template_renderer import EmailTemplateRenderer


logger = logging.getLogger(__name__)


class DirectEmailTransport(NotificationTransport):
    """Renders locally and sends through the Resend API."""

    name = "direct"

    def __init__(
        self,
        renderer: EmailTemplateRenderer,
        client: ResendClient,
        from_address: str,
        recipients: List[str]
    ):
        self.renderer = renderer
        self.client = client
        self.from_address = from_address
        self.recipients = recipients

    async def deliver(self, request: NotificationRequest) -> NotificationResult:
        email = await asyncio.to_thread(self.renderer.render, request.kind, request.data)
        return await asyncio.to_thread(
            self.client.send,
            self.from_address,
            self.recipients,
            email.subject,
            email.html,
            email.text,
            request.reply_to,
        )


class RemoteMailerTransport(NotificationTransport):
    """
    Posts the notification to the remote mailer function.

    The function renders and sends on its own; this side only maps its JSON
    answer onto a NotificationResult.
    """

    name = "remote"

    def __init__(
        self,
        endpoint: Optional[str],
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 10.0
    ):
        self.endpoint = endpoint
        self.headers = headers or {"Content-Type": "application/json"}
        self.timeout = timeout

    async def deliver(self, request: NotificationRequest) -> NotificationResult:
        if not self.endpoint:
            logger.warning("Remote mailer skipped: no mailer function URL configured")
            return NotificationResult.skipped()

        payload = {"type": request.kind.value, "data": request.data}
        if request.reply_to:
            payload["options"] = {"reply_to": request.reply_to}

        return await asyncio.to_thread(self._post, payload)

    def _post(self, payload: dict) -> NotificationResult:
        try:
            response = requests.post(
                self.endpoint,
                json=payload,
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Mailer function request failed: {str(e)}")
            return NotificationResult.failed(f"Mailer function request failed: {str(e)}")

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.ok and body.get("success"):
            message_id = body.get("messageId")
            logger.info(f"Mailer function sent {payload['type']} notification (id={message_id})")
            return NotificationResult.sent(message_id)

        error = body.get("error") or f"Mailer function error ({response.status_code})"
        logger.error(f"Mailer function rejected {payload['type']} notification: {error}")
        return NotificationResult.failed(str(error))


class UnavailableTransport(NotificationTransport):
    """Stands in when the configured transport could not be built."""

    name = "unavailable"

    def __init__(self, error: str):
        self.error = error

    async def deliver(self, request: NotificationRequest) -> NotificationResult:
        return NotificationResult.failed(f"Notification transport unavailable: {self.error}")
