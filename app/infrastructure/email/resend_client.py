"""
Resend transport client.
Sends email through the Resend HTTP API with a lazily resolved API key.
"""

import logging
import threading
from typing import Iterable, Optional

import requests

from app.config import settings
from app.domain.models.notification import NotificationResult
from app.domain.repositories.secret_repository import SecretRepository


logger = logging.getLogger(__name__)


class ResendClient:
    """
    Client for the Resend email API.

    The API key is looked up once per instance: vault first, then the
    RESEND_API_KEY setting. When neither has a key, every send returns a
    skipped result without looking again.
    """

    def __init__(
        self,
        secret_repository: Optional[SecretRepository] = None,
        fallback_api_key: Optional[str] = None,
        api_key_name: str = "RESEND_API_KEY",
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 10.0
    ):
        self.secret_repository = secret_repository
        self.fallback_api_key = fallback_api_key
        self.api_key_name = api_key_name
        self.api_url = api_url
        self.timeout = timeout

        self._lock = threading.Lock()
        self._resolved = False
        self._api_key: Optional[str] = None

    @property
    def is_configured(self) -> bool:
        """Check if an API key is available."""
        return self._get_api_key() is not None

    def send(
        self,
        from_address: str,
        to: Iterable[str],
        subject: str,
        html: Optional[str] = None,
        text: Optional[str] = None,
        reply_to: Optional[str] = None
    ) -> NotificationResult:
        """
        Send an email.

        Args:
            from_address: Sender address
            to: Recipient addresses (duplicates are dropped)
            subject: Email subject
            html: Optional HTML body
            text: Optional plain text body
            reply_to: Optional Reply-To address

        Returns:
            Sent with the provider message id, Skipped when no API key is
            configured, or Failed with the provider or network error.
        """
        recipients = list(dict.fromkeys(to))

        api_key = self._get_api_key()
        if not api_key:
            logger.warning(
                f"Email sending skipped: no Resend API key configured "
                f"(subject={subject!r}, recipients={len(recipients)})"
            )
            return NotificationResult.skipped()

        payload = {
            "from": from_address,
            "to": recipients,
            "subject": subject,
        }
        if html:
            payload["html"] = html
        if text:
            payload["text"] = text
        if reply_to:
            payload["reply_to"] = reply_to

        try:
            response = requests.post(
                self.api_url,
                json=payload,
                headers={
                    "Authorization": f"Bearer {api_key}",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Resend request failed: {str(e)}")
            return NotificationResult.failed(f"Resend request failed: {str(e)}")

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if not response.ok:
            error = body.get("message") or f"Resend API error ({response.status_code})"
            logger.error(f"Resend rejected email {subject!r}: {error}")
            return NotificationResult.failed(error)

        message_id = body.get("id") or (body.get("data") or {}).get("id")
        logger.info(f"Email sent via Resend: {subject!r} to {', '.join(recipients)} (id={message_id})")
        return NotificationResult.sent(message_id)

    def _get_api_key(self) -> Optional[str]:
        """Return the memoized API key, resolving it on first use."""
        if self._resolved:
            return self._api_key

        with self._lock:
            if not self._resolved:
                self._api_key = self._resolve_api_key()
                self._resolved = True

        return self._api_key

    def _resolve_api_key(self) -> Optional[str]:
        """Look up the API key in the vault, then in the environment settings."""
        try:
            if self.secret_repository is not None:
                vault_key = self.secret_repository.get(self.api_key_name)
                if vault_key:
                    logger.info("Resend API key loaded from vault")
                    return vault_key
                logger.info("No Resend API key in vault, checking environment")

            if self.fallback_api_key:
                logger.info("Resend API key loaded from environment")
                return self.fallback_api_key

            logger.warning(
                f"No Resend API key found in vault or environment; "
                f"set {self.api_key_name} to enable email sending"
            )
            return None

        except Exception as e:
            logger.error(f"Failed to resolve Resend API key from vault: {str(e)}")
            if self.fallback_api_key:
                logger.info("Resend API key loaded from environment after vault failure")
                return self.fallback_api_key
            return None


# Singleton instance
_resend_client = None

def get_resend_client() -> ResendClient:
    """Get singleton Resend client backed by the vault and settings."""
    global _resend_client
    if _resend_client is None:
        from app.infrastructure.repositories.secret_repository import get_secret_repository
        _resend_client = ResendClient(
            secret_repository=get_secret_repository(),
            fallback_api_key=settings.resend_api_key,
            api_key_name=settings.resend_api_key_name,
            api_url=settings.resend_api_url,
            timeout=settings.http_timeout_seconds,
        )
    return _resend_client
