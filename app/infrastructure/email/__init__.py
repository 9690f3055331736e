"""
Email and notification infrastructure.
Handles the Resend client, template rendering, and notification delivery.
"""

from .email_service import NotificationDispatcher, get_notification_dispatcher, build_transport
from .resend_client import ResendClient, get_resend_client
from .template_renderer import EmailTemplateRenderer, interpolate, format_amount
from .transports import DirectEmailTransport, RemoteMailerTransport, UnavailableTransport

__all__ = [
    "NotificationDispatcher",
    "get_notification_dispatcher",
    "build_transport",
    "ResendClient",
    "get_resend_client",
    "EmailTemplateRenderer",
    "interpolate",
    "format_amount",
    "DirectEmailTransport",
    "RemoteMailerTransport",
    "UnavailableTransport"
]
