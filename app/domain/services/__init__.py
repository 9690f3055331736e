"""
Domain services for the lead-capture backend.
"""

from .notification_service import NotificationTransport

__all__ = [
    "NotificationTransport",
]
