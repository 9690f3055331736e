"""
Email template repository interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from app.domain.models.notification import NotificationKind


@dataclass(frozen=True)
class EmailTemplate:
    """A stored template with ``{{field}}`` placeholders."""

    subject_template: str
    html_template: str
    text_template: Optional[str] = None


class EmailTemplateRepository(ABC):
    """Source of admin-editable notification templates."""

    @abstractmethod
    def get_active(self, kind: NotificationKind) -> Optional[EmailTemplate]:
        """
        Return the most recently updated active template for a kind,
        or None when none is configured.
        """
        pass
