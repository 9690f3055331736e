"""
Email template repositories.
Active notification templates from the local database or from Supabase.
"""

from typing import Callable, Optional

from sqlalchemy.orm import Session
from supabase import create_client, Client

from app.domain.models.notification import NotificationKind
from app.domain.repositories.template_repository import EmailTemplate, EmailTemplateRepository
from app.infrastructure.db.models import EmailTemplateModel


class SQLAlchemyEmailTemplateRepository(EmailTemplateRepository):
    """Reads active templates from the email_templates table."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_active(self, kind: NotificationKind) -> Optional[EmailTemplate]:
        """Get the most recently updated active template for a kind."""
        with self.session_factory() as session:
            model = (
                session.query(EmailTemplateModel)
                .filter(
                    EmailTemplateModel.type == kind.value,
                    EmailTemplateModel.is_active.is_(True),
                )
                .order_by(EmailTemplateModel.updated_at.desc())
                .first()
            )

            if not model:
                return None

            return EmailTemplate(
                subject_template=model.subject_template,
                html_template=model.html_template,
                text_template=model.text_template,
            )


class SupabaseEmailTemplateRepository(EmailTemplateRepository):
    """
    Reads active templates from the email_templates table through Supabase.

    Used by the mailer function, which has no direct database connection.
    Without a project URL and service role key there is no template source
    and every lookup returns None.
    """

    def __init__(
        self,
        supabase_url: Optional[str],
        service_role_key: Optional[str],
        client: Optional[Client] = None
    ):
        self.supabase_url = supabase_url
        self.service_role_key = service_role_key
        self._client = client

    @property
    def is_configured(self) -> bool:
        return self._client is not None or bool(self.supabase_url and self.service_role_key)

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = create_client(self.supabase_url, self.service_role_key)
        return self._client

    def get_active(self, kind: NotificationKind) -> Optional[EmailTemplate]:
        """Get the most recently updated active template for a kind."""
        if not self.is_configured:
            return None

        response = (
            self.client.table("email_templates")
            .select("subject_template,html_template,text_template")
            .eq("type", kind.value)
            .eq("is_active", True)
            .order("updated_at", desc=True)
            .limit(1)
            .execute()
        )

        rows = response.data or []
        if not rows:
            return None

        row = rows[0]
        return EmailTemplate(
            subject_template=row.get("subject_template") or "",
            html_template=row.get("html_template") or "",
            text_template=row.get("text_template"),
        )
