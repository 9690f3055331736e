"""
Mailer function.
A standalone ASGI app that renders and sends admin notifications, so the
main API can hand delivery off over HTTP.

Run with: uvicorn app.functions.mailer:app
"""

import asyncio
import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.config import DEFAULT_ADMIN_EMAIL, DEFAULT_FROM_EMAIL, parse_recipients
from app.domain.models.notification import NotificationKind
from app.infrastructure.email.resend_client import ResendClient
from app.infrastructure.email.template_renderer import EmailTemplateRenderer
from app.infrastructure.repositories.template_repository import SupabaseEmailTemplateRepository


logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


class MailerSettings(BaseSettings):
    """Function secrets, read from the environment only."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore"
    )

    resend_api_key: Optional[str] = Field(default=None)
    resend_api_url: str = Field(default="https://api.resend.com/emails")
    resend_from_email: Optional[str] = Field(default=None)
    admin_emails: Optional[str] = Field(default=None)
    supabase_url: Optional[str] = Field(default=None)
    supabase_service_role_key: Optional[str] = Field(default=None)
    budget_currency: str = Field(default="GHS")
    http_timeout_seconds: float = Field(default=10.0)

    @property
    def sender_address(self) -> str:
        return self.resend_from_email or DEFAULT_FROM_EMAIL

    @property
    def admin_recipients(self) -> List[str]:
        if not self.admin_emails:
            return [DEFAULT_ADMIN_EMAIL]
        return parse_recipients(self.admin_emails)


@lru_cache()
def get_mailer_settings() -> MailerSettings:
    return MailerSettings()


def json_response(body: Dict[str, Any], status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """JSON response carrying the CORS headers."""
    return JSONResponse(status_code=status_code, content=body, headers=CORS_HEADERS)


def parse_payload(body: Any) -> Optional[Dict[str, Any]]:
    """Return the payload if it names a known type and carries data."""
    if not isinstance(body, dict):
        return None
    kind = body.get("type")
    data = body.get("data")
    if not kind or not isinstance(data, dict):
        return None
    if kind not in {k.value for k in NotificationKind}:
        return None
    options = body.get("options")
    return {
        "type": NotificationKind(kind),
        "data": data,
        "options": options if isinstance(options, dict) else {},
    }


async def handle(request: Request) -> JSONResponse:
    """Validate, render and send one notification."""
    if request.method == "OPTIONS":
        return PlainTextResponse("ok", headers=CORS_HEADERS)

    if request.method != "POST":
        return json_response({"success": False, "error": "Method not allowed"}, status.HTTP_405_METHOD_NOT_ALLOWED)

    try:
        body = await request.json()
    except ValueError:
        body = None

    payload = parse_payload(body)
    if payload is None:
        return json_response({"success": False, "error": "Invalid payload"}, status.HTTP_400_BAD_REQUEST)

    settings = get_mailer_settings()
    recipients = settings.admin_recipients
    if not recipients:
        return json_response(
            {"success": False, "error": "Missing ADMIN_EMAILS function secret"},
            status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    renderer = EmailTemplateRenderer(
        template_repository=SupabaseEmailTemplateRepository(
            settings.supabase_url,
            settings.supabase_service_role_key,
        ),
        currency_code=settings.budget_currency,
    )
    email = await asyncio.to_thread(renderer.render, payload["type"], payload["data"])

    if not settings.resend_api_key:
        return json_response(
            {"success": False, "error": "Missing RESEND_API_KEY function secret"},
            status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    client = ResendClient(
        fallback_api_key=settings.resend_api_key,
        api_url=settings.resend_api_url,
        timeout=settings.http_timeout_seconds,
    )
    result = await asyncio.to_thread(
        client.send,
        settings.sender_address,
        recipients,
        email.subject,
        email.html,
        email.text,
        payload["options"].get("reply_to"),
    )

    if not result.is_sent:
        return json_response(
            {"success": False, "error": result.error or "Email sending failed"},
            status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return json_response({"success": True, "messageId": result.message_id})


def create_mailer_app() -> FastAPI:
    """Create the mailer function app."""
    mailer = FastAPI(title="Mailer Function", docs_url=None, redoc_url=None, openapi_url=None)

    @mailer.api_route(
        "/{path:path}",
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"],
        include_in_schema=False
    )
    async def entrypoint(request: Request):
        try:
            return await handle(request)
        except Exception as e:
            logger.error(f"Mailer function failed: {str(e)}", exc_info=True)
            return json_response({"success": False, "error": str(e)}, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return mailer


app = create_mailer_app()
