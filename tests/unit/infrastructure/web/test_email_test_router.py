"""
API tests for the email diagnostics endpoints.
"""

from unittest.mock import AsyncMock, Mock, patch

from app.config import settings
from app.domain.models.notification import NotificationKind, NotificationResult


PREFIX = f"{settings.api_prefix}/email"


def function_response(status_code=200, body=None):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = body if body is not None else {}
    return response


class TestSendTestEmail:
    """Test cases for POST /email/test."""

    def test_sent(self, client, dispatcher):
        dispatcher.notify = AsyncMock(return_value=NotificationResult.sent("msg_42"))

        response = client.post(f"{PREFIX}/test")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["messageId"] == "msg_42"
        assert body["timestamp"]
        assert dispatcher.notify.call_args.args[0] == NotificationKind.CONTACT

    def test_skipped(self, client):
        response = client.post(f"{PREFIX}/test")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["skipped"] is True

    def test_failed(self, client, dispatcher):
        dispatcher.notify = AsyncMock(return_value=NotificationResult.failed("Invalid `from` field"))

        response = client.post(f"{PREFIX}/test")

        assert response.status_code == 500
        assert response.json()["error"] == "Invalid `from` field"

    def test_instructions(self, client):
        response = client.get(f"{PREFIX}/test")

        assert response.status_code == 200
        assert "POST" in response.json()["message"]


class TestEdgeTest:
    """Test cases for POST /email/edge-test."""

    def test_missing_supabase_settings(self, client):
        with patch.object(settings, "supabase_url", None):
            response = client.post(f"{PREFIX}/edge-test")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Missing Supabase env"}

    def test_forwards_sample_payload(self, client):
        with patch.object(settings, "supabase_url", "https://project.supabase.co"), \
                patch.object(settings, "supabase_anon_key", "anon"), \
                patch.object(settings, "mailer_function_url", None), \
                patch(
                    "app.infrastructure.web.routers.email_test.requests.post",
                    return_value=function_response(200, {"success": True, "messageId": "msg_5"})
                ) as post:
            response = client.post(f"{PREFIX}/edge-test")

        assert response.status_code == 200
        assert response.json() == {"success": True, "result": {"success": True, "messageId": "msg_5"}}
        args, kwargs = post.call_args
        assert args[0] == "https://project.supabase.co/functions/v1/mailer"
        assert kwargs["json"]["type"] == "contact"
        assert kwargs["headers"]["Authorization"] == "Bearer anon"

    def test_forwards_given_payload_and_reports_failure(self, client):
        payload = {"type": "build", "data": {"name": "Kofi"}}

        with patch.object(settings, "supabase_url", "https://project.supabase.co"), \
                patch.object(settings, "supabase_anon_key", "anon"), \
                patch(
                    "app.infrastructure.web.routers.email_test.requests.post",
                    return_value=function_response(500, {"success": False, "error": "boom"})
                ) as post:
            response = client.post(f"{PREFIX}/edge-test", json=payload)

        assert response.status_code == 500
        assert response.json()["success"] is False
        assert post.call_args.kwargs["json"] == payload
