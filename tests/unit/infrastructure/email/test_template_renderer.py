"""
Unit tests for the notification template renderer.
"""

import pytest
from unittest.mock import Mock

from app.domain.models.notification import NotificationKind, RenderedEmail
from app.domain.repositories.template_repository import EmailTemplate, EmailTemplateRepository
from app.infrastructure.email.template_renderer import (
    EmailTemplateRenderer, interpolate, format_amount
)


APPOINTMENT = {
    "name": "Ama Mensah",
    "email": "ama@example.com",
    "phone": "+233201234567",
    "preferred_date": "2025-01-01",
    "preferred_time": "10:00",
}

BUILD_REQUEST = {
    "name": "Kofi Boateng",
    "email": "kofi@example.com",
    "phone": "+233241234567",
    "budget": 1500000,
    "location": "East Legon",
    "property_type": "Villa",
    "bedrooms": 4,
    "bathrooms": 3,
    "timeline": "12 months",
}


def stored_template_repository(template):
    repository = Mock(spec=EmailTemplateRepository)
    repository.get_active.return_value = template
    return repository


class TestInterpolate:
    """Test cases for placeholder substitution."""

    def test_replaces_placeholders_with_optional_whitespace(self):
        result = interpolate("Hi {{name}}, {{ email }}!", {"name": "Ama", "email": "a@b.com"})

        assert result == "Hi Ama, a@b.com!"

    def test_missing_and_none_values_become_empty(self):
        result = interpolate("[{{ missing }}][{{ empty }}]", {"empty": None})

        assert result == "[][]"

    def test_single_pass_does_not_expand_substituted_values(self):
        result = interpolate("{{ a }}", {"a": "{{ b }}", "b": "nested"})

        assert result == "{{ b }}"

    def test_values_are_not_escaped(self):
        result = interpolate("<p>{{ message }}</p>", {"message": "<b>hi</b>"})

        assert result == "<p><b>hi</b></p>"

    def test_empty_template(self):
        assert interpolate(None, {"a": 1}) == ""
        assert interpolate("", {"a": 1}) == ""


class TestFormatAmount:
    """Test cases for thousands-separated amounts."""

    @pytest.mark.parametrize("value,expected", [
        (1500000, "1,500,000"),
        (2500.5, "2,500.50"),
        ("750000", "750,000"),
        (0, "0"),
        ("not a number", ""),
        (None, ""),
    ])
    def test_format_amount(self, value, expected):
        assert format_amount(value) == expected


class TestEmailTemplateRenderer:
    """Test cases for EmailTemplateRenderer."""

    def test_static_appointment_template(self):
        renderer = EmailTemplateRenderer()

        email = renderer.render(NotificationKind.APPOINTMENT, APPOINTMENT)

        assert isinstance(email, RenderedEmail)
        assert email.subject == "New Appointment Booking - Ama Mensah"
        assert "<h2>New Appointment Booking</h2>" in email.html
        assert "2025-01-01" in email.html
        assert "Interest:" not in email.html
        assert email.text.startswith("New Appointment Booking - Ama Mensah\n")
        assert "Time: 10:00" in email.text

    def test_static_template_includes_optional_fields_when_present(self):
        renderer = EmailTemplateRenderer()
        data = {**APPOINTMENT, "property_interest": "Villa 3", "message": "Morning please"}

        email = renderer.render(NotificationKind.APPOINTMENT, data)

        assert "<strong>Interest:</strong> Villa 3" in email.html
        assert "Morning please" in email.text

    def test_static_build_subject_includes_formatted_budget(self):
        renderer = EmailTemplateRenderer(currency_code="GHS")

        email = renderer.render(NotificationKind.BUILD, BUILD_REQUEST)

        assert email.subject == "New Build Request - Kofi Boateng (Budget: GHS 1,500,000)"
        assert "GHS 1,500,000" in email.html
        assert "Bedrooms: 4" in email.text

    def test_static_html_is_escaped(self):
        renderer = EmailTemplateRenderer()
        data = {
            "name": "<script>x</script>",
            "email": "a@b.com",
            "phone": "1",
            "subject": "Hello",
            "message": "Tom & Jerry",
        }

        email = renderer.render(NotificationKind.CONTACT, data)

        assert "<script>" not in email.html
        assert "&lt;script&gt;" in email.html
        assert "Tom &amp; Jerry" in email.html
        assert "Tom & Jerry" in email.text

    def test_static_template_with_missing_fields_does_not_fail(self):
        renderer = EmailTemplateRenderer()

        email = renderer.render(NotificationKind.CONTACT, {})

        assert email.subject == "New Contact Message -"
        assert "<strong>Name:</strong> </p>" in email.html

    def test_dynamic_template_is_preferred(self):
        repository = stored_template_repository(EmailTemplate(
            subject_template="Build for {{ name }} ({{budget_formatted}})",
            html_template="<p>{{ location }} {{ unknown }}</p>",
            text_template="{{ bedrooms }} beds",
        ))
        renderer = EmailTemplateRenderer(template_repository=repository)

        email = renderer.render(NotificationKind.BUILD, BUILD_REQUEST)

        repository.get_active.assert_called_once_with(NotificationKind.BUILD)
        assert email.subject == "Build for Kofi Boateng (1,500,000)"
        assert email.html == "<p>East Legon </p>"
        assert email.text == "4 beds"

    def test_dynamic_template_without_text_body(self):
        repository = stored_template_repository(EmailTemplate(
            subject_template="Hi {{ name }}",
            html_template="<p>{{ message }}</p>",
        ))
        renderer = EmailTemplateRenderer(template_repository=repository)

        email = renderer.render(NotificationKind.CONTACT, {"name": "Ama", "message": "Hello"})

        assert email.text == ""

    def test_falls_back_to_static_when_no_template_stored(self):
        renderer = EmailTemplateRenderer(template_repository=stored_template_repository(None))

        email = renderer.render(NotificationKind.APPOINTMENT, APPOINTMENT)

        assert email.subject == "New Appointment Booking - Ama Mensah"

    def test_falls_back_to_static_when_template_lookup_fails(self):
        repository = Mock(spec=EmailTemplateRepository)
        repository.get_active.side_effect = RuntimeError("database unavailable")
        renderer = EmailTemplateRenderer(template_repository=repository)

        email = renderer.render(NotificationKind.APPOINTMENT, APPOINTMENT)

        assert email.subject == "New Appointment Booking - Ama Mensah"

    def test_accepts_kind_value(self):
        renderer = EmailTemplateRenderer()

        email = renderer.render("contact", {"subject": "Hi"})

        assert email.subject == "New Contact Message - Hi"

    def test_rendering_is_idempotent(self):
        renderer = EmailTemplateRenderer()

        first = renderer.render(NotificationKind.BUILD, BUILD_REQUEST)
        second = renderer.render(NotificationKind.BUILD, BUILD_REQUEST)

        assert first == second

    def test_build_scope_does_not_mutate_input(self):
        renderer = EmailTemplateRenderer()
        data = dict(BUILD_REQUEST)

        scope = renderer.build_scope(data)

        assert scope["budget_formatted"] == "1,500,000"
        assert scope["currency_code"] == "GHS"
        assert "budget_formatted" not in data

    def test_currency_filter_is_registered(self):
        renderer = EmailTemplateRenderer()

        assert renderer.env.filters["currency"](2500.5) == "2,500.50"
        assert renderer.env.filters["currency"](None) == "0"

    def test_whole_float_budget_renders_without_decimal(self):
        repository = stored_template_repository(EmailTemplate(
            subject_template="Budget {{ budget }}",
            html_template="<p>{{ budget }} / {{ bathrooms }}</p>",
        ))
        renderer = EmailTemplateRenderer(template_repository=repository)

        email = renderer.render(NotificationKind.BUILD, {**BUILD_REQUEST, "budget": 750000.0, "bathrooms": 2.5})

        assert email.subject == "Budget 750000"
        assert email.html == "<p>750000 / 2.5</p>"
