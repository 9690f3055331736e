"""
Email template renderer.
Renders admin notifications from stored templates, falling back to the
built-in Jinja2 templates.
"""

import re
import logging
from typing import Any, Dict, Optional

from jinja2 import Environment, DictLoader, select_autoescape

from app.domain.models.notification import NotificationKind, RenderedEmail
from app.domain.repositories.template_repository import EmailTemplate, EmailTemplateRepository
from .static_templates import STATIC_TEMPLATES


logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def format_amount(value: Any) -> str:
    """Format a number with thousands separators, or return "" if it is not numeric."""
    if value is None or isinstance(value, bool):
        return ""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return ""
    if number != number:  # NaN
        return ""
    if number.is_integer():
        return f"{int(number):,}"
    return f"{number:,.2f}"


def _whole_number(value: Any) -> Any:
    """Turn floats such as 750000.0 into ints so they render without ".0"."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def interpolate(template: Optional[str], scope: Dict[str, Any]) -> str:
    """
    Replace ``{{ field }}`` placeholders with values from scope.

    Single pass: substituted values are never expanded again. Missing or
    None values become an empty string.
    """
    if not template:
        return ""

    def _substitute(match: "re.Match[str]") -> str:
        value = scope.get(match.group(1))
        return "" if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(_substitute, template)


class EmailTemplateRenderer:
    """Renders notification emails for each submission kind."""

    def __init__(
        self,
        template_repository: Optional[EmailTemplateRepository] = None,
        currency_code: str = "GHS"
    ):
        self.template_repository = template_repository
        self.currency_code = currency_code

        self.env = Environment(
            loader=DictLoader(STATIC_TEMPLATES),
            autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=False),
        )
        self._register_filters()

    def _register_filters(self):
        """Register custom Jinja2 filters for the built-in templates."""

        def format_currency(value):
            return format_amount(value or 0)

        self.env.filters["currency"] = format_currency

    def build_scope(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Copy the submission data and add derived placeholders."""
        scope = {key: _whole_number(value) for key, value in data.items()}
        if "budget" in scope:
            scope["budget_formatted"] = format_amount(scope.get("budget") or 0)
        scope["currency_code"] = self.currency_code
        return scope

    def render(self, kind: NotificationKind, data: Dict[str, Any]) -> RenderedEmail:
        """
        Render subject and bodies for a notification.

        Args:
            kind: Submission kind
            data: Submission fields

        Returns:
            Rendered email; never raises for missing fields
        """
        kind = NotificationKind(kind)
        scope = self.build_scope(data)

        template = self._fetch_template(kind)
        if template is not None:
            logger.debug(f"Rendering {kind.value} notification from stored template")
            return self.render_dynamic(template, scope)

        return self.render_static(kind, scope)

    def render_dynamic(self, template: EmailTemplate, scope: Dict[str, Any]) -> RenderedEmail:
        """Render a stored template by placeholder substitution."""
        return RenderedEmail(
            subject=interpolate(template.subject_template, scope),
            html=interpolate(template.html_template, scope),
            text=interpolate(template.text_template, scope),
        )

    def render_static(self, kind: NotificationKind, scope: Dict[str, Any]) -> RenderedEmail:
        """Render the built-in template for a kind."""
        subject = self.env.get_template(f"{kind.value}.subject").render(**scope)
        html = self.env.get_template(f"{kind.value}.html").render(**scope)
        text = self.env.get_template(f"{kind.value}.txt").render(**scope)
        return RenderedEmail(subject=subject.strip(), html=html.strip(), text=text)

    def _fetch_template(self, kind: NotificationKind) -> Optional[EmailTemplate]:
        """Look up the active stored template, or None to use the built-in one."""
        if self.template_repository is None:
            return None
        try:
            return self.template_repository.get_active(kind)
        except Exception as e:
            logger.warning(f"Failed to load stored {kind.value} template, using built-in: {str(e)}")
            return None
