"""
Unit tests for the shared DTO helpers.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from app.application.dto.base_dto import HealthCheckResponseDTO, field_errors, to_domain_dict
from app.application.dto.submission_dto import CreateContactMessageRequestDTO


CONTACT = {
    "name": "Ama",
    "email": "ama@example.com",
    "phone": "1",
    "subject": "Viewing",
    "message": "Hello",
}


class TestDTOHelpers:
    """Test cases for field_errors and to_domain_dict."""

    def test_field_errors_strip_value_error_prefix(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            CreateContactMessageRequestDTO(**{**CONTACT, "email": "nope", "message": " "})

        assert field_errors(exc_info.value) == [
            {"field": "email", "message": "Invalid email address"},
            {"field": "message", "message": "Message is required"},
        ]

    def test_to_domain_dict_drops_server_fields(self):
        dto = CreateContactMessageRequestDTO(**{**CONTACT, "status": "read", "id": "x"})

        data = to_domain_dict(dto)

        assert data == CONTACT

    def test_health_check_timestamp_defaults(self):
        health = HealthCheckResponseDTO(status="healthy")

        assert health.timestamp is not None
        assert health.dependencies is None
