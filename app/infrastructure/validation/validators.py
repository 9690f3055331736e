"""
Input validation utilities.
Format checks shared by the submission DTOs.
"""

import math
import re
from typing import Any, Union


# Regex patterns for common validation
PATTERNS = {
    'email': re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'),
}


class DataValidator:
    """Validators for common data formats."""

    @staticmethod
    def validate_email(email: str) -> str:
        """Validate email format."""
        if not isinstance(email, str):
            raise ValueError("Invalid email address")

        email = email.strip()

        if not PATTERNS['email'].match(email):
            raise ValueError("Invalid email address")

        # Check for suspicious patterns
        if any(char in email for char in ['<', '>', '"', '\'']):
            raise ValueError("Invalid email address")

        return email

    @staticmethod
    def validate_required_text(value: Any, message: str) -> Any:
        """Reject empty or whitespace-only strings."""
        if isinstance(value, str) and not value.strip():
            raise ValueError(message)
        return value

    @staticmethod
    def validate_minimum(value: Union[int, float], minimum: Union[int, float], message: str) -> Union[int, float]:
        """Reject numbers below a minimum, and NaN or infinite values."""
        if value is None:
            return value
        if not math.isfinite(value) or value < minimum:
            raise ValueError(message)
        return value
