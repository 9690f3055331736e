"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import List, Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, validator
from pathlib import Path

# Get the base directory
BASE_DIR = Path(__file__).resolve().parent.parent

DEFAULT_FROM_EMAIL = "onboarding@resend.dev"
DEFAULT_ADMIN_EMAIL = "nandysvilla.homes@gmail.com"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")

    # API Configuration
    api_title: str = Field(default="Nandy's Villa Leads API")
    api_version: str = Field(default="1.0.0")
    api_prefix: str = Field(default="/api/v1")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Supabase Configuration
    supabase_url: Optional[str] = Field(default=None, description="Supabase project URL")
    supabase_anon_key: Optional[str] = Field(default=None, description="Supabase anonymous key")
    supabase_service_role_key: Optional[str] = Field(default=None, description="Supabase service role key")

    # Database
    database_url: str = Field(
        default=f"sqlite:///{BASE_DIR / 'leads.db'}",
        description="SQLAlchemy database URL"
    )

    # CORS
    cors_origins: str | List[str] = Field(default="http://localhost:3000")
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(default=["*"])
    cors_allow_headers: List[str] = Field(default=["*"])

    # Email provider (Resend)
    resend_api_key: Optional[str] = Field(default=None, description="Fallback when the vault has no key")
    resend_api_url: str = Field(default="https://api.resend.com/emails")
    resend_api_key_name: str = Field(default="RESEND_API_KEY", description="Vault key holding the API key")
    resend_from_email: Optional[str] = Field(default=None)
    admin_emails: Optional[str] = Field(default=None, description="Comma-separated admin recipients")
    http_timeout_seconds: float = Field(default=10.0)

    # Notification transport: "direct" calls Resend, "remote" calls the mailer function
    notification_transport: str = Field(default="direct")
    mailer_function_url: Optional[str] = Field(default=None)

    # Localization
    budget_currency: str = Field(default="GHS")

    @validator("cors_origins", pre=True)
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            if not v or v.strip() == "":
                return ["http://localhost:3000"]
            return [origin.strip() for origin in v.split(",")]
        elif v is None:
            return ["http://localhost:3000"]
        return v

    @validator("notification_transport")
    def validate_notification_transport(cls, v):
        """Only the direct and remote transports exist."""
        value = (v or "direct").strip().lower()
        if value not in ("direct", "remote"):
            raise ValueError("notification_transport must be 'direct' or 'remote'")
        return value

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def sender_address(self) -> str:
        """Sender address, falling back to the provider's sandbox address."""
        return self.resend_from_email or DEFAULT_FROM_EMAIL

    @property
    def admin_recipients(self) -> List[str]:
        """Administrator recipients parsed from ADMIN_EMAILS."""
        return parse_recipients(self.admin_emails) or [DEFAULT_ADMIN_EMAIL]

    @property
    def mailer_endpoint(self) -> Optional[str]:
        """URL of the remote mailer function."""
        if self.mailer_function_url:
            return self.mailer_function_url
        if self.supabase_url:
            return f"{self.supabase_url.rstrip('/')}/functions/v1/mailer"
        return None

    def get_supabase_headers(self) -> dict:
        """Get headers for Supabase function requests."""
        return {
            "apikey": self.supabase_anon_key or "",
            "Authorization": f"Bearer {self.supabase_anon_key or ''}",
            "Content-Type": "application/json",
        }

    def validate_environment(self) -> None:
        """Validate that all required environment variables are set."""
        required_vars = ["database_url"]
        if self.notification_transport == "remote" and not self.mailer_function_url:
            required_vars += ["supabase_url", "supabase_anon_key"]

        missing_vars = []
        for var in required_vars:
            if not getattr(self, var, None):
                missing_vars.append(var.upper())

        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )


def parse_recipients(raw: Optional[str]) -> List[str]:
    """Split a comma-separated address list, dropping blanks."""
    if not raw:
        return []
    return [address.strip() for address in raw.split(",") if address.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    settings = Settings()

    # Validate environment in production
    if settings.is_production:
        settings.validate_environment()

    return settings


# Create a global settings instance
settings = get_settings()
