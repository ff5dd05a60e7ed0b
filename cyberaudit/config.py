"""Application configuration via environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration for CyberAudit Pro."""

    # Application
    app_name: str = "CyberAudit Pro"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(default="development", pattern=r"^(development|staging|production)$")
    log_level: str = "INFO"
    log_format: str = Field(default="json", pattern=r"^(json|console)$")

    # API
    allowed_origins: str = "http://localhost:3000"
    rate_limit_default: str = "100/minute"

    # Placeholder login gate, credentials are never checked
    require_login: bool = True

    # Scoring and reporting
    top_findings_count: int = Field(default=3, ge=0, le=50)
    exclude_not_applicable: bool = False

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",")]

    model_config = {"env_prefix": "CYBERAUDIT_", "env_file": ".env", "extra": "ignore"}


def get_settings() -> Settings:
    """Return a fresh settings instance."""
    return Settings()
