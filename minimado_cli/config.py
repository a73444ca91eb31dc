"""
Application settings.

LEARNING NOTES:
- Settings is a plain pydantic model, not BaseSettings: this tool reads
  nothing from the environment, every value here is a fixed default
- Keeping constants in one model means tests can build a Settings with a
  different config_path or base URL instead of patching module globals

This module handles:
- The remote service location and the identity header name
- Where the local config file lives (~/.minimado-cli/config.json)
- The HTTP timeout (None = wait for the transport's own default)
"""

from pathlib import Path

from pydantic import BaseModel, Field


def default_config_path() -> Path:
    """Return ~/.minimado-cli/config.json for the current user."""
    return Path.home() / ".minimado-cli" / "config.json"


class Settings(BaseModel):
    """
    Fixed application settings.

    Example:
        settings = get_settings()
        url = f"{settings.api_base_url}/api/tasks"
    """

    # === Remote Service ===
    api_base_url: str = Field(
        default="https://minimado.com",
        description="Base URL of the Minimado web service"
    )

    user_id_header: str = Field(
        default="X-Clerk-User-Id",
        description="Request header carrying the Clerk user id"
    )

    request_timeout: float | None = Field(
        default=None,
        description="Seconds to wait for a response (None = no timeout)"
    )

    # === Local State ===
    config_path: Path = Field(
        default_factory=default_config_path,
        description="JSON file caching the user id"
    )


# ============================================================================
# Singleton Pattern for Settings
# ============================================================================

_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (lazy-loaded singleton).

    Returns:
        Settings: The application settings instance
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reset_settings() -> None:
    """Reset the cached settings (useful for testing)."""
    global _settings
    _settings = None
