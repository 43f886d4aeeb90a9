"""
Configuration settings for the management API client.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from auth0_management.http import DEFAULT_USER_AGENT


class ManagementApiSettings(BaseSettings):
    """
    Configuration for the management API client.

    Settings are loaded from environment variables with AUTH0_ prefix.
    Example: AUTH0_DOMAIN, AUTH0_TOKEN, etc.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTH0_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    domain: str = Field(
        ...,
        description="Tenant domain (e.g. 'tenant.eu.auth0.com') or full URL"
    )
    token: Optional[str] = Field(
        default=None,
        description="Management API access token"
    )
    api_path: str = Field(
        default="/api/v2",
        description="Path of the management API below the domain"
    )

    # HTTP client settings
    timeout: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent with every request"
    )

    @property
    def base_url(self) -> str:
        """API root URL built from domain and api_path."""
        domain = self.domain.rstrip("/")
        if "://" not in domain:
            domain = f"https://{domain}"
        return f"{domain}/{self.api_path.strip('/')}"


# Singleton instance set by configure_settings()
_settings: Optional[ManagementApiSettings] = None


@lru_cache
def get_settings() -> ManagementApiSettings:
    """
    Get settings singleton.

    Uses lru_cache to ensure settings are only loaded once. Settings passed
    to configure_settings() take precedence over the environment.

    Raises:
        ValidationError: If required settings are missing
    """
    if _settings is not None:
        return _settings
    return ManagementApiSettings()


def configure_settings(
    domain: Optional[str] = None,
    token: Optional[str] = None,
    **kwargs,
) -> ManagementApiSettings:
    """
    Configure settings programmatically.

    This allows overriding environment variables for testing
    or when settings come from a different source. The configured
    instance is what get_settings() returns from now on.

    Args:
        domain: Tenant domain
        token: Management API access token
        **kwargs: Additional settings

    Returns:
        Configured ManagementApiSettings instance
    """
    global _settings

    settings_dict = {
        k: v for k, v in {
            "domain": domain,
            "token": token,
            **kwargs,
        }.items() if v is not None
    }

    _settings = ManagementApiSettings(**settings_dict)
    get_settings.cache_clear()
    return _settings


def reset_settings() -> None:
    """Drop configured settings so the next get_settings() reads the environment."""
    global _settings

    _settings = None
    get_settings.cache_clear()
