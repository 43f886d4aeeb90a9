"""Tests for settings."""

import pytest
from pydantic import ValidationError

from auth0_management.client import ManagementApiClient
from auth0_management.config import (
    ManagementApiSettings,
    configure_settings,
    get_settings,
    reset_settings,
)


@pytest.fixture(autouse=True)
def clear_environment(monkeypatch):
    for name in ("AUTH0_DOMAIN", "AUTH0_TOKEN", "AUTH0_API_PATH", "AUTH0_TIMEOUT", "AUTH0_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


def test_loads_from_environment(monkeypatch):
    monkeypatch.setenv("AUTH0_DOMAIN", "tenant.eu.auth0.com")
    monkeypatch.setenv("AUTH0_TOKEN", "env-token")
    monkeypatch.setenv("AUTH0_TIMEOUT", "12.5")

    settings = ManagementApiSettings(_env_file=None)

    assert settings.domain == "tenant.eu.auth0.com"
    assert settings.token == "env-token"
    assert settings.timeout == 12.5
    assert settings.api_path == "/api/v2"


def test_domain_is_required():
    with pytest.raises(ValidationError):
        ManagementApiSettings(_env_file=None)


@pytest.mark.parametrize(
    "domain, api_path, expected",
    [
        ("tenant.eu.auth0.com", "/api/v2", "https://tenant.eu.auth0.com/api/v2"),
        ("https://tenant.eu.auth0.com/", "/api/v2", "https://tenant.eu.auth0.com/api/v2"),
        ("http://localhost:8080", "api/v2/", "http://localhost:8080/api/v2"),
    ],
)
def test_base_url(domain, api_path, expected):
    settings = ManagementApiSettings(_env_file=None, domain=domain, api_path=api_path)
    assert settings.base_url == expected


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("AUTH0_DOMAIN", "tenant.eu.auth0.com")
    assert get_settings() is get_settings()


def test_configure_settings_overrides_environment(monkeypatch):
    monkeypatch.setenv("AUTH0_DOMAIN", "env.auth0.com")

    settings = configure_settings(domain="explicit.auth0.com", token=None, timeout=3.0)

    assert settings.domain == "explicit.auth0.com"
    assert settings.token is None
    assert settings.timeout == 3.0


def test_configure_settings_replaces_cached_settings(monkeypatch):
    monkeypatch.setenv("AUTH0_DOMAIN", "env.auth0.com")
    assert get_settings().domain == "env.auth0.com"

    settings = configure_settings(domain="explicit.auth0.com", token="explicit-token")

    assert get_settings() is settings
    client = ManagementApiClient.from_settings()
    assert client.connection.base_url == "https://explicit.auth0.com/api/v2"


def test_reset_settings_reads_environment_again(monkeypatch):
    monkeypatch.setenv("AUTH0_DOMAIN", "env.auth0.com")
    configure_settings(domain="explicit.auth0.com")

    reset_settings()

    assert get_settings().domain == "env.auth0.com"
