"""
Shared test configuration.

Patches dotenv so pydantic-settings never reads the project's real .env file
during tests. Tests control config exclusively through monkeypatch.setenv()
or by passing settings objects explicitly.
"""

from unittest.mock import AsyncMock

import pytest

from config import AppSettings, RecaptchaSettings


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch):
    """Prevent pydantic-settings from loading .env files in all tests."""
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})


@pytest.fixture
def recaptcha_settings() -> RecaptchaSettings:
    return RecaptchaSettings(
        recaptcha_site_key="site-key-abc",
        recaptcha_secret_key="secret-xyz",
    )


@pytest.fixture
def app_settings(recaptcha_settings) -> AppSettings:
    return AppSettings(recaptcha=recaptcha_settings)


@pytest.fixture
def fake_provider() -> AsyncMock:
    """Deterministic stand-in for the scoring capability; defaults to a falsy verdict."""
    provider = AsyncMock()
    provider.verify = AsyncMock(return_value=False)
    return provider
