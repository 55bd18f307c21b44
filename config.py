"""
Application configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).
The resulting AppSettings object is built once at startup, handed to
create_app() and read-only afterwards. Nothing reads os.environ directly.
"""

from __future__ import annotations

from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecaptchaSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", env_ignore_empty=True
    )

    # Public key, embedded in the form page for grecaptcha.execute()
    recaptcha_site_key: str = ""
    # Private key, only ever sent to the siteverify endpoint
    recaptcha_secret_key: str = ""

    recaptcha_action: str = "submit_form"
    recaptcha_score_threshold: float = 0.5
    # None means no timeout on the siteverify call
    recaptcha_timeout_seconds: Optional[float] = None
    recaptcha_success_redirect: str = "/thank-you"

    @property
    def is_configured(self) -> bool:
        return bool(self.recaptcha_site_key and self.recaptcha_secret_key)


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", env_ignore_empty=True
    )

    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production


class SentrySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", env_ignore_empty=True
    )

    sentry_dsn: str = ""
    sentry_send_pii: bool = False
    sentry_traces_sample_rate: float = 0.1


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", env_ignore_empty=True
    )

    env: str = "development"
    app_name: str = "recaptcha-form"

    # OpenAPI docs URL; ignored in production, where the docs UI is always off
    docs_url: Optional[str] = "/docs"

    # Sub-configs (composed via model_validator below)
    recaptcha: Optional[RecaptchaSettings] = None
    logging: Optional[LoggingSettings] = None
    sentry: Optional[SentrySettings] = None

    @model_validator(mode="after")
    def _populate_sub_configs(self) -> "AppSettings":
        # Populate sub-configs from the same env/dotenv source
        if self.recaptcha is None:
            self.recaptcha = RecaptchaSettings()
        if self.logging is None:
            self.logging = LoggingSettings()
        if self.sentry is None:
            self.sentry = SentrySettings()

        return self

    @property
    def is_production(self) -> bool:
        return self.env == "production"
