"""
FastAPI dependency providers.

All injectable dependencies are defined here as plain functions
used with FastAPI's Depends() system. Tests swap the captcha provider
through app.dependency_overrides[get_captcha_provider].
"""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates

from config import AppSettings
from infrastructure.captcha.protocol import CaptchaProvider
from services.submission_service import SubmissionService


def get_settings(request: Request) -> AppSettings:
    """Return the AppSettings instance stored on app.state."""
    return request.app.state.settings


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


def get_captcha_provider(request: Request) -> CaptchaProvider:
    """Return the process-wide captcha provider built in the lifespan."""
    return request.app.state.captcha_provider


def get_submission_service(
    settings: AppSettings = Depends(get_settings),
    provider: CaptchaProvider = Depends(get_captcha_provider),
) -> SubmissionService:
    return SubmissionService(provider, settings.recaptcha)
