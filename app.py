"""
FastAPI application factory.
create_app() is the single entry point for building the app.
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from config import AppSettings
from errors import register_error_handlers
from infrastructure.captcha.recaptcha import RecaptchaProvider
from infrastructure.http_client import HttpClient
from routes.form_routes import router as form_router
from routes.health_routes import router as health_router
from shared.log_context import RequestLoggingMiddleware
from shared.logging import setup_logging

_BASE_DIR = os.path.dirname(os.path.abspath(__file__))
TEMPLATE_DIR = os.path.join(_BASE_DIR, "templates")
STATIC_DIR = os.path.join(_BASE_DIR, "static")


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Create and return a fully configured FastAPI application."""
    if settings is None:
        settings = AppSettings()

    setup_logging(
        log_level=settings.logging.log_level,
        log_format=settings.logging.log_format,
        env=settings.env,
        sentry_enabled=bool(settings.sentry.sentry_dsn),
    )

    # Initialise Sentry before anything else so it captures startup errors
    if settings.sentry.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry.sentry_dsn,
            send_default_pii=settings.sentry.sentry_send_pii,
            traces_sample_rate=settings.sentry.sentry_traces_sample_rate,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # ── Startup ──────────────────────────────────────────────────────────
        http_client = HttpClient(timeout=settings.recaptcha.recaptcha_timeout_seconds)
        app.state.http_client = http_client
        app.state.captcha_provider = RecaptchaProvider(
            http_client, score_threshold=settings.recaptcha.recaptcha_score_threshold
        )

        yield

        # ── Shutdown ─────────────────────────────────────────────────────────
        await http_client.aclose()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url=None if settings.is_production else settings.docs_url,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=TEMPLATE_DIR)

    app.add_middleware(RequestLoggingMiddleware)

    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(form_router)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    return app
