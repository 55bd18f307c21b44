"""
Health check endpoint.

GET /health — reports whether reCAPTCHA keys are configured.
Rules:
- Both keys present → "healthy" (200).
- Either key missing → "degraded" (200): the page still renders, but
  every verification will be refused by the provider.
No outbound call is made; siteverify has no ping endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from config import AppSettings
from dependencies import get_settings
from schemas.dto.responses.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: AppSettings = Depends(get_settings)) -> JSONResponse:
    checks: dict[str, str] = {}
    overall = "healthy"

    if settings.recaptcha.is_configured:
        checks["recaptcha"] = "ok"
    else:
        checks["recaptcha"] = "not_configured"
        overall = "degraded"

    return JSONResponse(
        status_code=200,
        content=HealthResponse(status=overall, checks=checks).model_dump(),
    )
