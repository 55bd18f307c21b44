"""
Form page and submission endpoint.

GET  /           — renders the form with the reCAPTCHA site key embedded
POST /           — verifies the token; 303 → /thank-you or 200 {"message"}
GET  /thank-you  — confirmation page
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from config import AppSettings
from dependencies import get_settings, get_submission_service, get_templates
from schemas.dto.requests.submission import CAPTCHA_FIELD, SubmissionForm
from schemas.dto.responses.common import ErrorResponse, MessageResponse
from services.submission_service import SubmissionService

router = APIRouter(tags=["form"])


@router.get("/", response_class=HTMLResponse)
async def form_page(
    request: Request,
    settings: AppSettings = Depends(get_settings),
    templates: Jinja2Templates = Depends(get_templates),
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": settings.app_name,
            "site_key": settings.recaptcha.recaptcha_site_key,
            "action": settings.recaptcha.recaptcha_action,
            "captcha_field": CAPTCHA_FIELD,
        },
    )


@router.post(
    "/",
    response_model=MessageResponse,
    responses={
        303: {"description": "Submission accepted"},
        500: {"model": ErrorResponse, "description": "Captcha verification failed"},
    },
)
async def submit_form(
    form: Annotated[SubmissionForm, Form()],
    service: SubmissionService = Depends(get_submission_service),
) -> Response:
    outcome = await service.handle(form)

    if outcome.accepted:
        return RedirectResponse(url=outcome.redirect_to, status_code=303)
    return JSONResponse(
        status_code=200, content=MessageResponse(message=outcome.message).model_dump()
    )


@router.get("/thank-you", response_class=HTMLResponse)
async def thank_you(
    request: Request,
    settings: AppSettings = Depends(get_settings),
    templates: Jinja2Templates = Depends(get_templates),
) -> HTMLResponse:
    return templates.TemplateResponse(
        request, "thank_you.html", {"title": settings.app_name}
    )
