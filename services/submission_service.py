"""
Submission service — decides accept vs. reject for one form submission.

received → scoring-pending → accepted (redirect) | rejected (message)

Provider errors are not caught here; they surface as a 500 through the
global exception handlers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from config import RecaptchaSettings
from infrastructure.captcha.protocol import CaptchaProvider
from schemas.dto.requests.submission import SubmissionForm
from shared.logging import get_logger

log = get_logger(__name__)

ROBOT_MESSAGE = "You are a robot!"


@dataclass(frozen=True)
class SubmissionOutcome:
    accepted: bool
    redirect_to: Optional[str] = None
    message: Optional[str] = None


class SubmissionService:
    def __init__(self, provider: CaptchaProvider, settings: RecaptchaSettings) -> None:
        self._provider = provider
        self._settings = settings

    async def handle(self, form: SubmissionForm) -> SubmissionOutcome:
        # A missing token still goes to the provider; it is never short-circuited.
        verdict = await self._provider.verify(
            form.captcha, self._settings.recaptcha_secret_key
        )

        # NOTE: a truthy verdict rejects. This keeps the deployed behaviour;
        # see DESIGN.md before flipping it.
        if not verdict:
            log.info(
                "submission_accepted",
                had_captcha=form.captcha is not None,
                redirect_to=self._settings.recaptcha_success_redirect,
            )
            return SubmissionOutcome(
                accepted=True, redirect_to=self._settings.recaptcha_success_redirect
            )

        log.info("submission_rejected", had_captcha=form.captcha is not None)
        return SubmissionOutcome(accepted=False, message=ROBOT_MESSAGE)
