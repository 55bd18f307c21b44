"""Google reCAPTCHA v3 implementation of CaptchaProvider.

verify() returns True when siteverify reports success AND the score is
above the threshold. Transport failures and non-200 answers are raised as
CaptchaServiceError; they are never turned into a verdict.
"""

from typing import Optional

import httpx

from errors import CaptchaServiceError
from infrastructure.http_client import HttpClient
from shared.logging import get_logger

log = get_logger(__name__)

RECAPTCHA_VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"


class RecaptchaProvider:
    def __init__(self, http_client: HttpClient, score_threshold: float = 0.5) -> None:
        self._http = http_client
        self._threshold = score_threshold

    async def verify(self, token: Optional[str], secret: str) -> bool:
        if not secret:
            log.warning("recaptcha_secret_not_configured")
        try:
            response = await self._http.post(
                RECAPTCHA_VERIFY_URL,
                data={"secret": secret, "response": token or ""},
            )
        except httpx.HTTPError as e:
            log.error(
                "recaptcha_request_failed", error=str(e), error_type=type(e).__name__
            )
            raise CaptchaServiceError("Captcha verification is unavailable") from e

        if response.status_code != 200:
            log.error(
                "recaptcha_api_error",
                status_code=response.status_code,
                response_text=response.text[:200],
            )
            raise CaptchaServiceError(
                "Captcha verification is unavailable",
                details={"status_code": response.status_code},
            )

        data = response.json()
        success = bool(data.get("success", False))
        score = data.get("score")
        if not success:
            log.warning(
                "recaptcha_verification_failed",
                error_codes=data.get("error-codes", []),
            )
            return False

        passed = score is not None and score > self._threshold
        log.info(
            "recaptcha_verified",
            score=score,
            threshold=self._threshold,
            action=data.get("action"),
            passed=passed,
        )
        return passed
