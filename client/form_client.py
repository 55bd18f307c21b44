"""
Programmatic counterpart of static/form.js.

FormClient drives the same flow a browser does: fetch one token for the
configured action, attach it only if one was obtained, POST the form and
report what the server decided. Used for smoke checks against a running
deployment and in tests with a fake TokenSource.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from infrastructure.captcha.protocol import TokenSource
from infrastructure.http_client import HttpClient
from schemas.dto.requests.submission import CAPTCHA_FIELD
from shared.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    status_code: int
    redirect_to: Optional[str] = None
    message: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.redirect_to is not None

    @property
    def failed(self) -> bool:
        return self.status_code >= 500


class FormClient:
    def __init__(
        self,
        base_url: str,
        token_source: TokenSource,
        http_client: HttpClient,
        action: str = "submit_form",
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._tokens = token_source
        self._http = http_client
        self._action = action
        self.token: Optional[str] = None

    async def refresh_token(self) -> None:
        """Fetch a fresh token. Failures leave the current state untouched."""
        try:
            self.token = await self._tokens.execute(self._action)
        except Exception as e:
            log.debug("captcha_token_unavailable", error_type=type(e).__name__)

    def build_payload(self, name: str = "") -> dict[str, str]:
        payload = {"name": name}
        if self.token:
            payload[CAPTCHA_FIELD] = self.token
        return payload

    async def submit(self, name: str = "") -> SubmissionResult:
        response = await self._http.post(
            f"{self._base_url}/",
            data=self.build_payload(name),
            follow_redirects=False,
        )

        if response.is_redirect:
            return SubmissionResult(
                status_code=response.status_code,
                redirect_to=response.headers.get("location"),
            )
        if response.status_code == 200:
            return SubmissionResult(
                status_code=200, message=response.json().get("message")
            )
        log.warning("form_submission_failed", status_code=response.status_code)
        return SubmissionResult(status_code=response.status_code)
