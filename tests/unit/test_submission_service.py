"""Unit tests for SubmissionService — the accept/reject decision."""

from unittest.mock import AsyncMock

import pytest

from errors import CaptchaServiceError
from schemas.dto.requests.submission import SubmissionForm
from services.submission_service import ROBOT_MESSAGE, SubmissionService


def _form(**fields) -> SubmissionForm:
    return SubmissionForm.model_validate(fields)


class TestSubmissionForm:
    def test_reads_captcha_alias(self):
        form = _form(name="Alice", _captcha="tok-123")
        assert form.name == "Alice"
        assert form.captcha == "tok-123"

    def test_all_fields_optional(self):
        form = _form()
        assert form.name == ""
        assert form.captcha is None

    def test_unknown_fields_ignored(self):
        form = _form(name="Alice", email="a@example.com")
        assert not hasattr(form, "email")


class TestSubmissionService:
    @pytest.mark.parametrize("verdict", [False, None, 0, ""], ids=repr)
    async def test_falsy_verdict_accepts_with_redirect(
        self, fake_provider, recaptcha_settings, verdict
    ):
        fake_provider.verify.return_value = verdict
        service = SubmissionService(fake_provider, recaptcha_settings)
        outcome = await service.handle(_form(name="Alice", _captcha="tok-123"))
        assert outcome.accepted is True
        assert outcome.redirect_to == "/thank-you"
        assert outcome.message is None

    @pytest.mark.parametrize("verdict", [True, 1, "yes"], ids=repr)
    async def test_truthy_verdict_rejects_with_message(
        self, fake_provider, recaptcha_settings, verdict
    ):
        fake_provider.verify.return_value = verdict
        service = SubmissionService(fake_provider, recaptcha_settings)
        outcome = await service.handle(_form(name="Alice", _captcha="tok-123"))
        assert outcome.accepted is False
        assert outcome.message == ROBOT_MESSAGE
        assert outcome.redirect_to is None

    async def test_passes_token_and_server_secret(self, fake_provider, recaptcha_settings):
        service = SubmissionService(fake_provider, recaptcha_settings)
        await service.handle(_form(name="Alice", _captcha="tok-123"))
        fake_provider.verify.assert_awaited_once_with("tok-123", "secret-xyz")

    async def test_missing_token_still_scored(self, fake_provider, recaptcha_settings):
        service = SubmissionService(fake_provider, recaptcha_settings)
        await service.handle(_form(name="Alice"))
        fake_provider.verify.assert_awaited_once_with(None, "secret-xyz")

    async def test_custom_redirect_target(self, fake_provider, recaptcha_settings):
        settings = recaptcha_settings.model_copy(
            update={"recaptcha_success_redirect": "/done"}
        )
        service = SubmissionService(fake_provider, settings)
        outcome = await service.handle(_form())
        assert outcome.redirect_to == "/done"

    @pytest.mark.parametrize(
        "error",
        [CaptchaServiceError("down"), RuntimeError("boom")],
        ids=["captcha_service_error", "unexpected"],
    )
    async def test_provider_errors_propagate(self, recaptcha_settings, error):
        provider = AsyncMock()
        provider.verify = AsyncMock(side_effect=error)
        service = SubmissionService(provider, recaptcha_settings)
        with pytest.raises(type(error)):
            await service.handle(_form(_captcha="tok"))
