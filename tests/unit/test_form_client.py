"""Unit tests for FormClient, the programmatic form controller."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from client.form_client import FormClient, SubmissionResult


def _client(token_source=None, http=None):
    token_source = token_source or AsyncMock()
    http = http or MagicMock()
    return FormClient("http://form.test/", token_source, http), token_source, http


def _response(status_code, headers=None, body=None):
    resp = MagicMock(status_code=status_code, headers=headers or {})
    resp.is_redirect = status_code in (301, 302, 303, 307, 308)
    resp.json.return_value = body or {}
    return resp


class TestRefreshToken:
    async def test_stores_token(self):
        client, tokens, _ = _client()
        tokens.execute = AsyncMock(return_value="tok-123")
        await client.refresh_token()
        assert client.token == "tok-123"
        tokens.execute.assert_awaited_once_with("submit_form")

    async def test_not_ready_is_silent_noop(self):
        client, tokens, _ = _client()
        tokens.execute = AsyncMock(side_effect=RuntimeError("grecaptcha not ready"))
        await client.refresh_token()
        assert client.token is None

    async def test_failure_keeps_previous_token(self):
        client, tokens, _ = _client()
        tokens.execute = AsyncMock(side_effect=["tok-1", RuntimeError("expired")])
        await client.refresh_token()
        await client.refresh_token()
        assert client.token == "tok-1"


class TestBuildPayload:
    def test_no_token_field_before_token_obtained(self):
        client, _, _ = _client()
        payload = client.build_payload("Alice")
        assert payload == {"name": "Alice"}
        assert "_captcha" not in payload

    def test_token_attached_once_obtained(self):
        client, _, _ = _client()
        client.token = "tok-123"
        assert client.build_payload("Alice") == {"name": "Alice", "_captcha": "tok-123"}

    def test_name_is_optional(self):
        client, _, _ = _client()
        assert client.build_payload() == {"name": ""}


class TestSubmit:
    async def test_redirect_is_accepted(self):
        client, _, http = _client()
        http.post = AsyncMock(return_value=_response(303, {"location": "/thank-you"}))
        result = await client.submit("Alice")
        assert result == SubmissionResult(status_code=303, redirect_to="/thank-you")
        assert result.accepted
        assert not result.failed

    async def test_message_is_rejection(self):
        client, _, http = _client()
        http.post = AsyncMock(
            return_value=_response(200, body={"message": "You are a robot!"})
        )
        result = await client.submit("Alice")
        assert not result.accepted
        assert result.message == "You are a robot!"

    async def test_server_error_reported(self):
        client, _, http = _client()
        http.post = AsyncMock(return_value=_response(500))
        result = await client.submit("Alice")
        assert result.failed
        assert result.redirect_to is None
        assert result.message is None

    async def test_posts_form_without_following_redirects(self):
        client, _, http = _client()
        client.token = "tok-123"
        http.post = AsyncMock(return_value=_response(303, {"location": "/thank-you"}))
        await client.submit("Alice")
        http.post.assert_awaited_once_with(
            "http://form.test/",
            data={"name": "Alice", "_captcha": "tok-123"},
            follow_redirects=False,
        )
