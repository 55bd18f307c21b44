"""Captcha capability protocols — callers depend on these, not the concrete implementations."""

from typing import Optional, Protocol


class CaptchaProvider(Protocol):
    """Server side: turns a client token plus the server secret into an outcome."""

    async def verify(self, token: Optional[str], secret: str) -> bool: ...


class TokenSource(Protocol):
    """Client side: issues a one-time token for an action label."""

    async def execute(self, action: str) -> str: ...
