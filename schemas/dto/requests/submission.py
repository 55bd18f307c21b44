"""
Request DTO for the form submission endpoint.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

CAPTCHA_FIELD = "_captcha"


class SubmissionForm(BaseModel):
    """Form-encoded body of ``POST /``.

    Both fields are optional. ``captcha`` stays ``None`` when the client never
    obtained a token, which is not an error.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = ""
    captcha: Optional[str] = Field(default=None, alias=CAPTCHA_FIELD)
