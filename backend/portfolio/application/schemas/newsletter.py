"""Pydantic DTOs for newsletter signups."""

from typing import Any

from pydantic import BaseModel, Field


class NewsletterSubscribe(BaseModel):
    """Signup body. Only ``email`` is kept; other fields are ignored."""

    email: Any = Field(None, examples=["reader@example.com"])
