"""Pydantic DTOs for contact form submissions."""

from typing import Any

from pydantic import Field

from .records import OpenRecord


class ContactCreate(OpenRecord):
    """Contact form body — ``fullname`` plus whatever fields the form has."""

    fullname: Any = Field(None, examples=["John Doe"])
    email: Any = Field(None, examples=["john@example.com"])
    mobile: Any = Field(None, examples=["+1 555 0100"])
    city: Any = Field(None, examples=["New York"])
