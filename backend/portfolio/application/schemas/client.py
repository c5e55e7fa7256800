"""Pydantic DTOs for the happy-client testimonials."""

from typing import Any

from pydantic import Field

from .records import OpenRecord


class ClientCreate(OpenRecord):
    """Schema for adding a client testimonial."""

    name: Any = Field(None, examples=["Rowhan Smith"])
    designation: Any = Field(None, examples=["CEO, Feverbearer"])
    description: Any = Field(None, examples=["Working with the team was a game-changer."])
    image: Any = Field(None, examples=["https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d"])
