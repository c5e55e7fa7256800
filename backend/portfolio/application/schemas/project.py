"""Pydantic DTOs (Data Transfer Objects) for the Project feature."""

from typing import Any

from pydantic import Field

from .records import OpenRecord


class ProjectCreate(OpenRecord):
    """Schema for adding a project to the portfolio."""

    name: Any = Field(None, examples=["E-commerce Platform"])
    description: Any = Field(None, examples=["A full-featured e-commerce platform."])
    image: Any = Field(None, examples=["https://images.unsplash.com/photo-1556742049-0cfed4f6a45d"])
    category: Any = Field(None, examples=["Design & Development"])
    location: Any = Field(None, examples=["Remote"])
