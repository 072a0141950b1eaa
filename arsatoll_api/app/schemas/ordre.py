"""Pydantic schema for orders."""

from typing import Optional

from pydantic import Field

from .base import BaseDTO


class OrdreDTO(BaseDTO):
    """Schema for creating, updating and reading an order."""

    nom_ordre: str = Field(..., min_length=1, max_length=255, description="Name of the order, unique")
    description: Optional[str] = Field(None, description="Free text description")
    image_ordre: Optional[str] = Field(None, description="URL or identifier of an illustration")
