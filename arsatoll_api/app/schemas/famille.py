"""
Pydantic schema for families.

The parent order is exposed as ``ordre_id`` only.  It is copied as a
raw identifier and never expanded into a nested order object.
"""

from typing import Optional

from pydantic import Field

from arsatoll_api.app.core.db import SQLITE_MAX_INTEGER

from .base import BaseDTO


class FamilleDTO(BaseDTO):
    """Schema for creating, updating and reading a family."""

    nom_famille: str = Field(..., min_length=1, max_length=255, description="Name of the family")
    description: Optional[str] = Field(None, description="Free text description")
    image_famiile: Optional[str] = Field(None, description="URL or identifier of an illustration")
    ordre_id: Optional[int] = Field(None, ge=1, le=SQLITE_MAX_INTEGER, description="Identifier of the parent order")
