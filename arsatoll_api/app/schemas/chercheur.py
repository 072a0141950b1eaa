"""Pydantic schema for researchers."""

from typing import Optional

from pydantic import Field, field_validator

from .base import BaseDTO


class ChercheurDTO(BaseDTO):
    """Schema for creating, updating and reading a researcher."""

    nom: str = Field(..., min_length=1, max_length=100)
    prenom: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=254, description="Contact address, unique across researchers")
    specialite: Optional[str] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        if "@" not in v or v.startswith("@") or v.endswith("@"):
            raise ValueError("Email must be of the form name@domain")
        return v
