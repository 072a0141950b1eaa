"""
Pydantic schema definitions for API payloads.

Each entity has a single DTO used both as request and response body.
Schemas are separated from the domain entities to decouple the API
representation from persistence.
"""

from .base import BaseDTO
from .chercheur import ChercheurDTO
from .famille import FamilleDTO
from .ordre import OrdreDTO

__all__ = ["BaseDTO", "ChercheurDTO", "FamilleDTO", "OrdreDTO"]
