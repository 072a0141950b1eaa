"""
Stateless conversion between entities and DTOs.

Mappers hold no state and perform no I/O, so a single instance per
entity type is shared by every request.
"""

from .base import EntityMapper
from .chercheur import ChercheurMapper
from .famille import FamilleMapper
from .ordre import OrdreMapper

__all__ = ["EntityMapper", "ChercheurMapper", "FamilleMapper", "OrdreMapper"]
