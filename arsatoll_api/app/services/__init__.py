"""
Service layer.

Each service mediates between DTOs and the store of one entity type.
Services are constructed with their store and mapper explicitly and
keep no state between calls.
"""

from .base import CrudService
from .chercheur_service import ChercheurService
from .famille_service import FamilleService
from .ordre_service import OrdreService

__all__ = ["CrudService", "ChercheurService", "FamilleService", "OrdreService"]
