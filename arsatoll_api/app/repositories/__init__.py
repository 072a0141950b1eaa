"""
Repository layer: one SQLite store per entity.

Stores own the canonical records.  They assign identifiers, answer
keyed lookups and translate database failures; they contain no
mapping or protocol logic.
"""

from .base import Order, SQLiteRepository
from .chercheur_repository import ChercheurRepository
from .famille_repository import FamilleRepository
from .ordre_repository import OrdreRepository

__all__ = [
    "Order",
    "SQLiteRepository",
    "ChercheurRepository",
    "FamilleRepository",
    "OrdreRepository",
]
