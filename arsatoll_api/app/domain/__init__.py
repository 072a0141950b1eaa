"""
Persistent domain entities.

Entities are plain dataclasses.  Their identity is the surrogate ``id``
assigned by the store on first save; see ``Entity`` for the equality
rules every entity shares.
"""

from .base import Entity
from .chercheur import Chercheur
from .famille import Famille
from .ordre import Ordre

__all__ = ["Entity", "Chercheur", "Famille", "Ordre"]
