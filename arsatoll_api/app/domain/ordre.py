"""Ordre entity: a taxonomic order."""

from dataclasses import dataclass
from typing import Optional

from .base import Entity


@dataclass(eq=False)
class Ordre(Entity):
    """A taxonomic order (e.g. Coleoptera).  ``nom_ordre`` is unique."""

    nom_ordre: Optional[str] = None
    description: Optional[str] = None
    image_ordre: Optional[str] = None
