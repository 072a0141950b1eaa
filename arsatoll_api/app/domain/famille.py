"""Famille entity: a taxonomic family belonging to an order."""

from dataclasses import dataclass
from typing import Optional

from .base import Entity
from .ordre import Ordre


@dataclass(eq=False)
class Famille(Entity):
    """A taxonomic family.

    ``ordre`` is a weak reference: only its id is stored, and a loaded
    family carries an ``Ordre`` stub holding nothing but that id.
    """

    nom_famille: Optional[str] = None
    description: Optional[str] = None
    image_famiile: Optional[str] = None
    ordre: Optional[Ordre] = None
