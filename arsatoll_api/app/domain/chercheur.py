"""Chercheur entity."""

from dataclasses import dataclass
from typing import Optional

from .base import Entity


@dataclass(eq=False)
class Chercheur(Entity):
    """A researcher contributing to the catalogue.  ``email`` is unique."""

    nom: Optional[str] = None
    prenom: Optional[str] = None
    email: Optional[str] = None
    specialite: Optional[str] = None
