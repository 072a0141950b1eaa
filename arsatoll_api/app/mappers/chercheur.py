"""Mapper for researchers."""

from arsatoll_api.app.domain import Chercheur
from arsatoll_api.app.schemas import ChercheurDTO

from .base import EntityMapper


class ChercheurMapper(EntityMapper[Chercheur, ChercheurDTO]):
    entity_class = Chercheur
    dto_class = ChercheurDTO
    fields = ("nom", "prenom", "email", "specialite")
