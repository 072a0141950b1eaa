"""Mapper for orders."""

from arsatoll_api.app.domain import Ordre
from arsatoll_api.app.schemas import OrdreDTO

from .base import EntityMapper


class OrdreMapper(EntityMapper[Ordre, OrdreDTO]):
    entity_class = Ordre
    dto_class = OrdreDTO
    fields = ("nom_ordre", "description", "image_ordre")
