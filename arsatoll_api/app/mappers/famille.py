"""Mapper for families.

The ``ordre`` reference travels as ``ordre_id`` in the DTO.  Going back,
the id is turned into an ``Ordre`` stub through ``OrdreMapper.from_id``.
"""

from typing import Optional

from arsatoll_api.app.domain import Famille
from arsatoll_api.app.schemas import FamilleDTO

from .base import EntityMapper
from .ordre import OrdreMapper


class FamilleMapper(EntityMapper[Famille, FamilleDTO]):
    entity_class = Famille
    dto_class = FamilleDTO
    fields = ("nom_famille", "description", "image_famiile")

    def __init__(self, ordre_mapper: Optional[OrdreMapper] = None) -> None:
        self.ordre_mapper = ordre_mapper or OrdreMapper()

    def to_dto(self, entity: Famille) -> FamilleDTO:
        dto = super().to_dto(entity)
        dto.ordre_id = entity.ordre.id if entity.ordre is not None else None
        return dto

    def to_entity(self, dto: FamilleDTO) -> Famille:
        entity = super().to_entity(dto)
        entity.ordre = self.ordre_mapper.from_id(dto.ordre_id)
        return entity
