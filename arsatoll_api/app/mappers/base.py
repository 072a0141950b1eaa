"""Generic field‑for‑field mapper."""

from typing import Generic, Iterable, List, Optional, Tuple, Type, TypeVar

from arsatoll_api.app.domain import Entity
from arsatoll_api.app.schemas import BaseDTO

E = TypeVar("E", bound=Entity)
D = TypeVar("D", bound=BaseDTO)


class EntityMapper(Generic[E, D]):
    """Copy the scalar attributes named in ``fields`` between entity and DTO.

    Subclasses set ``entity_class``, ``dto_class`` and ``fields`` and
    override ``to_dto``/``to_entity`` only for attributes that need a
    translation, such as references to other entities.
    """

    entity_class: Type[E]
    dto_class: Type[D]
    fields: Tuple[str, ...] = ()

    def to_dto(self, entity: E) -> D:
        data = {"id": entity.id}
        for name in self.fields:
            data[name] = getattr(entity, name)
        return self.dto_class.model_construct(**data)

    def to_entity(self, dto: D) -> E:
        entity = self.entity_class(id=dto.id)
        for name in self.fields:
            setattr(entity, name, getattr(dto, name))
        return entity

    def to_dto_list(self, entities: Iterable[E]) -> List[D]:
        return [self.to_dto(entity) for entity in entities]

    def to_entity_list(self, dtos: Iterable[D]) -> List[E]:
        return [self.to_entity(dto) for dto in dtos]

    def from_id(self, entity_id: Optional[int]) -> Optional[E]:
        """Return an entity stub carrying only ``entity_id``.

        Used to build reference edges without fetching the target.  An
        absent id gives ``None``, not a stub with a null id.
        """
        if entity_id is None:
            return None
        return self.entity_class(id=entity_id)
