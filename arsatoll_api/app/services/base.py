"""
Create/read/update/delete protocol shared by every entity service.

``save`` decides nothing about identifiers: a DTO without an id is
handed to the store as a creation, a DTO with an id as an overwrite of
that record.  Rejecting a creation that already carries an id, or an
update that lacks one, is the job of the REST boundary before the
service is called.

Store errors (``ValidationError``, ``PersistenceError``) propagate
unchanged.  Lookups of a missing id return ``None``.
"""

from __future__ import annotations

import logging
from typing import Generic, List, Optional, Sequence, TypeVar

from arsatoll_api.app.domain import Entity
from arsatoll_api.app.mappers import EntityMapper
from arsatoll_api.app.repositories import Order, SQLiteRepository
from arsatoll_api.app.schemas import BaseDTO

E = TypeVar("E", bound=Entity)
D = TypeVar("D", bound=BaseDTO)

logger = logging.getLogger(__name__)


class CrudService(Generic[E, D]):
    """Service for one entity type."""

    entity_label = "Entity"

    def __init__(self, repository: SQLiteRepository[E], mapper: EntityMapper[E, D]) -> None:
        self.repository = repository
        self.mapper = mapper

    def save(self, dto: D) -> D:
        """Save an entity and return it with its (possibly new) id."""
        logger.debug("Request to save %s : %s", self.entity_label, dto)
        entity = self.mapper.to_entity(dto)
        entity = self.repository.save(entity)
        return self.mapper.to_dto(entity)

    def find_all(self, sort: Optional[Sequence[Order]] = None) -> List[D]:
        logger.debug("Request to get all %ss", self.entity_label)
        return self.mapper.to_dto_list(self.repository.find_all(sort))

    def find_one(self, entity_id: int) -> Optional[D]:
        logger.debug("Request to get %s : %s", self.entity_label, entity_id)
        entity = self.repository.find_by_id(entity_id)
        if entity is None:
            return None
        return self.mapper.to_dto(entity)

    def delete(self, entity_id: int) -> None:
        """Delete by id.  Deleting a missing id is not an error."""
        logger.debug("Request to delete %s : %s", self.entity_label, entity_id)
        self.repository.delete_by_id(entity_id)
