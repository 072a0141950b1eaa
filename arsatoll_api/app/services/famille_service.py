"""Service for managing Famille records."""

from arsatoll_api.app.domain import Famille
from arsatoll_api.app.mappers import FamilleMapper
from arsatoll_api.app.repositories import FamilleRepository
from arsatoll_api.app.schemas import FamilleDTO

from .base import CrudService


class FamilleService(CrudService[Famille, FamilleDTO]):
    entity_label = "Famille"

    def __init__(self, repository: FamilleRepository, mapper: FamilleMapper) -> None:
        super().__init__(repository, mapper)
