"""Service for managing Ordre records."""

from arsatoll_api.app.domain import Ordre
from arsatoll_api.app.mappers import OrdreMapper
from arsatoll_api.app.repositories import OrdreRepository
from arsatoll_api.app.schemas import OrdreDTO

from .base import CrudService


class OrdreService(CrudService[Ordre, OrdreDTO]):
    entity_label = "Ordre"

    def __init__(self, repository: OrdreRepository, mapper: OrdreMapper) -> None:
        super().__init__(repository, mapper)
