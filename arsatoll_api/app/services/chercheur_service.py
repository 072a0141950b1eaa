"""Service for managing Chercheur records."""

from arsatoll_api.app.domain import Chercheur
from arsatoll_api.app.mappers import ChercheurMapper
from arsatoll_api.app.repositories import ChercheurRepository
from arsatoll_api.app.schemas import ChercheurDTO

from .base import CrudService


class ChercheurService(CrudService[Chercheur, ChercheurDTO]):
    entity_label = "Chercheur"

    def __init__(self, repository: ChercheurRepository, mapper: ChercheurMapper) -> None:
        super().__init__(repository, mapper)
