"""Store for the ``ordres`` table."""

import sqlite3
from typing import Any, Tuple

from arsatoll_api.app.domain import Ordre

from .base import SQLiteRepository


class OrdreRepository(SQLiteRepository[Ordre]):
    entity_name = "ordre"
    table = "ordres"
    columns = ("nom_ordre", "description", "image_ordre")

    def _to_params(self, entity: Ordre) -> Tuple[Any, ...]:
        return (entity.nom_ordre, entity.description, entity.image_ordre)

    def _from_row(self, row: sqlite3.Row) -> Ordre:
        return Ordre(
            id=row["id"],
            nom_ordre=row["nom_ordre"],
            description=row["description"],
            image_ordre=row["image_ordre"],
        )
