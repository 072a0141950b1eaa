"""Store for the ``familles`` table.

The parent order is persisted as the ``ordre_id`` foreign key.  Loaded
families carry an ``Ordre`` stub with only that id; the order itself
is never fetched here.
"""

import sqlite3
from typing import Any, Tuple

from arsatoll_api.app.domain import Famille, Ordre

from .base import SQLiteRepository


class FamilleRepository(SQLiteRepository[Famille]):
    entity_name = "famille"
    table = "familles"
    columns = ("nom_famille", "description", "image_famiile", "ordre_id")

    def _to_params(self, entity: Famille) -> Tuple[Any, ...]:
        ordre_id = entity.ordre.id if entity.ordre is not None else None
        return (entity.nom_famille, entity.description, entity.image_famiile, ordre_id)

    def _from_row(self, row: sqlite3.Row) -> Famille:
        ordre_id = row["ordre_id"]
        return Famille(
            id=row["id"],
            nom_famille=row["nom_famille"],
            description=row["description"],
            image_famiile=row["image_famiile"],
            ordre=Ordre(id=ordre_id) if ordre_id is not None else None,
        )
