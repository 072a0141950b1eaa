"""Store for the ``chercheurs`` table."""

import sqlite3
from typing import Any, Tuple

from arsatoll_api.app.domain import Chercheur

from .base import SQLiteRepository


class ChercheurRepository(SQLiteRepository[Chercheur]):
    entity_name = "chercheur"
    table = "chercheurs"
    columns = ("nom", "prenom", "email", "specialite")

    def _to_params(self, entity: Chercheur) -> Tuple[Any, ...]:
        return (entity.nom, entity.prenom, entity.email, entity.specialite)

    def _from_row(self, row: sqlite3.Row) -> Chercheur:
        return Chercheur(
            id=row["id"],
            nom=row["nom"],
            prenom=row["prenom"],
            email=row["email"],
            specialite=row["specialite"],
        )
