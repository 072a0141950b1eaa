"""
Generic SQLite store for one entity type.

Stores implement keyed CRUD over a single table.  Every public method
runs in its own transaction on its own connection, so callers never
observe partial writes.  SQLite errors are translated into the
application's error taxonomy here and nowhere else.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import (
    Any,
    ContextManager,
    Generic,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from arsatoll_api.app.core.db import SQLITE_MAX_INTEGER, Database
from arsatoll_api.app.core.errors import PersistenceError, ValidationError
from arsatoll_api.app.domain import Entity

E = TypeVar("E", bound=Entity)

logger = logging.getLogger(__name__)


class Order(NamedTuple):
    """One sort criterion: a column name and ``"asc"`` or ``"desc"``."""

    field: str
    direction: str = "asc"


class SQLiteRepository(Generic[E]):
    """Keyed CRUD over ``table``.

    Subclasses declare ``entity_name``, ``table`` and ``columns`` (every
    column except ``id``) and implement the two row conversions.
    """

    entity_name: str
    table: str
    columns: Tuple[str, ...] = ()

    def __init__(self, database: Database) -> None:
        self.database = database

    # -- row conversion -------------------------------------------------

    def _to_params(self, entity: E) -> Tuple[Any, ...]:
        """Return the values of ``columns`` for ``entity``, in order."""
        raise NotImplementedError

    def _from_row(self, row: sqlite3.Row) -> E:
        raise NotImplementedError

    # -- operations -----------------------------------------------------

    def save(self, entity: E) -> E:
        """Insert ``entity`` or overwrite the record sharing its id.

        An entity without an id receives a fresh one, set on the
        instance.  An entity with an id replaces the stored record with
        that id, which is created if it does not exist yet.
        """
        params = self._to_params(entity)
        with self._translate_errors("save"):
            with self.database.transaction() as cursor:
                if entity.id is None:
                    cursor.execute(
                        f"INSERT INTO {self.table} ({', '.join(self.columns)}) "
                        f"VALUES ({', '.join('?' for _ in self.columns)})",
                        params,
                    )
                    entity.id = cursor.lastrowid
                    logger.info("Created %s %s", self.table, entity.id)
                else:
                    assignments = ", ".join(f"{col} = excluded.{col}" for col in self.columns)
                    cursor.execute(
                        f"INSERT INTO {self.table} (id, {', '.join(self.columns)}) "
                        f"VALUES (?, {', '.join('?' for _ in self.columns)}) "
                        f"ON CONFLICT(id) DO UPDATE SET {assignments}",
                        (entity.id, *params),
                    )
                    logger.info("Saved %s %s", self.table, entity.id)
        return entity

    def find_all(self, sort: Optional[Sequence[Order]] = None) -> List[E]:
        """Return every record, ordered by ``sort`` when given.

        Criteria naming unknown columns or directions are ignored.
        """
        query = f"SELECT * FROM {self.table}"
        order_by = self._order_by(sort or ())
        if order_by:
            query += f" ORDER BY {order_by}"
        with self._translate_errors("find_all"):
            with self.database.transaction() as cursor:
                rows = cursor.execute(query).fetchall()
        return [self._from_row(row) for row in rows]

    def find_by_id(self, entity_id: int) -> Optional[E]:
        if not _storable(entity_id):
            return None
        with self._translate_errors("find_by_id"):
            with self.database.transaction() as cursor:
                row = cursor.execute(
                    f"SELECT * FROM {self.table} WHERE id = ?", (entity_id,)
                ).fetchone()
        if not row:
            return None
        return self._from_row(row)

    def exists_by_id(self, entity_id: int) -> bool:
        if not _storable(entity_id):
            return False
        with self._translate_errors("exists_by_id"):
            with self.database.transaction() as cursor:
                row = cursor.execute(
                    f"SELECT 1 FROM {self.table} WHERE id = ?", (entity_id,)
                ).fetchone()
        return row is not None

    def delete_by_id(self, entity_id: int) -> None:
        """Delete the record with ``entity_id``.  Absent ids are ignored."""
        if not _storable(entity_id):
            return
        with self._translate_errors("delete_by_id"):
            with self.database.transaction() as cursor:
                cursor.execute(f"DELETE FROM {self.table} WHERE id = ?", (entity_id,))
                affected = cursor.rowcount
        if affected:
            logger.info("Deleted %s %s", self.table, entity_id)

    def count(self) -> int:
        with self._translate_errors("count"):
            with self.database.transaction() as cursor:
                row = cursor.execute(f"SELECT COUNT(*) AS total FROM {self.table}").fetchone()
        return row["total"]

    # -- helpers --------------------------------------------------------

    def _order_by(self, sort: Iterable[Order]) -> str:
        sortable = {"id", *self.columns}
        clauses = []
        for order in sort:
            direction = order.direction.lower()
            if order.field not in sortable or direction not in {"asc", "desc"}:
                continue
            clauses.append(f"{order.field} {direction.upper()}")
        return ", ".join(clauses)

    def _translate_errors(self, operation: str) -> ContextManager[None]:
        return translate_errors(self.entity_name, operation)


def _storable(entity_id: int) -> bool:
    """Whether ``entity_id`` fits in an SQLite INTEGER; larger ids name no record."""
    return -SQLITE_MAX_INTEGER - 1 <= entity_id <= SQLITE_MAX_INTEGER


@contextmanager
def translate_errors(entity_name: str, operation: str) -> Iterator[None]:
    """Map ``sqlite3`` errors and integer overflows onto the error taxonomy."""
    try:
        yield
    except sqlite3.IntegrityError as exc:
        logger.warning("Constraint violation on %s.%s: %s", entity_name, operation, exc)
        raise ValidationError(str(exc), entity_name) from exc
    except OverflowError as exc:
        # A value wider than 64 bits can never be stored.
        logger.warning("Unstorable value on %s.%s: %s", entity_name, operation, exc)
        raise ValidationError(str(exc), entity_name) from exc
    except sqlite3.Error as exc:
        logger.error("Store failure on %s.%s: %s", entity_name, operation, exc)
        raise PersistenceError(str(exc), entity_name) from exc
