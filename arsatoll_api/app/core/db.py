"""
SQLite database integration and simple migration system.

A ``Database`` instance is an explicit handle on one SQLite file.  It
is built once by ``create_app`` and passed to every store; nothing in
the application reaches for a module‑level connection.  The handle
only holds the resolved path, so sharing it between concurrent
requests is safe: every operation opens its own connection.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

logger = logging.getLogger(__name__)

# Largest value an SQLite INTEGER (and therefore a row id) can hold.
SQLITE_MAX_INTEGER = 2**63 - 1


MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS ordres (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            nom_ordre TEXT NOT NULL UNIQUE,
            description TEXT,
            image_ordre TEXT
        );

        CREATE TABLE IF NOT EXISTS familles (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            nom_famille TEXT NOT NULL,
            description TEXT,
            image_famiile TEXT,
            ordre_id INTEGER,
            FOREIGN KEY(ordre_id) REFERENCES ordres(id)
        );

        CREATE TABLE IF NOT EXISTS chercheurs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            nom TEXT NOT NULL,
            prenom TEXT,
            email TEXT UNIQUE,
            specialite TEXT
        );
        """,
    ),
    # Migration 2: index the only foreign key
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_familles_ordre_id ON familles(ordre_id);
        """,
    ),
]


def resolve_database_path(db_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are returned unchanged.  Relative paths are resolved
    against the project root.  In‑memory databases are not supported
    because every operation opens a fresh connection.
    """
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


class Database:
    """Handle on a SQLite database file."""

    def __init__(self, path: str) -> None:
        self.path = resolve_database_path(path)

    def connect(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection.

        Rows are returned as ``sqlite3.Row`` objects so that columns can
        be accessed by name.  Foreign key enforcement is switched on for
        the lifetime of the connection; SQLite disables it by default.
        """
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor whose work is committed atomically.

        The transaction is rolled back if the block raises, and the
        connection is always closed.
        """
        conn = self.connect()
        try:
            yield conn.cursor()
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_db(self) -> None:
        """Create the schema and apply pending migrations.

        Creates the ``migrations`` table if it does not exist, checks the
        current schema version, and applies any newer entries of
        ``MIGRATIONS``.  To change the schema, append a migration with an
        incremented version number.
        """
        with self.transaction() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) AS version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    logger.info("Applied migration %s", version)
                    current_version = version
