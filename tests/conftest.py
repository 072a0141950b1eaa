"""
This module contains pytest fixtures to be used throughout the entire test suite.

Every test gets its own SQLite file under ``tmp_path``, so tests never
share state.
"""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from arsatoll_api.app.core.config import Settings
from arsatoll_api.app.core.db import Database
from arsatoll_api.app.main import create_app
from arsatoll_api.app.mappers import ChercheurMapper, FamilleMapper, OrdreMapper
from arsatoll_api.app.repositories import ChercheurRepository, FamilleRepository, OrdreRepository
from arsatoll_api.app.services import ChercheurService, FamilleService, OrdreService


APP_NAME = "arsatollserviceApp"


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway database file."""
    return Settings(database_url=str(tmp_path / "arsatoll-test.db"), app_name=APP_NAME, api_prefix="/api")


@pytest.fixture
def database(test_settings: Settings) -> Database:
    """An initialised, empty database."""
    db = Database(test_settings.database_url)
    db.init_db()
    return db


@pytest.fixture
def ordre_repository(database: Database) -> OrdreRepository:
    return OrdreRepository(database)


@pytest.fixture
def famille_repository(database: Database) -> FamilleRepository:
    return FamilleRepository(database)


@pytest.fixture
def chercheur_repository(database: Database) -> ChercheurRepository:
    return ChercheurRepository(database)


@pytest.fixture
def ordre_service(ordre_repository: OrdreRepository) -> OrdreService:
    return OrdreService(ordre_repository, OrdreMapper())


@pytest.fixture
def famille_service(famille_repository: FamilleRepository) -> FamilleService:
    return FamilleService(famille_repository, FamilleMapper())


@pytest.fixture
def chercheur_service(chercheur_repository: ChercheurRepository) -> ChercheurService:
    return ChercheurService(chercheur_repository, ChercheurMapper())


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """A test client whose startup hook has created the schema."""
    with TestClient(app) as test_client:
        yield test_client
