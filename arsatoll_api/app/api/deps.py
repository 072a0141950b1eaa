"""
FastAPI dependency providers.

The database handle and settings live on ``app.state`` (see
``create_app``); stores and services are assembled from them for each
request.  Nothing here is a module‑level singleton, so tests can run
several applications side by side against different databases.
"""

from typing import List, Optional

from fastapi import Depends, Query, Request

from arsatoll_api.app.core.config import Settings
from arsatoll_api.app.core.db import Database
from arsatoll_api.app.mappers import ChercheurMapper, FamilleMapper, OrdreMapper
from arsatoll_api.app.repositories import (
    ChercheurRepository,
    FamilleRepository,
    Order,
    OrdreRepository,
)
from arsatoll_api.app.services import ChercheurService, FamilleService, OrdreService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_sort(
    sort: Optional[List[str]] = Query(
        None,
        description="Sort criterion in the format ``field,direction``; repeatable",
    ),
) -> List[Order]:
    """Parse ``sort=field,direction`` query parameters.

    The direction defaults to ``asc``.  Empty values are skipped;
    unknown fields are dropped later by the store.
    """
    orders: List[Order] = []
    for value in sort or []:
        parts = [part.strip() for part in value.split(",") if part.strip()]
        if not parts:
            continue
        direction = parts[1].lower() if len(parts) > 1 else "asc"
        orders.append(Order(parts[0], direction))
    return orders


def get_ordre_service(database: Database = Depends(get_database)) -> OrdreService:
    return OrdreService(OrdreRepository(database), OrdreMapper())


def get_famille_service(database: Database = Depends(get_database)) -> FamilleService:
    return FamilleService(FamilleRepository(database), FamilleMapper())


def get_chercheur_service(database: Database = Depends(get_database)) -> ChercheurService:
    return ChercheurService(ChercheurRepository(database), ChercheurMapper())
