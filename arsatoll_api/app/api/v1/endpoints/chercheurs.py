"""
Researcher endpoints for API v1.

CRUD routes for researchers.  E‑mail addresses are unique; a write
that would duplicate one is answered with HTTP 400
``error.validation``.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status

from arsatoll_api.app.api.deps import get_chercheur_service, get_settings, get_sort
from arsatoll_api.app.api.headers import (
    entity_creation_alert,
    entity_deletion_alert,
    entity_update_alert,
)
from arsatoll_api.app.core.config import Settings
from arsatoll_api.app.core.db import SQLITE_MAX_INTEGER
from arsatoll_api.app.core.errors import IdentifierPresenceError
from arsatoll_api.app.repositories import Order
from arsatoll_api.app.schemas import ChercheurDTO
from arsatoll_api.app.services import ChercheurService

logger = logging.getLogger(__name__)

ENTITY_NAME = "chercheur"

router = APIRouter()


@router.post("", response_model=ChercheurDTO, status_code=status.HTTP_201_CREATED)
def create_chercheur(
    chercheur_dto: ChercheurDTO,
    request: Request,
    response: Response,
    service: ChercheurService = Depends(get_chercheur_service),
    settings: Settings = Depends(get_settings),
) -> ChercheurDTO:
    """Create a new researcher."""
    logger.debug("REST request to save Chercheur : %s", chercheur_dto)
    if chercheur_dto.id is not None:
        raise IdentifierPresenceError("A new chercheur cannot already have an ID", ENTITY_NAME, "idexists")
    result = service.save(chercheur_dto)
    response.headers["Location"] = str(request.url_for("get_chercheur", chercheur_id=result.id))
    response.headers.update(entity_creation_alert(settings.app_name, ENTITY_NAME, str(result.id)))
    return result


@router.put("", response_model=ChercheurDTO)
def update_chercheur(
    chercheur_dto: ChercheurDTO,
    response: Response,
    service: ChercheurService = Depends(get_chercheur_service),
    settings: Settings = Depends(get_settings),
) -> ChercheurDTO:
    """Update an existing researcher."""
    logger.debug("REST request to update Chercheur : %s", chercheur_dto)
    if chercheur_dto.id is None:
        raise IdentifierPresenceError("Invalid id", ENTITY_NAME, "idnull")
    result = service.save(chercheur_dto)
    response.headers.update(entity_update_alert(settings.app_name, ENTITY_NAME, str(chercheur_dto.id)))
    return result


@router.get("", response_model=List[ChercheurDTO])
def list_chercheurs(
    sort: List[Order] = Depends(get_sort),
    service: ChercheurService = Depends(get_chercheur_service),
) -> List[ChercheurDTO]:
    """Return all researchers."""
    logger.debug("REST request to get all Chercheurs")
    return service.find_all(sort)


@router.get("/{chercheur_id}", response_model=ChercheurDTO, name="get_chercheur")
def get_chercheur(
    chercheur_id: int = Path(..., ge=1, le=SQLITE_MAX_INTEGER),
    service: ChercheurService = Depends(get_chercheur_service),
) -> ChercheurDTO:
    """Retrieve a single researcher by id.  Returns HTTP 404 if absent."""
    logger.debug("REST request to get Chercheur : %s", chercheur_id)
    chercheur = service.find_one(chercheur_id)
    if chercheur is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Chercheur not found")
    return chercheur


@router.delete("/{chercheur_id}")
def delete_chercheur(
    chercheur_id: int = Path(..., ge=1, le=SQLITE_MAX_INTEGER),
    service: ChercheurService = Depends(get_chercheur_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Delete a researcher."""
    logger.debug("REST request to delete Chercheur : %s", chercheur_id)
    service.delete(chercheur_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=entity_deletion_alert(settings.app_name, ENTITY_NAME, str(chercheur_id)),
    )
