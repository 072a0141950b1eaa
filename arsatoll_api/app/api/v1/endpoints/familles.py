"""
Family endpoints for API v1.

CRUD routes for taxonomic families.  A family points at its order
through ``ordre_id``; saving a family whose ``ordre_id`` does not
match an existing order is rejected by the store and answered with
HTTP 400 ``error.validation``.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status

from arsatoll_api.app.api.deps import get_famille_service, get_settings, get_sort
from arsatoll_api.app.api.headers import (
    entity_creation_alert,
    entity_deletion_alert,
    entity_update_alert,
)
from arsatoll_api.app.core.config import Settings
from arsatoll_api.app.core.db import SQLITE_MAX_INTEGER
from arsatoll_api.app.core.errors import IdentifierPresenceError
from arsatoll_api.app.repositories import Order
from arsatoll_api.app.schemas import FamilleDTO
from arsatoll_api.app.services import FamilleService

logger = logging.getLogger(__name__)

ENTITY_NAME = "famille"

router = APIRouter()


@router.post("", response_model=FamilleDTO, status_code=status.HTTP_201_CREATED)
def create_famille(
    famille_dto: FamilleDTO,
    request: Request,
    response: Response,
    service: FamilleService = Depends(get_famille_service),
    settings: Settings = Depends(get_settings),
) -> FamilleDTO:
    """Create a new family.

    Returns HTTP 201 with a ``Location`` header pointing at the new
    resource, or HTTP 400 if the body already has an id.
    """
    logger.debug("REST request to save Famille : %s", famille_dto)
    if famille_dto.id is not None:
        raise IdentifierPresenceError("A new famille cannot already have an ID", ENTITY_NAME, "idexists")
    result = service.save(famille_dto)
    response.headers["Location"] = str(request.url_for("get_famille", famille_id=result.id))
    response.headers.update(entity_creation_alert(settings.app_name, ENTITY_NAME, str(result.id)))
    return result


@router.put("", response_model=FamilleDTO)
def update_famille(
    famille_dto: FamilleDTO,
    response: Response,
    service: FamilleService = Depends(get_famille_service),
    settings: Settings = Depends(get_settings),
) -> FamilleDTO:
    """Update an existing family.

    Returns HTTP 200 with the updated family, or HTTP 400 if the body
    has no id.
    """
    logger.debug("REST request to update Famille : %s", famille_dto)
    if famille_dto.id is None:
        raise IdentifierPresenceError("Invalid id", ENTITY_NAME, "idnull")
    result = service.save(famille_dto)
    response.headers.update(entity_update_alert(settings.app_name, ENTITY_NAME, str(famille_dto.id)))
    return result


@router.get("", response_model=List[FamilleDTO])
def list_familles(
    sort: List[Order] = Depends(get_sort),
    service: FamilleService = Depends(get_famille_service),
) -> List[FamilleDTO]:
    """Return all families, optionally sorted with ``sort=field,direction``."""
    logger.debug("REST request to get all Familles")
    return service.find_all(sort)


@router.get("/{famille_id}", response_model=FamilleDTO, name="get_famille")
def get_famille(
    famille_id: int = Path(..., ge=1, le=SQLITE_MAX_INTEGER),
    service: FamilleService = Depends(get_famille_service),
) -> FamilleDTO:
    """Retrieve a single family by id.  Returns HTTP 404 if absent."""
    logger.debug("REST request to get Famille : %s", famille_id)
    famille = service.find_one(famille_id)
    if famille is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Famille not found")
    return famille


@router.delete("/{famille_id}")
def delete_famille(
    famille_id: int = Path(..., ge=1, le=SQLITE_MAX_INTEGER),
    service: FamilleService = Depends(get_famille_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Delete a family.  Returns HTTP 200 even if it did not exist."""
    logger.debug("REST request to delete Famille : %s", famille_id)
    service.delete(famille_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=entity_deletion_alert(settings.app_name, ENTITY_NAME, str(famille_id)),
    )
