"""
Order endpoints for API v1.

These routes expose a CRUD API for taxonomic orders.  Creation and
update share one body schema; the presence of ``id`` decides which
of the two a request is allowed to be:

* ``POST /ordres`` must not carry an ``id`` (400 ``error.idexists``)
* ``PUT /ordres`` must carry one (400 ``error.idnull``)

Successful writes return alert headers describing the change.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status

from arsatoll_api.app.api.deps import get_ordre_service, get_settings, get_sort
from arsatoll_api.app.api.headers import (
    entity_creation_alert,
    entity_deletion_alert,
    entity_update_alert,
)
from arsatoll_api.app.core.config import Settings
from arsatoll_api.app.core.db import SQLITE_MAX_INTEGER
from arsatoll_api.app.core.errors import IdentifierPresenceError
from arsatoll_api.app.repositories import Order
from arsatoll_api.app.schemas import OrdreDTO
from arsatoll_api.app.services import OrdreService

logger = logging.getLogger(__name__)

ENTITY_NAME = "ordre"

router = APIRouter()


@router.post("", response_model=OrdreDTO, status_code=status.HTTP_201_CREATED)
def create_ordre(
    ordre_dto: OrdreDTO,
    request: Request,
    response: Response,
    service: OrdreService = Depends(get_ordre_service),
    settings: Settings = Depends(get_settings),
) -> OrdreDTO:
    """Create a new order.

    Returns HTTP 201 with a ``Location`` header pointing at the new
    resource, or HTTP 400 if the body already has an id.
    """
    logger.debug("REST request to save Ordre : %s", ordre_dto)
    if ordre_dto.id is not None:
        raise IdentifierPresenceError("A new ordre cannot already have an ID", ENTITY_NAME, "idexists")
    result = service.save(ordre_dto)
    response.headers["Location"] = str(request.url_for("get_ordre", ordre_id=result.id))
    response.headers.update(entity_creation_alert(settings.app_name, ENTITY_NAME, str(result.id)))
    return result


@router.put("", response_model=OrdreDTO)
def update_ordre(
    ordre_dto: OrdreDTO,
    response: Response,
    service: OrdreService = Depends(get_ordre_service),
    settings: Settings = Depends(get_settings),
) -> OrdreDTO:
    """Update an existing order.

    Returns HTTP 200 with the updated order, or HTTP 400 if the body
    has no id.
    """
    logger.debug("REST request to update Ordre : %s", ordre_dto)
    if ordre_dto.id is None:
        raise IdentifierPresenceError("Invalid id", ENTITY_NAME, "idnull")
    result = service.save(ordre_dto)
    response.headers.update(entity_update_alert(settings.app_name, ENTITY_NAME, str(ordre_dto.id)))
    return result


@router.get("", response_model=List[OrdreDTO])
def list_ordres(
    sort: List[Order] = Depends(get_sort),
    service: OrdreService = Depends(get_ordre_service),
) -> List[OrdreDTO]:
    """Return all orders, optionally sorted with ``sort=field,direction``."""
    logger.debug("REST request to get all Ordres")
    return service.find_all(sort)


@router.get("/{ordre_id}", response_model=OrdreDTO, name="get_ordre")
def get_ordre(
    ordre_id: int = Path(..., ge=1, le=SQLITE_MAX_INTEGER),
    service: OrdreService = Depends(get_ordre_service),
) -> OrdreDTO:
    """Retrieve a single order by id.  Returns HTTP 404 if absent."""
    logger.debug("REST request to get Ordre : %s", ordre_id)
    ordre = service.find_one(ordre_id)
    if ordre is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ordre not found")
    return ordre


@router.delete("/{ordre_id}")
def delete_ordre(
    ordre_id: int = Path(..., ge=1, le=SQLITE_MAX_INTEGER),
    service: OrdreService = Depends(get_ordre_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Delete an order.  Returns HTTP 200 even if it did not exist."""
    logger.debug("REST request to delete Ordre : %s", ordre_id)
    service.delete(ordre_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=entity_deletion_alert(settings.app_name, ENTITY_NAME, str(ordre_id)),
    )
