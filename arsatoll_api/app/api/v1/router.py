"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
When a new entity is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import chercheurs, familles, ordres

router = APIRouter()

router.include_router(ordres.router, prefix="/ordres", tags=["ordres"])
router.include_router(familles.router, prefix="/familles", tags=["familles"])
router.include_router(chercheurs.router, prefix="/chercheurs", tags=["chercheurs"])
