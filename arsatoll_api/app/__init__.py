"""
Application package initializer.

The project is organised by layer rather than by entity.  Each domain
concept (ordres, familles, chercheurs) contributes one module to each
layer:

* ``domain``        – persistent entities with identity semantics
* ``schemas``       – DTOs exchanged at the HTTP boundary
* ``mappers``       – stateless entity ↔ DTO conversion
* ``repositories``  – SQLite stores, one table per entity
* ``services``      – the create/update/read/delete protocol
* ``api/v1``        – REST controllers

The ASGI application itself is built in ``main``.
"""

from .main import app  # noqa: F401
