"""Common behaviour of all DTOs."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from arsatoll_api.app.core.db import SQLITE_MAX_INTEGER


class BaseDTO(BaseModel):
    """Flat, serialisable projection of an entity.

    Equality mirrors the entity rule: two DTOs are equal only when they
    are of the same type and share a present ``id``.  Compare
    ``model_dump()`` output to compare attribute values.
    """

    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)

    id: Optional[int] = Field(
        None,
        ge=1,
        le=SQLITE_MAX_INTEGER,
        description="Store‑assigned identifier; absent on creation",
    )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if other is None or type(other) is not type(self):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
