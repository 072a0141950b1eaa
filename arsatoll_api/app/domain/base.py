"""Identity semantics shared by all entities."""

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Entity:
    """Base class for records whose identity is assigned by a store.

    Two entities are equal only when they are of the same type and both
    carry the same, present ``id``.  An entity without an ``id`` has not
    been persisted yet and is never equal to another instance, even one
    with identical attributes.
    """

    id: Optional[int] = None

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if other is None or type(other) is not type(self):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        # The id changes on first save, so unsaved entities all hash
        # alike rather than moving between buckets.
        return hash((type(self).__name__, self.id))
