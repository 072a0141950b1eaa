"""
Error taxonomy shared by the stores, services and REST boundary.

The core never recovers from these locally: stores raise them, services
let them propagate, and the handlers registered by ``create_app``
translate them into HTTP responses.  A missing record is not an error
at all; lookups return ``None`` and the endpoints answer 404.
"""

from typing import Optional


class ArsatollError(Exception):
    """Base class for every error raised by the application."""

    error_key = "internal"

    def __init__(self, message: str, entity_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.entity_name = entity_name


class IdentifierPresenceError(ArsatollError):
    """A creation carried an id, or an update did not.

    Raised by the REST boundary only; services trust their input.
    ``error_key`` is ``"idexists"`` or ``"idnull"``.
    """

    def __init__(self, message: str, entity_name: str, error_key: str) -> None:
        super().__init__(message, entity_name)
        self.error_key = error_key


class ValidationError(ArsatollError):
    """The store rejected a write because it violates a constraint."""

    error_key = "validation"


class PersistenceError(ArsatollError):
    """Unexpected store failure.  Never retried."""

    error_key = "persistence"
