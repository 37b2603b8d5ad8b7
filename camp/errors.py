"""
Domain errors raised by services and the ranking engine.

Routers translate these into HTTP responses; nothing here carries
user-facing text beyond a short message.
"""
from __future__ import annotations


class CampError(Exception):
    """Base class for all service-level errors."""


class NotFoundError(CampError):
    """A referenced child, group, discipline or assignment does not exist."""

    def __init__(self, entity: str, entity_id=None):
        self.entity = entity
        self.entity_id = entity_id
        if entity_id is None:
            message = f"{entity} not found"
        else:
            message = f"{entity} with id {entity_id} not found"
        super().__init__(message)


class InvalidDisciplineError(CampError):
    """A discipline carries an aggregation method the engine does not know."""

    def __init__(self, method):
        self.method = method
        super().__init__(f"Unrecognized aggregation method: {method!r}")


class PrecondAssertionError(CampError):
    """A caller violated the engine's input contract."""


__all__ = [
    "CampError",
    "NotFoundError",
    "InvalidDisciplineError",
    "PrecondAssertionError",
]
