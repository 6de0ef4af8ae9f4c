"""
Persistence errors raised by the store layer.

These are surfaced unchanged in the GraphQL ``errors`` list; nothing in the
request path translates or recovers them.
"""

from typing import Any


class PersistenceError(Exception):
    """Base class for errors raised while talking to the database."""


class RecordNotFoundError(PersistenceError):
    """Raised when a write targets a record that does not exist."""

    def __init__(self, entity: str, record_id: Any):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} record to delete does not exist (id={record_id})")
