"""
In‑memory storage for the directory.

All state lives in a single :class:`Store` object built once by
``create_app`` and attached to ``app.state``.  Request handlers obtain
it through the :func:`get_store` dependency; there is no module level
store.  Nothing is persisted: the store starts from the seed data (see
``core.seed``) and is discarded when the process exits.

Each collection is a plain ``dict`` keyed by integer id, so iteration
order is insertion order.  Ids are sequential per collection and are
never reused, even after deletes.  Services must hold :attr:`Store.lock`
while they read‑modify‑write a collection so that a threaded server
observes the same single‑writer behaviour as the event loop.
"""

import threading
from typing import Dict

from fastapi import Request

from ..schemas.firm import FirmRead
from ..schemas.resource import ResourceRead
from ..schemas.review import ReviewRead
from ..schemas.user import UserRecord


class Store:
    """Process‑lifetime container for every collection."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.users: Dict[int, UserRecord] = {}
        self.firms: Dict[int, FirmRead] = {}
        self.reviews: Dict[int, ReviewRead] = {}
        self.resources: Dict[int, ResourceRead] = {}
        # username -> password hash
        self.admins: Dict[str, str] = {}
        self._next_ids: Dict[str, int] = {
            "users": 1,
            "firms": 1,
            "reviews": 1,
            "resources": 1,
        }

    def next_id(self, collection: str) -> int:
        """Reserve and return the next id for ``collection``."""
        with self.lock:
            value = self._next_ids[collection]
            self._next_ids[collection] = value + 1
            return value


def get_store(request: Request) -> Store:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store
