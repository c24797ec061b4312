"""
Service layer for educational resources.

Resources are standalone articles stored in ``Store.resources``.  They
have no relation to firms and creating or deleting one has no side
effects.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.store import Store
from ..schemas.resource import ResourceCreate, ResourceRead, ResourceUpdate

logger = logging.getLogger(__name__)


class ResourceService:
    """Service class for managing resources."""

    @classmethod
    def list_resources(
        cls,
        store: Store,
        search: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[ResourceRead]:
        """Return resources, optionally filtered.

        ``search`` matches case‑insensitively against title and
        summary; ``category`` must match exactly.
        """
        with store.lock:
            resources = list(store.resources.values())
        if category:
            resources = [r for r in resources if r.category == category]
        if search:
            needle = search.lower()
            resources = [
                r for r in resources
                if needle in r.title.lower() or needle in r.summary.lower()
            ]
        return resources

    @classmethod
    def list_by_category(cls, store: Store, category: str) -> List[ResourceRead]:
        with store.lock:
            return [r for r in store.resources.values() if r.category == category]

    @classmethod
    def get_resource(cls, store: Store, resource_id: int) -> Optional[ResourceRead]:
        with store.lock:
            return store.resources.get(resource_id)

    @classmethod
    def create_resource(cls, store: Store, data: ResourceCreate) -> ResourceRead:
        """Insert a new resource and return the created record.

        ``published_at`` defaults to now when not provided.
        """
        payload = data.model_dump()
        if payload.get("published_at") is None:
            payload["published_at"] = datetime.now(timezone.utc)
        with store.lock:
            resource_id = store.next_id("resources")
            resource = ResourceRead(id=resource_id, **payload)
            store.resources[resource_id] = resource
        logger.info("Created resource %s (%s)", resource_id, resource.category)
        return resource

    @classmethod
    def update_resource(
        cls, store: Store, resource_id: int, data: ResourceUpdate
    ) -> Optional[ResourceRead]:
        """Update an existing resource.

        Only fields provided in ``data`` will be updated.  Returns
        the updated resource or ``None`` if the record does not exist.
        """
        changes = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None
        }
        with store.lock:
            current = store.resources.get(resource_id)
            if current is None:
                return None
            resource = ResourceRead(**{**current.model_dump(), **changes, "id": resource_id})
            store.resources[resource_id] = resource
        logger.info("Updated resource %s", resource_id)
        return resource

    @classmethod
    def delete_resource(cls, store: Store, resource_id: int) -> bool:
        """Delete a resource by id.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        with store.lock:
            deleted = store.resources.pop(resource_id, None) is not None
        if deleted:
            logger.info("Deleted resource %s", resource_id)
        return deleted
