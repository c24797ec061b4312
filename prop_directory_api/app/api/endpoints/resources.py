"""
Resource endpoints.

CRUD for educational articles.  Listing and reading are public; the
admin panel uses the write endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from prop_directory_api.app.core.store import Store, get_store
from prop_directory_api.app.schemas.resource import (
    ResourceCreate,
    ResourceRead,
    ResourceUpdate,
)
from prop_directory_api.app.services.resource_service import ResourceService

router = APIRouter()

RESOURCE_NOT_FOUND = "Resource not found"


@router.get("", response_model=List[ResourceRead])
async def list_resources(
    search: Optional[str] = Query(None, description="Substring of title or summary"),
    category: Optional[str] = Query(None),
    store: Store = Depends(get_store),
) -> List[ResourceRead]:
    return ResourceService.list_resources(store, search=search, category=category)


@router.get("/category/{category}", response_model=List[ResourceRead])
async def list_resources_by_category(
    category: str, store: Store = Depends(get_store)
) -> List[ResourceRead]:
    """Return resources whose category matches exactly."""
    return ResourceService.list_by_category(store, category)


@router.get("/{resource_id}", response_model=ResourceRead)
async def get_resource(resource_id: int, store: Store = Depends(get_store)) -> ResourceRead:
    resource = ResourceService.get_resource(store, resource_id)
    if resource is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=RESOURCE_NOT_FOUND)
    return resource


@router.post("", response_model=ResourceRead, status_code=status.HTTP_201_CREATED)
async def create_resource(
    resource_in: ResourceCreate, store: Store = Depends(get_store)
) -> ResourceRead:
    return ResourceService.create_resource(store, resource_in)


@router.put("/{resource_id}", response_model=ResourceRead)
async def update_resource(
    resource_id: int,
    resource_in: ResourceUpdate,
    store: Store = Depends(get_store),
) -> ResourceRead:
    resource = ResourceService.update_resource(store, resource_id, resource_in)
    if resource is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=RESOURCE_NOT_FOUND)
    return resource


@router.delete("/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_resource(resource_id: int, store: Store = Depends(get_store)) -> None:
    if not ResourceService.delete_resource(store, resource_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=RESOURCE_NOT_FOUND)
    return None
