"""
Firm endpoints.

CRUD for prop firm profiles plus the featured list and the comparison
view.  ``avgRating`` and ``ratingCount`` in responses are maintained
by the review endpoints; they cannot be written here.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from prop_directory_api.app.core.config import Settings, get_settings
from prop_directory_api.app.core.store import Store, get_store
from prop_directory_api.app.schemas.firm import FirmCreate, FirmRead, FirmUpdate
from prop_directory_api.app.services.firm_service import FirmService

router = APIRouter()

FIRM_NOT_FOUND = "Prop firm not found"


@router.get("", response_model=List[FirmRead])
async def list_firms(
    search: Optional[str] = Query(None, description="Substring of name or description"),
    asset: Optional[str] = Query(None, description="Tradable asset, or 'all'"),
    sort: Optional[str] = Query(
        None,
        description="default, profit_high, profit_low, fee_low, fee_high or rating_high",
    ),
    store: Store = Depends(get_store),
) -> List[FirmRead]:
    """List all firms.

    Without query parameters every firm is returned in creation order.
    """
    return FirmService.list_firms(store, search=search, asset=asset, sort_by=sort)


@router.get("/featured", response_model=List[FirmRead])
async def list_featured_firms(store: Store = Depends(get_store)) -> List[FirmRead]:
    """List firms flagged as featured."""
    return FirmService.list_featured(store)


@router.get("/compare", response_model=List[FirmRead])
async def compare_firms(
    ids: str = Query(..., description="Comma separated firm ids, e.g. 1,2,3"),
    store: Store = Depends(get_store),
    app_settings: Settings = Depends(get_settings),
) -> List[FirmRead]:
    """Return several firms side by side, in the order requested.

    Unknown ids are skipped; at most ``COMPARE_LIMIT`` firms are
    returned.
    """
    try:
        firm_ids = [int(part) for part in ids.split(",") if part.strip()]
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid firm ID")
    return FirmService.compare_firms(store, firm_ids, limit=app_settings.compare_limit)


@router.get("/{firm_id}", response_model=FirmRead)
async def get_firm(firm_id: int, store: Store = Depends(get_store)) -> FirmRead:
    """Retrieve a single firm by ID.

    Returns HTTP 404 if the firm is not found.
    """
    firm = FirmService.get_firm(store, firm_id)
    if firm is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=FIRM_NOT_FOUND)
    return firm


@router.post("", response_model=FirmRead, status_code=status.HTTP_201_CREATED)
async def create_firm(firm_in: FirmCreate, store: Store = Depends(get_store)) -> FirmRead:
    """Create a new firm.

    Any ``id``, ``avgRating`` or ``ratingCount`` in the body is
    ignored, and each account type's ``discountedPrice`` is derived
    from its price and discount rate.
    """
    return FirmService.create_firm(store, firm_in)


@router.put("/{firm_id}", response_model=FirmRead)
async def update_firm(
    firm_id: int,
    firm_in: FirmUpdate,
    store: Store = Depends(get_store),
) -> FirmRead:
    """Partially update a firm."""
    firm = FirmService.update_firm(store, firm_id, firm_in)
    if firm is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=FIRM_NOT_FOUND)
    return firm


@router.delete("/{firm_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_firm(firm_id: int, store: Store = Depends(get_store)) -> None:
    """Delete a firm.  Its reviews are kept."""
    if not FirmService.delete_firm(store, firm_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=FIRM_NOT_FOUND)
    return None
