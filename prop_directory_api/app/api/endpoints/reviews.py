"""
API endpoints for firm reviews.

Anyone may submit a review; submitting one immediately refreshes the
reviewed firm's ``avgRating`` and ``ratingCount``.  Reviews cannot be
edited or deleted through the API.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from prop_directory_api.app.core.store import Store, get_store
from prop_directory_api.app.schemas.review import ReviewCreate, ReviewRead
from prop_directory_api.app.services.review_service import ReviewService

router = APIRouter()


@router.get("/reviews", response_model=List[ReviewRead], summary="List reviews")
async def list_reviews(
    search: Optional[str] = Query(None, description="Substring of title, content or username"),
    firm_id: Optional[int] = Query(None, alias="firmId"),
    rating: Optional[int] = Query(None, ge=1, le=5),
    store: Store = Depends(get_store),
) -> List[ReviewRead]:
    """List all reviews, optionally filtered by firm, rating or text."""
    return ReviewService.list_reviews(store, search=search, firm_id=firm_id, rating=rating)


@router.get(
    "/firms/{firm_id}/reviews",
    response_model=List[ReviewRead],
    summary="List reviews of a firm",
)
async def list_firm_reviews(firm_id: int, store: Store = Depends(get_store)) -> List[ReviewRead]:
    """Return the reviews of one firm.

    An unknown firm yields an empty list rather than 404.
    """
    return ReviewService.list_reviews_for_firm(store, firm_id)


@router.post(
    "/reviews",
    response_model=ReviewRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a review",
)
async def create_review(data: ReviewCreate, store: Store = Depends(get_store)) -> ReviewRead:
    """Create a review and recompute the firm's rating before returning."""
    return ReviewService.create_review(store, data)
