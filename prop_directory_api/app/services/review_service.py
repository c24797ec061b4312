"""
Business logic for reviews.

Reviews are stored in ``Store.reviews`` and are immutable: they can be
created and listed but not edited.  Creating a review recomputes the
referenced firm's rating before returning, under the same store lock,
so a caller that reads the firm afterwards always sees the new
average.  A review for an unknown firm is still stored.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.store import Store
from ..schemas.review import ReviewCreate, ReviewRead
from .rating_service import RatingService

logger = logging.getLogger(__name__)


class ReviewService:
    """Service for handling firm reviews."""

    @classmethod
    def create_review(cls, store: Store, data: ReviewCreate) -> ReviewRead:
        """Insert a review and refresh the firm's rating."""
        with store.lock:
            review_id = store.next_id("reviews")
            review = ReviewRead(
                id=review_id,
                created_at=datetime.now(timezone.utc),
                **data.model_dump(),
            )
            store.reviews[review_id] = review
            RatingService.recompute(store, data.firm_id)
        logger.info(
            "Review %s submitted for firm %s with rating %s",
            review_id,
            data.firm_id,
            data.rating,
        )
        return review

    @classmethod
    def list_reviews(
        cls,
        store: Store,
        search: Optional[str] = None,
        firm_id: Optional[int] = None,
        rating: Optional[int] = None,
    ) -> List[ReviewRead]:
        """List reviews with optional filters.

        ``search`` matches case‑insensitively against title, content
        and username.
        """
        with store.lock:
            reviews = list(store.reviews.values())
        if firm_id is not None:
            reviews = [r for r in reviews if r.firm_id == firm_id]
        if rating is not None:
            reviews = [r for r in reviews if r.rating == rating]
        if search:
            needle = search.lower()
            reviews = [
                r for r in reviews
                if needle in r.title.lower()
                or needle in r.content.lower()
                or needle in r.username.lower()
            ]
        return reviews

    @classmethod
    def list_reviews_for_firm(cls, store: Store, firm_id: int) -> List[ReviewRead]:
        return cls.list_reviews(store, firm_id=firm_id)
