"""
Rating aggregation for firms.

A firm's ``avg_rating`` and ``rating_count`` are always the mean and
count of the reviews that reference it.  The average is stored at full
precision; rounding for display is left to the presentation layer.
"""

import logging
from typing import Optional

from ..core.store import Store
from ..schemas.firm import FirmRead

logger = logging.getLogger(__name__)


class RatingService:
    """Recomputes derived rating fields from the review collection."""

    @classmethod
    def recompute(cls, store: Store, firm_id: int) -> Optional[FirmRead]:
        """Refresh the rating of ``firm_id`` from its reviews.

        With no reviews the firm is reset to ``0``/``0``.  If the firm
        does not exist nothing happens and ``None`` is returned; a
        review may reference a firm that was never created or has been
        deleted.
        """
        with store.lock:
            firm = store.firms.get(firm_id)
            if firm is None:
                logger.debug("Skipping rating update for unknown firm %s", firm_id)
                return None
            ratings = [r.rating for r in store.reviews.values() if r.firm_id == firm_id]
            rating_count = len(ratings)
            avg_rating = sum(ratings) / rating_count if rating_count else 0.0
            updated = firm.model_copy(
                update={"avg_rating": avg_rating, "rating_count": rating_count}
            )
            store.firms[firm_id] = updated
        logger.debug(
            "Firm %s rating is now %s over %s reviews", firm_id, avg_rating, rating_count
        )
        return updated
