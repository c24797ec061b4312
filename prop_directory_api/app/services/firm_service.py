"""
Business logic for prop firms.

Firms are kept in ``Store.firms``.  Creation assigns a fresh id and
derives the rating from any reviews already filed under that id.
Updates merge the provided fields onto the stored record and
re‑validate it, which also recomputes the discounted price of every
account type.  ``avg_rating`` and
``rating_count`` can only change through
:class:`~prop_directory_api.app.services.rating_service.RatingService`.
"""

import logging
from typing import Iterable, List, Optional

from ..core.store import Store
from ..schemas.firm import FirmBase, FirmCreate, FirmRead, FirmUpdate
from .rating_service import RatingService

logger = logging.getLogger(__name__)

# Sort options offered by the directory page.  Missing values sort as 0.
FIRM_SORT_KEYS = {
    "profit_high": (lambda f: f.profit_split or 0, True),
    "profit_low": (lambda f: f.profit_split or 0, False),
    "fee_low": (lambda f: f.challenge_fee_min or 0, False),
    "fee_high": (lambda f: f.challenge_fee_min or 0, True),
    "rating_high": (lambda f: f.avg_rating or 0, True),
}

# Wire names of the optional firm fields an update may clear with null.
NULLABLE_FIRM_FIELDS = frozenset(
    field.alias or name
    for name, field in FirmBase.model_fields.items()
    if not field.is_required() and field.default is None
)


class FirmService:
    """Service for managing prop firm profiles."""

    @classmethod
    def list_firms(
        cls,
        store: Store,
        search: Optional[str] = None,
        asset: Optional[str] = None,
        sort_by: Optional[str] = None,
    ) -> List[FirmRead]:
        """Return firms, optionally filtered and sorted.

        ``search`` matches case‑insensitively against name and
        description.  ``asset`` keeps firms whose tradable assets
        include it; ``"all"`` disables the filter.  ``sort_by`` is one
        of :data:`FIRM_SORT_KEYS`; anything else keeps insertion order.
        """
        with store.lock:
            firms = list(store.firms.values())
        if search:
            needle = search.lower()
            firms = [
                f for f in firms
                if needle in f.name.lower() or needle in f.description.lower()
            ]
        if asset and asset != "all":
            firms = [f for f in firms if asset in f.tradable_assets]
        if sort_by in FIRM_SORT_KEYS:
            key, reverse = FIRM_SORT_KEYS[sort_by]
            firms = sorted(firms, key=key, reverse=reverse)
        return firms

    @classmethod
    def list_featured(cls, store: Store) -> List[FirmRead]:
        with store.lock:
            return [f for f in store.firms.values() if f.featured]

    @classmethod
    def get_firm(cls, store: Store, firm_id: int) -> Optional[FirmRead]:
        with store.lock:
            return store.firms.get(firm_id)

    @classmethod
    def compare_firms(cls, store: Store, firm_ids: Iterable[int], limit: int) -> List[FirmRead]:
        """Return the requested firms in request order.

        Unknown and repeated ids are skipped and at most ``limit`` firms
        are returned.
        """
        result: List[FirmRead] = []
        seen = set()
        with store.lock:
            for firm_id in firm_ids:
                if len(result) >= limit:
                    break
                firm = store.firms.get(firm_id)
                if firm is None or firm_id in seen:
                    continue
                seen.add(firm_id)
                result.append(firm)
        return result

    @classmethod
    def create_firm(cls, store: Store, data: FirmCreate) -> FirmRead:
        """Insert a new firm and return the stored record."""
        with store.lock:
            firm_id = store.next_id("firms")
            firm = FirmRead.model_validate(
                {**data.model_dump(by_alias=True), "id": firm_id, "avgRating": 0, "ratingCount": 0}
            )
            store.firms[firm_id] = firm
            # Reviews may already reference this id.
            firm = RatingService.recompute(store, firm_id)
        logger.info("Created firm %s (%s)", firm_id, firm.name)
        return firm

    @classmethod
    def update_firm(cls, store: Store, firm_id: int, data: FirmUpdate) -> Optional[FirmRead]:
        """Merge ``data`` onto an existing firm.

        Only provided fields are applied.  An explicit ``null`` clears
        the optional fields in :data:`NULLABLE_FIRM_FIELDS` and is
        ignored for the rest.  Returns the updated firm or ``None`` if
        the record does not exist.
        """
        changes = {
            key: value
            for key, value in data.model_dump(exclude_unset=True, by_alias=True).items()
            if value is not None or key in NULLABLE_FIRM_FIELDS
        }
        with store.lock:
            current = store.firms.get(firm_id)
            if current is None:
                return None
            # FirmUpdate has no id or rating fields, so those survive the merge.
            merged = {**current.model_dump(by_alias=True), **changes}
            firm = FirmRead.model_validate(merged)
            store.firms[firm_id] = firm
        logger.info("Updated firm %s", firm_id)
        return firm

    @classmethod
    def delete_firm(cls, store: Store, firm_id: int) -> bool:
        """Delete a firm by id.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        Reviews of the firm are left in place.
        """
        with store.lock:
            deleted = store.firms.pop(firm_id, None) is not None
        if deleted:
            logger.info("Deleted firm %s", firm_id)
        return deleted
