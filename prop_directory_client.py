"""Prop Firm Directory API client and presentation helpers.

This module wraps the directory's REST API with the ``requests``
library and provides the list manipulation the web pages perform on
fetched collections:

* :meth:`PropDirectoryAPI.list_firms` / :meth:`get_firm` and friends –
  thin wrappers returning ``(data, error)`` tuples.
* :func:`filter_firms`, :func:`sort_firms` – directory page search,
  asset filter and sort options.
* :func:`filter_reviews`, :func:`filter_resources` – review and article
  page filters.
* :func:`select_for_comparison` – pick the firms shown in the compare
  table.
* :func:`format_rating` – one decimal place rendering of ``avgRating``.
* :func:`build_account_type` – prepare an account offering for submit,
  filling in the derived ``discountedPrice``.

Records are handled as the plain JSON dictionaries returned by the
API (camelCase keys).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

import requests

from prop_directory_api.app.services.pricing import derive_discounted_price

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Error = Dict[str, Any]

ALL_ASSETS = "all"
ALL_CATEGORIES = "All Categories"
ALL_FIRMS = "all"
ALL_RATINGS = "all"


class PropDirectoryAPI:
    """Client for the prop firm directory API.

    Every public method returns ``(data, error)``.  On success ``error``
    is ``None``; on failure ``data`` is empty and ``error`` is a dict
    with ``status_code`` and ``message`` (the server's ``message``
    field when it sent one).
    """

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
                The ``/api`` prefix is added by the client.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against ``/api<path>``.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` for empty responses such as 204.
        """
        url = f"{self.base_url}/api{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("message", "")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Record], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Firms
    # ------------------------------------------------------------------
    def list_firms(self, **filters: Any) -> Tuple[List[Record], Optional[Error]]:
        """List firms.  ``filters`` may hold ``search``, ``asset`` and ``sort``."""
        params = {k: v for k, v in filters.items() if v is not None}
        return self._list("/firms", params or None)

    def list_featured_firms(self) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/firms/featured")

    def compare_firms(self, firm_ids: Iterable[int]) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/firms/compare", {"ids": ",".join(str(i) for i in firm_ids)})

    def get_firm(self, firm_id: int) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("GET", f"/firms/{firm_id}")

    def create_firm(self, payload: Record) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("POST", "/firms", json_body=payload)

    def update_firm(self, firm_id: int, payload: Record) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("PUT", f"/firms/{firm_id}", json_body=payload)

    def delete_firm(self, firm_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/firms/{firm_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------
    def list_reviews(self) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/reviews")

    def list_firm_reviews(self, firm_id: int) -> Tuple[List[Record], Optional[Error]]:
        return self._list(f"/firms/{firm_id}/reviews")

    def create_review(self, payload: Record) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("POST", "/reviews", json_body=payload)

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------
    def list_resources(self) -> Tuple[List[Record], Optional[Error]]:
        return self._list("/resources")

    def list_resources_by_category(self, category: str) -> Tuple[List[Record], Optional[Error]]:
        return self._list(f"/resources/category/{requests.utils.quote(category, safe='')}")

    def get_resource(self, resource_id: int) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("GET", f"/resources/{resource_id}")

    def create_resource(self, payload: Record) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("POST", "/resources", json_body=payload)

    def update_resource(self, resource_id: int, payload: Record) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request("PUT", f"/resources/{resource_id}", json_body=payload)

    def delete_resource(self, resource_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/resources/{resource_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------
    def register_user(self, username: str, password: str) -> Tuple[Optional[Record], Optional[Error]]:
        return self._request(
            "POST", "/auth/register", json_body={"username": username, "password": password}
        )

    def admin_login(self, username: str, password: str) -> Tuple[bool, Optional[Error]]:
        """Check admin credentials.  Returns ``(True, None)`` when accepted."""
        data, error = self._request(
            "POST", "/auth/admin/login", json_body={"username": username, "password": password}
        )
        if error:
            return False, error
        return bool(data and data.get("success")), None


# ----------------------------------------------------------------------
# Presentation helpers
# ----------------------------------------------------------------------

def _contains(value: Optional[str], needle: str) -> bool:
    return needle in (value or "").lower()


def filter_firms(firms: Iterable[Record], search: str = "", asset: str = ALL_ASSETS) -> List[Record]:
    """Keep firms matching the search text and tradable asset filter."""
    needle = search.lower()
    return [
        firm for firm in firms
        if (_contains(firm.get("name"), needle) or _contains(firm.get("description"), needle))
        and (asset == ALL_ASSETS or asset in (firm.get("tradableAssets") or []))
    ]


_FIRM_SORTS = {
    "profit_high": ("profitSplit", True),
    "profit_low": ("profitSplit", False),
    "fee_low": ("challengeFeeMin", False),
    "fee_high": ("challengeFeeMin", True),
    "rating_high": ("avgRating", True),
}


def sort_firms(firms: Iterable[Record], sort_by: str = "default") -> List[Record]:
    """Sort firms by one of the directory's sort options.

    Missing values count as 0.  Unknown options, including
    ``"default"``, keep the input order.
    """
    firms = list(firms)
    if sort_by not in _FIRM_SORTS:
        return firms
    field, reverse = _FIRM_SORTS[sort_by]
    return sorted(firms, key=lambda f: f.get(field) or 0, reverse=reverse)


def filter_reviews(
    reviews: Iterable[Record],
    search: str = "",
    firm: Any = ALL_FIRMS,
    rating: Any = ALL_RATINGS,
) -> List[Record]:
    """Keep reviews matching search text, firm id and star rating."""
    needle = search.lower()
    result = []
    for review in reviews:
        if not (
            _contains(review.get("title"), needle)
            or _contains(review.get("content"), needle)
            or _contains(review.get("username"), needle)
        ):
            continue
        if firm != ALL_FIRMS and review.get("firmId") != int(firm):
            continue
        if rating != ALL_RATINGS and review.get("rating") != int(rating):
            continue
        result.append(review)
    return result


def filter_resources(
    resources: Iterable[Record], search: str = "", category: str = ALL_CATEGORIES
) -> List[Record]:
    """Keep resources matching search text (title/summary) and category."""
    needle = search.lower()
    return [
        resource for resource in resources
        if (_contains(resource.get("title"), needle) or _contains(resource.get("summary"), needle))
        and (category == ALL_CATEGORIES or resource.get("category") == category)
    ]


def select_for_comparison(
    firms: Iterable[Record], selected_ids: Iterable[int], max_compare: int = 3
) -> List[Record]:
    """Return the firms to show in the compare table.

    With no selection the first ``max_compare`` firms are shown;
    otherwise the selected ids in selection order, capped at
    ``max_compare``.
    """
    firms = list(firms)
    selected = list(dict.fromkeys(selected_ids))
    if not selected:
        return firms[:max_compare]
    by_id = {firm.get("id"): firm for firm in firms}
    return [by_id[i] for i in selected if i in by_id][:max_compare]


def format_rating(avg_rating: Optional[float]) -> str:
    """Render an average rating with one decimal, ``"0.0"`` when missing."""
    return f"{(avg_rating or 0):.1f}"


def build_account_type(fields: Record) -> Record:
    """Return a copy of an account offering with ``discountedPrice`` filled in.

    Call this whenever ``price`` or ``currentDiscountRate`` changes and
    before submitting the firm form.  Missing inputs count as 0.
    """
    account = dict(fields)
    price = float(account.get("price") or 0)
    rate = float(account.get("currentDiscountRate") or 0)
    account["discountedPrice"] = derive_discounted_price(price, rate)
    return account
