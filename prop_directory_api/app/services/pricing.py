"""
Discount price derivation for account offerings.

An account type carries a base ``price`` and a ``current_discount_rate``
expressed as a percentage (0–100).  The offered price is derived from
those two inputs and is never stored independently of them: the
account type schema calls :func:`derive_discounted_price` every time a
row is validated, so create, update and nested replacement all
produce a consistent ``discounted_price``.
"""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def derive_discounted_price(price: float, discount_rate: float) -> float:
    """Return ``price`` reduced by ``discount_rate`` percent, rounded to cents.

    Half cents round up, so ``6.125`` becomes ``6.13``.  The rate is not
    range checked here; the schema rejects values outside 0–100 before
    this function is reached.

    >>> derive_discounted_price(100, 25)
    75.0
    >>> derive_discounted_price(99.99, 10)
    89.99
    >>> derive_discounted_price(12.25, 50)
    6.13
    """
    discounted = Decimal(price * (1 - discount_rate / 100))
    return float(discounted.quantize(CENT, rounding=ROUND_HALF_UP))
