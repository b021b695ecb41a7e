"""Price strategies bound to products at creation time.

Only two strategies exist, so they are modelled as a closed set of enum
tags and ``compute`` switches on the tag.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity

# Fixed 10% reduction applied by the DISCOUNTED strategy.
DISCOUNT_FACTOR = Decimal("0.9")


class PriceStrategy(Enum):
    SIMPLE = "simple"
    DISCOUNTED = "discounted"

    def compute(self, base_price: Money, quantity: int) -> Money:
        """Return the charged total for ``quantity`` units of ``base_price``.

        Raises InvalidQuantityError if quantity is not a positive integer.
        """
        subtotal = base_price * Quantity(quantity).value
        if self is PriceStrategy.DISCOUNTED:
            return subtotal.scaled(DISCOUNT_FACTOR)
        return subtotal

    @staticmethod
    def from_tag(tag: str) -> PriceStrategy:
        """Resolve a strategy from its tag, e.g. ``"discounted"``."""
        try:
            return PriceStrategy(tag.strip().lower())
        except ValueError as exc:
            valid = ", ".join(s.value for s in PriceStrategy)
            raise ValidationError(
                f"Unknown pricing strategy '{tag}' (expected one of: {valid})"
            ) from exc
