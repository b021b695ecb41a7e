"""Cart aggregate: the working selection of the current session.

The Cart owns its lines. A product appears on at most one line; adding it
again overwrites that line's quantity. Finalizing snapshots the lines into
an OrderSummary and empties the cart in the same step.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import EmptyCartError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartLine:
    """One product-with-quantity entry.

    Frozen so that snapshots handed out by the cart stay valid after the
    cart changes; an overwrite replaces the whole line.
    """

    product: Product
    quantity: Quantity

    @property
    def charged_price(self) -> Money:
        return self.product.charged_price(self.quantity.value)


def _sum_lines(lines: tuple[CartLine, ...]) -> Money:
    result = Money.zero()
    for line in lines:
        result = result + line.charged_price
    return result


@dataclass(frozen=True)
class CartView:
    lines: tuple[CartLine, ...]
    total: Money


@dataclass(frozen=True)
class OrderSummary:
    """Immutable record produced by a successful finalize."""

    shipping_address: str
    phone: str
    payment_method: str
    lines: tuple[CartLine, ...]
    total: Money
    placed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class FinalizeResult:
    """Either an ``order`` or an ``error``, never both."""

    order: OrderSummary | None = None
    error: EmptyCartError | None = None

    @property
    def ok(self) -> bool:
        return self.order is not None


class Cart:
    """The single cart of a shopping session.

    Lines are keyed by product name and keep insertion order for display.
    """

    def __init__(self) -> None:
        self._lines: dict[str, CartLine] = {}

    # --- State transitions ----------------------------------------------------

    def add_line(self, product: Product, quantity: int) -> CartLine:
        """Put ``quantity`` units of ``product`` in the cart.

        If the product already has a line, its quantity is replaced (not
        accumulated) and the line keeps its position.
        Raises InvalidQuantityError if quantity < 1.
        """
        line = CartLine(product=product, quantity=Quantity(quantity))
        self._lines[product.name] = line
        return line

    def remove_line(self, product: Product) -> bool:
        """Remove the product's line. Removing an absent product is a no-op.

        Returns True if a line was removed.
        """
        return self._lines.pop(product.name, None) is not None

    def clear(self) -> None:
        self._lines.clear()

    def finalize(
        self,
        shipping_address: str,
        phone: str,
        payment_method: str,
    ) -> FinalizeResult:
        """Snapshot the cart into an OrderSummary and reset it.

        An empty cart is reported as a result carrying EmptyCartError and
        the cart is left untouched.
        """
        if not self._lines:
            return FinalizeResult(
                error=EmptyCartError("Cannot finalize the order: the cart is empty")
            )

        lines = self.lines
        order = OrderSummary(
            shipping_address=shipping_address,
            phone=phone,
            payment_method=payment_method,
            lines=lines,
            total=_sum_lines(lines),
        )
        self._lines.clear()
        return FinalizeResult(order=order)

    # --- Queries --------------------------------------------------------------

    def view_total(self) -> CartView:
        lines = self.lines
        return CartView(lines=lines, total=_sum_lines(lines))

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)
