"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import CartLine, OrderSummary
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry. Only the base price, never a charged price."""

    name: str
    description: str
    base_price: str  # formatted, e.g. "$10.00"
    strategy: str


@dataclass(frozen=True)
class CartLineDTO:
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class OrderSummaryDTO:
    shipping_address: str
    phone: str
    payment_method: str
    items: list[CartLineDTO]
    total: str
    placed_at: str


@dataclass(frozen=True)
class FinalizeOutcomeDTO:
    """Output of finalize: ``order`` on success, ``error`` message otherwise."""

    order: OrderSummaryDTO | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.order is not None


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        name=product.name,
        description=product.description,
        base_price=str(product.base_price),
        strategy=product.strategy.value,
    )


def line_to_dto(line: CartLine) -> CartLineDTO:
    return CartLineDTO(
        product_name=line.product.name,
        quantity=line.quantity.value,
        unit_price=str(line.product.base_price),
        line_total=str(line.charged_price),
    )


def order_to_dto(order: OrderSummary) -> OrderSummaryDTO:
    return OrderSummaryDTO(
        shipping_address=order.shipping_address,
        phone=order.phone,
        payment_method=order.payment_method,
        items=[line_to_dto(line) for line in order.lines],
        total=str(order.total),
        placed_at=order.placed_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
