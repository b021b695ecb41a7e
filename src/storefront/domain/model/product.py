"""Product entity.

A product is identified by its name and carries the pricing strategy it
was created with. Quantities live on cart lines, never on the product.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.pricing import PriceStrategy
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Immutable for the lifetime of the process: neither its identity nor
    its strategy can change once it has been added to the catalog.
    """

    name: str
    description: str
    base_price: Money
    strategy: PriceStrategy

    def charged_price(self, quantity: int) -> Money:
        return self.strategy.compute(self.base_price, quantity)
