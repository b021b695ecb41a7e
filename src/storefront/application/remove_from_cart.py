"""Application service: Remove From Cart use case."""

from __future__ import annotations

from storefront.domain.model.cart import Cart
from storefront.domain.service.catalog import Catalog


class RemoveFromCartHandler:

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self, product_name: str) -> bool:
        """Remove a product's line; returns False if it was not in the cart.

        The name must still exist in the catalog (ProductNotFoundError).
        """
        product = self._catalog.get(product_name)
        return self._cart.remove_line(product)
