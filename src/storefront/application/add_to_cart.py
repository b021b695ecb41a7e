"""Application service: Add To Cart use case.

Resolves the product by name through the catalog, then lets the Cart
aggregate enforce the quantity rule and the one-line-per-product policy.
"""

from __future__ import annotations

from storefront.application.dto import CartLineDTO, line_to_dto
from storefront.domain.model.cart import Cart
from storefront.domain.service.catalog import Catalog


class AddToCartHandler:

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self, product_name: str, quantity: int) -> CartLineDTO:
        """Add a product to the cart, overwriting any existing quantity.

        Raises ProductNotFoundError for unknown names and
        InvalidQuantityError for quantities below one.
        """
        product = self._catalog.get(product_name)
        line = self._cart.add_line(product, quantity)
        return line_to_dto(line)
