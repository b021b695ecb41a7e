"""Application service: Add Product use case."""

from __future__ import annotations

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.model.pricing import PriceStrategy
from storefront.domain.model.value_objects import Money
from storefront.domain.service.catalog import Catalog


class AddProductHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(
        self,
        name: str,
        price: str,
        description: str = "",
        strategy: str = PriceStrategy.SIMPLE.value,
    ) -> ProductDTO:
        """Add a new product to the catalog (subscribers are notified)."""
        product = self._catalog.add_product(
            name=name,
            description=description,
            base_price=Money.of(price),
            strategy=PriceStrategy.from_tag(strategy),
        )
        return product_to_dto(product)
