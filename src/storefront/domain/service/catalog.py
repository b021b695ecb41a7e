"""Domain service: Catalog.

Coordinates product storage with catalog change notifications. Product
names are unique; every successful addition is broadcast exactly once.
"""

from __future__ import annotations

from storefront.domain.exceptions import (
    DuplicateProductError,
    ProductNotFoundError,
    ValidationError,
)
from storefront.domain.model.pricing import PriceStrategy
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.notification_channel import NotificationChannel


class Catalog:

    def __init__(
        self,
        product_repo: ProductRepository,
        channel: NotificationChannel,
    ) -> None:
        self._product_repo = product_repo
        self._channel = channel

    def add_product(
        self,
        name: str,
        description: str,
        base_price: Money,
        strategy: PriceStrategy,
    ) -> Product:
        """Add a new product and notify subscribers.

        Raises DuplicateProductError if the name is taken; the catalog is
        left unchanged and nobody is notified.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        name = name.strip()

        if self._product_repo.get_by_name(name) is not None:
            raise DuplicateProductError(f"Product '{name}' already exists")

        product = Product(
            name=name,
            description=description,
            base_price=base_price,
            strategy=strategy,
        )
        self._product_repo.add(product)
        self._channel.broadcast(product.name)
        return product

    def find_by_name(self, name: str) -> Product | None:
        return self._product_repo.get_by_name(name)

    def get(self, name: str) -> Product:
        product = self._product_repo.get_by_name(name)
        if product is None:
            raise ProductNotFoundError(f"Product not found: '{name}'")
        return product

    def list_all(self) -> list[Product]:
        return self._product_repo.list_all()
