"""In-memory implementation of ProductRepository.

State lives for the process lifetime only; nothing is written to disk.
"""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.name] = p

    # --- ProductRepository interface ------------------------------------------

    def get_by_name(self, name: str) -> Product | None:
        return self._store.get(name)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def add(self, product: Product) -> None:
        self._store[product.name] = product
