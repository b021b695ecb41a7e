"""Abstract repository for Product entities.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete in-memory implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact, case-sensitive name, or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Store a new product. Uniqueness is checked by the caller."""
