"""Port for handing finalized orders to whatever fulfils them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import OrderSummary


class OrderSubmitter(ABC):

    @abstractmethod
    def submit(self, order: OrderSummary) -> None:
        """Deliver a finalized order to the backend."""
