"""Application service: Clear Cart use case."""

from __future__ import annotations

from storefront.domain.model.cart import Cart


class ClearCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> None:
        self._cart.clear()
