"""Application service: View Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, line_to_dto
from storefront.domain.model.cart import Cart


class ViewCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        view = self._cart.view_total()
        return CartDTO(
            items=[line_to_dto(line) for line in view.lines],
            total=str(view.total),
        )
