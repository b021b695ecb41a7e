"""Application service: Finalize Order use case.

Lets the Cart aggregate snapshot and reset itself, then hands the
resulting summary to the order submission hook. An empty cart comes
back as an outcome with an error message, not as an exception.
"""

from __future__ import annotations

from storefront.application.dto import FinalizeOutcomeDTO, order_to_dto
from storefront.domain.model.cart import Cart
from storefront.domain.service.order_submission import OrderSubmitter


class FinalizeOrderHandler:

    def __init__(self, cart: Cart, order_submitter: OrderSubmitter) -> None:
        self._cart = cart
        self._order_submitter = order_submitter

    def handle(
        self,
        shipping_address: str,
        phone: str,
        payment_method: str,
    ) -> FinalizeOutcomeDTO:
        result = self._cart.finalize(shipping_address, phone, payment_method)
        if not result.ok:
            return FinalizeOutcomeDTO(error=str(result.error))

        self._order_submitter.submit(result.order)  # type: ignore[arg-type]
        return FinalizeOutcomeDTO(order=order_to_dto(result.order))  # type: ignore[arg-type]
