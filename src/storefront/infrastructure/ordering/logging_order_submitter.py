"""Order submitter that only records finalized orders in the log.

There is no payment or shipping backend; this is where one would plug in.
"""

from __future__ import annotations

import logging

from storefront.domain.model.cart import OrderSummary
from storefront.domain.service.order_submission import OrderSubmitter

logger = logging.getLogger(__name__)


class LoggingOrderSubmitter(OrderSubmitter):

    def submit(self, order: OrderSummary) -> None:
        logger.info(
            f"Order finalized: {len(order.lines)} line(s), total {order.total}, "
            f"payment={order.payment_method}"
        )
        logger.debug(f"Ship to: {order.shipping_address} | Phone: {order.phone}")
