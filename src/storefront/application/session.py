"""The objects one shopping session works with.

Exactly one catalog, cart and notification channel per session, passed
explicitly to whoever needs them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.cart import Cart
from storefront.domain.service.catalog import Catalog
from storefront.domain.service.notification_channel import NotificationChannel
from storefront.domain.service.order_submission import OrderSubmitter


@dataclass
class ShopSession:
    catalog: Catalog
    channel: NotificationChannel
    order_submitter: OrderSubmitter
    cart: Cart = field(default_factory=Cart)
