"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from collections.abc import Iterable

from storefront.application.add_product import AddProductHandler
from storefront.application.session import ShopSession
from storefront.domain.service.catalog import Catalog
from storefront.domain.service.notification_channel import NotificationChannel
from storefront.infrastructure.notifications.console_subscriber import (
    ConsoleSubscriber,
)
from storefront.infrastructure.ordering.logging_order_submitter import (
    LoggingOrderSubmitter,
)
from storefront.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

# (name, description, base price, strategy tag)
SEED_PRODUCTS: tuple[tuple[str, str, str, str], ...] = (
    ("Widget", "A sturdy general-purpose widget", "10.00", "simple"),
    ("Gadget", "A gadget sold at 10% off", "20.00", "discounted"),
)

DEFAULT_SUBSCRIBERS: tuple[str, ...] = ("User1", "User2")


def build_session(
    subscriber_names: Iterable[str] = DEFAULT_SUBSCRIBERS,
    seed_products: Iterable[tuple[str, str, str, str]] = SEED_PRODUCTS,
) -> ShopSession:
    """Create the session and seed its catalog.

    Subscribers are attached first so they hear about the seeded products.
    """
    channel = NotificationChannel()
    for name in subscriber_names:
        channel.subscribe(ConsoleSubscriber(name))

    catalog = Catalog(InMemoryProductRepository(), channel)
    add_product = AddProductHandler(catalog)
    for name, description, price, strategy in seed_products:
        add_product.handle(
            name=name, price=price, description=description, strategy=strategy
        )

    return ShopSession(
        catalog=catalog,
        channel=channel,
        order_submitter=LoggingOrderSubmitter(),
    )
