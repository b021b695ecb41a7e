"""Subscriber that greets a named user on the console."""

from __future__ import annotations

import logging

import click

from storefront.domain.service.notification_channel import ProductAdded, Subscriber

logger = logging.getLogger(__name__)


class ConsoleSubscriber(Subscriber):

    def __init__(self, name: str) -> None:
        self.name = name

    def receive(self, event: ProductAdded) -> None:
        logger.debug(f"Delivering ProductAdded({event.product_name}) to {self.name}")
        click.echo(
            f"Hello {self.name}, a new product was added: {event.product_name}"
        )

    def __repr__(self) -> str:
        return f"ConsoleSubscriber({self.name!r})"
