"""Domain service: catalog change notifications.

Subscribers register with the channel and are told, synchronously and in
subscription order, whenever a product is added to the catalog.

A subscriber that raises aborts the broadcast: the error propagates to the
caller and the subscribers after it are not notified.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class ProductAdded:
    product_name: str
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Subscriber(ABC):

    @abstractmethod
    def receive(self, event: ProductAdded) -> None:
        """Handle a catalog change event."""


class NotificationChannel:

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> None:
        """Add a subscriber. Subscribing the same handle twice is a no-op."""
        if not self._contains(subscriber):
            self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> None:
        """Remove a subscriber. Unknown handles are ignored."""
        self._subscribers = [s for s in self._subscribers if s is not subscriber]

    def broadcast(self, product_name: str) -> None:
        event = ProductAdded(product_name=product_name)
        # Snapshot so a subscriber may unsubscribe itself mid-delivery
        for subscriber in tuple(self._subscribers):
            subscriber.receive(event)

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        return tuple(self._subscribers)

    def __len__(self) -> int:
        return len(self._subscribers)

    def _contains(self, subscriber: Subscriber) -> bool:
        return any(s is subscriber for s in self._subscribers)
