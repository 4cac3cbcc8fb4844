"""Event helper utilities.

This module provides helper functions for publishing store and inventory
events on a store's event bus.

Quick import:
    from kitchen.events.event_helpers import (
        publish_store_changed, publish_near_expiry, publish_expired,
    )

"""
from __future__ import annotations
from typing import Any
from .Event_Bus import (
    EventBus, STORE_CHANGED, INVENTORY_NEAR_EXPIRY, INVENTORY_EXPIRED
)

__all__ = [
    'publish_store_changed', 'publish_near_expiry', 'publish_expired',
    'STORE_CHANGED', 'INVENTORY_NEAR_EXPIRY', 'INVENTORY_EXPIRED'
]


def publish_store_changed(bus: EventBus, collection: str):
    """Publish a store.changed event after a collection snapshot was written."""
    bus.publish(STORE_CHANGED, {'collection': collection})


def publish_near_expiry(bus: EventBus, item: Any, days_left: int, threshold: int):
    """Publish an inventory.near_expiry event."""
    bus.publish(INVENTORY_NEAR_EXPIRY, {
        'item': item,
        'days_left': days_left,
        'threshold': threshold
    })


def publish_expired(bus: EventBus, item: Any, days_left: int):
    """Publish an inventory.expired event."""
    bus.publish(INVENTORY_EXPIRED, {
        'item': item,
        'days_left': days_left
    })
