"""Simple Event Bus / Observer implementation for kitchen store notifications.

Event names used so far:
  store.changed -> payload {"collection": str}
  inventory.near_expiry -> payload {"item": InventoryItem, "days_left": int, "threshold": int}
  inventory.expired -> payload {"item": InventoryItem, "days_left": int}

Subscribers are callables taking (event_name, payload). Each store owns its bus.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
STORE_CHANGED = "store.changed"
INVENTORY_NEAR_EXPIRY = "inventory.near_expiry"
INVENTORY_EXPIRED = "inventory.expired"

Listener = Callable[[str, Any], None]


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Listener]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Listener):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Listener):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def clear(self):
		self._subscribers.clear()

	def publish(self, event_name: str, payload: Any = None):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				# a broken listener must not undo a committed mutation
				logger.exception("Error delivering %s to %r", event_name, cb)


__all__ = [
	'EventBus', 'Listener', 'STORE_CHANGED', 'INVENTORY_NEAR_EXPIRY', 'INVENTORY_EXPIRED'
]
