"""Simple Event Bus / Observer implementation for calendar diagnostics.

Event names:
  calendar.dangling_reference -> payload {"entry_id": str, "menu_id": str, "date": str}
  calendar.entry_added        -> payload {"entry_id": str, "menu_id": str, "date": str}
  calendar.entry_removed      -> payload {"entry_id": str}
  store.failure               -> payload {"operation": str, "error": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

CALENDAR_DANGLING_REFERENCE = "calendar.dangling_reference"
CALENDAR_ENTRY_ADDED = "calendar.entry_added"
CALENDAR_ENTRY_REMOVED = "calendar.entry_removed"
STORE_FAILURE = "store.failure"

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
		except ValueError:
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


GLOBAL_EVENT_BUS = EventBus()


def publish(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish', 'Listener',
	'CALENDAR_DANGLING_REFERENCE', 'CALENDAR_ENTRY_ADDED', 'CALENDAR_ENTRY_REMOVED', 'STORE_FAILURE'
]
