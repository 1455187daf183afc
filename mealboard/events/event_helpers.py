"""Helpers that publish calendar and store diagnostics on the global event bus.

Quick import:
    from mealboard.events.event_helpers import (
        publish_dangling_reference, publish_entry_added, publish_entry_removed, publish_store_failure
    )
"""
from __future__ import annotations
from .Event_Bus import (
    publish,
    CALENDAR_DANGLING_REFERENCE, CALENDAR_ENTRY_ADDED, CALENDAR_ENTRY_REMOVED, STORE_FAILURE,
)

__all__ = [
    'publish_dangling_reference', 'publish_entry_added', 'publish_entry_removed', 'publish_store_failure',
]


def publish_dangling_reference(entry_id: str, menu_id: str, date: str):
    """A calendar entry points at a menu that no longer exists."""
    publish(CALENDAR_DANGLING_REFERENCE, {'entry_id': entry_id, 'menu_id': menu_id, 'date': date})


def publish_entry_added(entry_id: str, menu_id: str, date: str):
    publish(CALENDAR_ENTRY_ADDED, {'entry_id': entry_id, 'menu_id': menu_id, 'date': date})


def publish_entry_removed(entry_id: str):
    publish(CALENDAR_ENTRY_REMOVED, {'entry_id': entry_id})


def publish_store_failure(operation: str, error: Exception):
    """A store call failed and the caller swallowed it."""
    publish(STORE_FAILURE, {'operation': operation, 'error': str(error)})
