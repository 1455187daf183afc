"""Web-facing observers for diagnostic events.

Subscribes to the GLOBAL_EVENT_BUS and keeps a bounded in-memory buffer of
recent events, polled by the web layer through /api/diagnostics.

  * Each event gets an auto-increment integer id (cursor) so clients can ask
    only for newer events (since=<last_id_seen>).
  * A Lock guards the buffer; it is per process.
  * MAX_DIAGNOSTIC_EVENTS caps memory.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from mealboard.utilities.config import MAX_DIAGNOSTIC_EVENTS
from .Event_Bus import (
    GLOBAL_EVENT_BUS, CALENDAR_DANGLING_REFERENCE, CALENDAR_ENTRY_ADDED,
    CALENDAR_ENTRY_REMOVED, STORE_FAILURE
)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
_started = False

_OBSERVED = (CALENDAR_DANGLING_REFERENCE, CALENDAR_ENTRY_ADDED, CALENDAR_ENTRY_REMOVED, STORE_FAILURE)


def _record(event_name: str, payload: Any):
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        if isinstance(payload, dict):
            for k in ('entry_id', 'menu_id', 'date', 'operation', 'error'):
                if k in payload:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_DIAGNOSTIC_EVENTS:
            del _events[: len(_events) - MAX_DIAGNOSTIC_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in _OBSERVED:
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True


def get_events(since: int | None = None, limit: int | None = None) -> Dict[str, Any]:
    """Events with id > since (the whole buffer when since is None), oldest first.

    With limit, only the oldest `limit` matching events are returned and
    next_cursor points at the last one returned, so a client paging with
    since=next_cursor never skips an event.
    """
    floor = since or 0
    with _lock:
        pending = [e for e in _events if e['id'] > floor]
        last_issued = _next_id - 1
    if limit is not None:
        pending = pending[:max(limit, 0)]
    cursor = pending[-1]['id'] if pending else max(floor, last_issued)
    return {'events': pending, 'next_cursor': cursor}


__all__ = ['start', 'get_events']
