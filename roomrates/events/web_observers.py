"""Web-facing observer for calendar and catalog events.

EventLog subscribes to an EventBus and keeps a lightweight in-memory ring
buffer of recent events that the web layer (/api/events) can poll.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * A Lock guards the buffer; uvicorn may call into it from worker threads.
  * max_events caps memory use.
"""
from __future__ import annotations
from datetime import date, datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Optional

from roomrates.events.Event_Bus import (
    EventBus, CATALOG_CHANGED, CALENDAR_WEEK_CHANGED, OVERLAY_CELL_EDITED,
    OVERLAY_EDIT_REJECTED, OVERLAY_INVALIDATED,
)
from roomrates.utilities.config import MAX_EVENTS

OBSERVED_EVENTS = (
    CATALOG_CHANGED, CALENDAR_WEEK_CHANGED, OVERLAY_CELL_EDITED,
    OVERLAY_EDIT_REJECTED, OVERLAY_INVALIDATED,
)


def _plain(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (int, float, str, bool)) or value is None:
        return value
    return str(value)


class EventLog:
    def __init__(self, max_events: int = MAX_EVENTS):
        self.max_events = max_events
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._bus: Optional[EventBus] = None

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        with self._lock:
            evt = {
                'id': self._next_id,
                'type': event_name,
                'ts': datetime.now(timezone.utc).isoformat(),
            }
            if isinstance(payload, dict):
                for k, v in payload.items():
                    evt[k] = _plain(v)
            self._events.append(evt)
            self._next_id += 1
            # Trim buffer
            if len(self._events) > self.max_events:
                del self._events[: len(self._events) - self.max_events]

    def start(self, bus: EventBus) -> "EventLog":
        """Idempotent start: subscribe to the bus once."""
        if self._bus is bus:
            return self
        for name in OBSERVED_EVENTS:
            bus.subscribe(name, self.record)
        self._bus = bus
        return self

    def get_events(self, since: int | None = None) -> Dict[str, Any]:
        """Return events newer than 'since' (exclusive).

        If since is None, returns everything still buffered. next_cursor is the
        largest id so a client can poll with since=next_cursor.
        """
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['EventLog', 'OBSERVED_EVENTS']
