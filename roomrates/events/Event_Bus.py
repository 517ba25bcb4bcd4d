"""Simple Event Bus / Observer implementation for calendar and catalog changes.

Event names used so far:
  catalog.changed -> payload {"action": str, "room_index": int, "plan_index": int | None}
  calendar.week_changed -> payload {"previous": date, "week_start": date}
  overlay.cell_edited -> payload {"week_start": date, "room_index": int, "kind": str, "day_index": int, "value": int}
  overlay.edit_rejected -> payload {"week_start": date, "room_index": int, "kind": str, "day_index": int, "raw": Any}
  overlay.invalidated -> payload {"dropped": int}
  ui.pointer_down -> payload {"target": str, "inside": bool}
  ui.popover_closed -> payload {"popover": str, "reason": str}

Subscribers are callables taking (event_name, payload). There is no module-level
bus: every store receives the bus it should publish on.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
CATALOG_CHANGED = "catalog.changed"
CALENDAR_WEEK_CHANGED = "calendar.week_changed"
OVERLAY_CELL_EDITED = "overlay.cell_edited"
OVERLAY_EDIT_REJECTED = "overlay.edit_rejected"
OVERLAY_INVALIDATED = "overlay.invalidated"
UI_POINTER_DOWN = "ui.pointer_down"
UI_POPOVER_CLOSED = "ui.popover_closed"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def subscriber_count(self, event_name: str) -> int:
		return len(self._subscribers.get(event_name, []))

	def publish(self, event_name: str, payload: Any = None):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


__all__ = [
	'EventBus',
	'CATALOG_CHANGED', 'CALENDAR_WEEK_CHANGED', 'OVERLAY_CELL_EDITED', 'OVERLAY_EDIT_REJECTED',
	'OVERLAY_INVALIDATED', 'UI_POINTER_DOWN', 'UI_POPOVER_CLOSED',
]
