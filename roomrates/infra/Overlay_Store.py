"""Week-scoped overlay of user edits on top of the synthesized baseline.

An overlay entry is a complete CalendarRoom for one (week_start, room_index)
pair. Writes replace the whole row; reads fall back to synthesis when no
entry exists. Nothing here survives invalidate_all(), which the calendar
session calls whenever the visible week changes.
"""
import logging
from datetime import date
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from roomrates.domain.CalendarRoom import CalendarRoom
from roomrates.domain.RoomTemplate import RoomTemplate
from roomrates.events.Event_Bus import (
    EventBus, OVERLAY_CELL_EDITED, OVERLAY_EDIT_REJECTED, OVERLAY_INVALIDATED,
)
from roomrates.logic.synthesis.generator import synthesize_room
from roomrates.utilities.constants import DAYS_IN_WEEK, INVENTORY_FIELDS
from roomrates.utilities.validators import parse_cell_value

logger = logging.getLogger(__name__)


class OverlayKey(NamedTuple):
    week_start: date
    room_index: int


class OverlayStore:
    def __init__(self, event_bus: Optional[EventBus] = None):
        self._entries: Dict[OverlayKey, CalendarRoom] = {}
        self._event_bus = event_bus if event_bus is not None else EventBus()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key) -> bool:
        return OverlayKey(*key) in self._entries

    def get(self, week_start: date, room_index: int, templates: List[RoomTemplate]) -> Optional[CalendarRoom]:
        """Effective room: the stored overlay if any, otherwise a fresh baseline.

        Returns None when room_index has neither an overlay nor a template.
        The baseline is not stored; only set_cell() creates entries.
        """
        key = OverlayKey(week_start, room_index)
        if key in self._entries:
            return self._entries[key].copy()
        if not 0 <= room_index < len(templates):
            return None
        return synthesize_room(week_start, room_index, templates[room_index])

    get_effective_room = get

    def set_cell(self, week_start: date, room_index: int, templates: List[RoomTemplate],
                 mutator: Callable[[CalendarRoom], CalendarRoom]) -> Optional[CalendarRoom]:
        """Apply mutator to the effective room and store the entire result."""
        current = self.get(week_start, room_index, templates)
        if current is None:
            return None
        updated = mutator(current)
        self._entries[OverlayKey(week_start, room_index)] = updated.copy()
        return updated

    def _reject(self, week_start: date, room_index: int, kind: str, day_index: int, raw: Any):
        logger.debug("Rejected %s edit for room %s day %s: %r", kind, room_index, day_index, raw)
        self._event_bus.publish(OVERLAY_EDIT_REJECTED, {
            "week_start": week_start, "room_index": room_index,
            "kind": kind, "day_index": day_index, "raw": raw,
        })

    def _edited(self, week_start: date, room_index: int, kind: str, day_index: int, value: int):
        self._event_bus.publish(OVERLAY_CELL_EDITED, {
            "week_start": week_start, "room_index": room_index,
            "kind": kind, "day_index": day_index, "value": value,
        })

    def set_inventory_cell(self, week_start: date, room_index: int, templates: List[RoomTemplate],
                           day_index: int, field: str, raw: Any) -> Optional[int]:
        """Write one available/sold cell. Returns the committed value.

        Invalid input leaves the store untouched and returns the previous value.
        Unknown field, day or room returns None.
        """
        current = self.get(week_start, room_index, templates)
        if current is None or field not in INVENTORY_FIELDS or not 0 <= day_index < DAYS_IN_WEEK:
            self._reject(week_start, room_index, field, day_index, raw)
            return None
        value = parse_cell_value(raw)
        if value is None:
            self._reject(week_start, room_index, field, day_index, raw)
            return getattr(current.inventory[day_index], field)

        def mutate(room: CalendarRoom) -> CalendarRoom:
            setattr(room.inventory[day_index], field, value)
            return room

        self.set_cell(week_start, room_index, templates, mutate)
        self._edited(week_start, room_index, field, day_index, value)
        return value

    def set_price_cell(self, week_start: date, room_index: int, templates: List[RoomTemplate],
                       plan_index: int, day_index: int, raw: Any) -> Optional[int]:
        """Write one price cell. Same return contract as set_inventory_cell."""
        current = self.get(week_start, room_index, templates)
        if (current is None or not 0 <= plan_index < len(current.rate_plans)
                or not 0 <= day_index < DAYS_IN_WEEK):
            self._reject(week_start, room_index, "price", day_index, raw)
            return None
        value = parse_cell_value(raw)
        if value is None:
            self._reject(week_start, room_index, "price", day_index, raw)
            return current.rate_plans[plan_index].prices[day_index]

        def mutate(room: CalendarRoom) -> CalendarRoom:
            room.rate_plans[plan_index].prices[day_index] = value
            return room

        self.set_cell(week_start, room_index, templates, mutate)
        self._edited(week_start, room_index, "price", day_index, value)
        return value

    def invalidate_all(self) -> int:
        """Drop every overlay. Returns how many entries were discarded."""
        dropped = len(self._entries)
        self._entries.clear()
        if dropped:
            logger.info("Discarded %d unsaved room edits", dropped)
        self._event_bus.publish(OVERLAY_INVALIDATED, {"dropped": dropped})
        return dropped
