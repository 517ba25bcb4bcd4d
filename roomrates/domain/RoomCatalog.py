"""Room catalog aggregate: the list of room types and their rate plans.

Every mutation is replace-by-index. A stale or out-of-range index turns the
call into a no-op; nothing is raised. Templates handed out by list_rooms()
are never mutated in place, a change always installs a new RoomTemplate.
"""
import logging
from typing import List, Optional

from roomrates.domain.RatePlan import PlanTemplate, RatePlanDetails
from roomrates.domain.RoomTemplate import RoomTemplate
from roomrates.events.Event_Bus import EventBus, CATALOG_CHANGED
from roomrates.utilities.constants import DEFAULT_PLAN_NAME

logger = logging.getLogger(__name__)

ROOM_FIELDS = ("name", "room_count", "max_guests")


def _in_range(idx: int, items: list) -> bool:
    return 0 <= idx < len(items)


class RoomCatalog:
    def __init__(self, rooms: Optional[List[RoomTemplate]] = None, event_bus: Optional[EventBus] = None):
        self._rooms: List[RoomTemplate] = rooms[:] if rooms else []
        self._event_bus = event_bus if event_bus is not None else EventBus()

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    def _notify(self, action: str, room_index: int, plan_index: Optional[int] = None):
        logger.info("Catalog %s (room=%s plan=%s)", action, room_index, plan_index)
        self._event_bus.publish(CATALOG_CHANGED, {
            "action": action,
            "room_index": room_index,
            "plan_index": plan_index,
        })

    def _skip(self, action: str, room_index: int, plan_index: Optional[int] = None):
        logger.debug("Catalog %s ignored: index out of range (room=%s plan=%s)", action, room_index, plan_index)

    def _replace_room(self, room_idx: int, plans: List[PlanTemplate]):
        room = self._rooms[room_idx]
        self._rooms[room_idx] = RoomTemplate(room.name, plans, room.room_count, room.max_guests)

    def list_rooms(self) -> List[RoomTemplate]:
        '''
        Returns a snapshot of the room templates in display order.
        '''
        return list(self._rooms)

    def __len__(self) -> int:
        return len(self._rooms)

    def update_plan_details(self, room_idx: int, plan_idx: int, details: RatePlanDetails):
        '''
        Replaces a plan's business terms; name, meal type and base price follow the details.
        '''
        if not _in_range(room_idx, self._rooms) or not _in_range(plan_idx, self._rooms[room_idx].plans):
            self._skip("update_plan_details", room_idx, plan_idx)
            return
        plans = list(self._rooms[room_idx].plans)
        plans[plan_idx] = PlanTemplate.from_details(details)
        self._replace_room(room_idx, plans)
        self._notify("update_plan_details", room_idx, plan_idx)

    def toggle_plan_active(self, room_idx: int, plan_idx: int):
        if not _in_range(room_idx, self._rooms) or not _in_range(plan_idx, self._rooms[room_idx].plans):
            self._skip("toggle_plan_active", room_idx, plan_idx)
            return
        details = self._rooms[room_idx].plans[plan_idx].details.copy()
        details.active = not details.active
        self.update_plan_details(room_idx, plan_idx, details)

    def delete_plan(self, room_idx: int, plan_idx: int):
        if not _in_range(room_idx, self._rooms) or not _in_range(plan_idx, self._rooms[room_idx].plans):
            self._skip("delete_plan", room_idx, plan_idx)
            return
        plans = [p for i, p in enumerate(self._rooms[room_idx].plans) if i != plan_idx]
        self._replace_room(room_idx, plans)
        self._notify("delete_plan", room_idx, plan_idx)

    def add_plan(self, room_idx: int, plan: PlanTemplate):
        '''
        Appends a plan to a room. A plan without a name is called "New Plan".
        '''
        if not _in_range(room_idx, self._rooms):
            self._skip("add_plan", room_idx)
            return
        details = plan.details.copy()
        if not details.name:
            details.name = plan.name or DEFAULT_PLAN_NAME
        plans = list(self._rooms[room_idx].plans) + [PlanTemplate.from_details(details)]
        self._replace_room(room_idx, plans)
        self._notify("add_plan", room_idx, len(plans) - 1)

    def add_room(self, room: RoomTemplate):
        self._rooms.append(RoomTemplate(room.name, room.plans, room.room_count, room.max_guests))
        self._notify("add_room", len(self._rooms) - 1)

    def delete_room(self, room_idx: int):
        if not _in_range(room_idx, self._rooms):
            self._skip("delete_room", room_idx)
            return
        del self._rooms[room_idx]
        self._notify("delete_room", room_idx)

    def update_room(self, room_idx: int, **fields):
        '''
        Updates name, room_count and/or max_guests. Other keys are ignored.
        '''
        if not _in_range(room_idx, self._rooms):
            self._skip("update_room", room_idx)
            return
        room = self._rooms[room_idx]
        changes = {k: v for k, v in fields.items() if k in ROOM_FIELDS and v is not None}
        self._rooms[room_idx] = RoomTemplate(
            changes.get("name", room.name),
            room.plans,
            changes.get("room_count", room.room_count),
            changes.get("max_guests", room.max_guests),
        )
        self._notify("update_room", room_idx)

    def to_dict(self):
        return [room.to_dict() for room in self._rooms]
