"""Calendar session: the one object the presentation layer talks to.

It owns the active week start and the overlay store and reads room types
from an injected catalog. Changing the week is the only place overlays are
discarded, and it happens through an explicit invalidate_all() call.
"""
import logging
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from roomrates.domain.CalendarRoom import CalendarRoom
from roomrates.domain.RoomCatalog import RoomCatalog
from roomrates.events.Event_Bus import CALENDAR_WEEK_CHANGED
from roomrates.infra.Overlay_Store import OverlayStore
from roomrates.logic.calendar.month_grid import month_cells
from roomrates.logic.calendar.week import LAST_WEEK_START, monday_of, shift_week, week_dates
from roomrates.utilities.constants import DAY_NAMES, PICKER_DAY_LABELS
from roomrates.utilities.formatting import format_day_header, month_title

logger = logging.getLogger(__name__)


class CatalogMissingError(RuntimeError):
    """Raised when a calendar session is created without a room catalog."""


class CalendarSession:
    def __init__(self, catalog: Optional[RoomCatalog], overlays: Optional[OverlayStore] = None,
                 today: Optional[Callable[[], date]] = None):
        if catalog is None:
            raise CatalogMissingError("CalendarSession requires a RoomCatalog")
        self.catalog = catalog
        self.overlays = overlays if overlays is not None else OverlayStore(catalog.event_bus)
        self._today = today or date.today
        self._week_start = min(monday_of(self.today), LAST_WEEK_START)

    @property
    def today(self) -> date:
        return self._today()

    @property
    def week_start(self) -> date:
        return self._week_start

    # --- Navigation ----------------------------------------------------------
    def _set_week(self, week_start: date) -> date:
        week_start = min(week_start, LAST_WEEK_START)
        if week_start == self._week_start:
            return week_start
        previous = self._week_start
        self._week_start = week_start
        self.overlays.invalidate_all()
        logger.info("Week changed %s -> %s", previous, week_start)
        self.catalog.event_bus.publish(CALENDAR_WEEK_CHANGED, {"previous": previous, "week_start": week_start})
        return week_start

    def _step_week(self, delta_weeks: int) -> date:
        try:
            target = shift_week(self._week_start, delta_weeks)
        except OverflowError:
            logger.debug("Week %s is at the edge of the calendar, staying put", self._week_start)
            return self._week_start
        return self._set_week(target)

    def go_to_prev_week(self) -> date:
        return self._step_week(-1)

    def go_to_next_week(self) -> date:
        return self._step_week(1)

    def select_date(self, d: date) -> date:
        return self._set_week(monday_of(d))

    def go_to_today(self) -> date:
        return self.select_date(self.today)

    # --- Rendering -----------------------------------------------------------
    def days(self) -> List[Dict[str, Any]]:
        today = self.today
        return [
            {"day_name": DAY_NAMES[i], "label": format_day_header(d), "date": d, "is_today": d == today}
            for i, d in enumerate(week_dates(self._week_start))
        ]

    def get_effective_room(self, room_index: int) -> Optional[CalendarRoom]:
        return self.overlays.get(self._week_start, room_index, self.catalog.list_rooms())

    def rooms(self) -> List[CalendarRoom]:
        templates = self.catalog.list_rooms()
        return [self.overlays.get(self._week_start, idx, templates) for idx in range(len(templates))]

    def month_view(self, year: int, month: int) -> Dict[str, Any]:
        return {
            "year": year,
            "month": month,
            "title": month_title(year, month),
            "day_labels": list(PICKER_DAY_LABELS),
            "cells": month_cells(year, month, self.today, self._week_start),
        }

    # --- Editing -------------------------------------------------------------
    def set_inventory_cell(self, room_index: int, day_index: int, field: str, raw: Any) -> Optional[int]:
        return self.overlays.set_inventory_cell(self._week_start, room_index, self.catalog.list_rooms(),
                                                day_index, field, raw)

    def set_price_cell(self, room_index: int, plan_index: int, day_index: int, raw: Any) -> Optional[int]:
        return self.overlays.set_price_cell(self._week_start, room_index, self.catalog.list_rooms(),
                                            plan_index, day_index, raw)
