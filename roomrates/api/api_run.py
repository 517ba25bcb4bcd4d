from fastapi import (
    FastAPI,
    APIRouter,
    Depends,
    HTTPException,
    Query,
    Request,
)
from datetime import MAXYEAR, MINYEAR, date as _date, timedelta
from typing import Callable, Optional
import logging

from roomrates.api.deps import get_session
from roomrates.api.routes import rooms
from roomrates.domain.CalendarRoom import CalendarRoom
from roomrates.domain.RoomCatalog import RoomCatalog
from roomrates.events.Event_Bus import EventBus
from roomrates.events.web_observers import EventLog
from roomrates.infra.Room_Repository import load_room_templates
from roomrates.logic.calendar.month_grid import next_month, prev_month
from roomrates.logic.session import CalendarSession
from roomrates.utilities.formatting import format_currency, format_price
from roomrates.utilities.validators import InventoryCellInput, PriceCellInput, parse_cell_value

# Logging
logger = logging.getLogger("roomrates_app")

router = APIRouter(prefix="/api", tags=["calendar"])


# -------------------- Helpers --------------------
def room_payload(room_idx: int, room: CalendarRoom) -> dict:
    """Serialize an effective room, adding display strings for prices."""
    data = room.to_dict()
    data["index"] = room_idx
    for plan_idx, plan in enumerate(data["rate_plans"]):
        plan["index"] = plan_idx
        plan["prices_display"] = [format_price(p) for p in plan["prices"]]
        plan["base_rate_display"] = format_currency(plan["details"]["base_rate"])
    return data


def calendar_payload(session: CalendarSession) -> dict:
    week_start = session.week_start
    return {
        "week_start": week_start,
        "week_end": week_start + timedelta(days=6),
        "today": session.today,
        "days": session.days(),
        "rooms": [room_payload(idx, room) for idx, room in enumerate(session.rooms())],
    }


def edit_result(raw, committed: Optional[int], display: Callable[[int], str]) -> dict:
    # Rejected input still answers 200 with the value the cell falls back to
    return {
        "accepted": committed is not None and parse_cell_value(raw) is not None,
        "value": committed,
        "display": display(committed) if committed is not None else None,
    }


def month_link(year: int, month: int) -> Optional[dict]:
    if not MINYEAR <= year <= MAXYEAR:
        return None
    return {"year": year, "month": month}


# -------------------- Week navigation --------------------
@router.get("/calendar")
async def get_calendar(session: CalendarSession = Depends(get_session)):
    return calendar_payload(session)


@router.post("/calendar/prev")
async def prev_week(session: CalendarSession = Depends(get_session)):
    session.go_to_prev_week()
    return calendar_payload(session)


@router.post("/calendar/next")
async def next_week(session: CalendarSession = Depends(get_session)):
    session.go_to_next_week()
    return calendar_payload(session)


@router.post("/calendar/today")
async def this_week(session: CalendarSession = Depends(get_session)):
    session.go_to_today()
    return calendar_payload(session)


@router.post("/calendar/select")
async def select_date(date: _date = Query(...), session: CalendarSession = Depends(get_session)):
    session.select_date(date)
    return calendar_payload(session)


# -------------------- Cell edits --------------------
@router.put("/calendar/inventory")
async def update_inventory(payload: InventoryCellInput, session: CalendarSession = Depends(get_session)):
    committed = session.set_inventory_cell(payload.room_index, payload.day_index, payload.field, payload.value)
    return edit_result(payload.value, committed, str)


@router.put("/calendar/price")
async def update_price(payload: PriceCellInput, session: CalendarSession = Depends(get_session)):
    committed = session.set_price_cell(payload.room_index, payload.plan_index, payload.day_index, payload.value)
    return edit_result(payload.value, committed, format_price)


# -------------------- Date picker --------------------
@router.get("/date-picker")
async def date_picker(year: Optional[int] = Query(default=None, ge=1, le=9999),
                      month: Optional[int] = Query(default=None, ge=1, le=12),
                      session: CalendarSession = Depends(get_session)):
    """Month grid for the picker; defaults to the month of the selected week."""
    if year is None or month is None:
        year, month = session.week_start.year, session.week_start.month
    try:
        view = session.month_view(year, month)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    view["prev"] = month_link(*prev_month(year, month))
    view["next"] = month_link(*next_month(year, month))
    return view


@router.get("/events")
async def api_events(request: Request, since: Optional[int] = Query(default=None)):
    return request.app.state.event_log.get_events(since)


def create_app(session: Optional[CalendarSession] = None) -> FastAPI:
    """Build the API around one calendar session.

    Without an explicit session the seed room catalog is loaded from disk.
    """
    if session is None:
        session = CalendarSession(RoomCatalog(load_room_templates(), event_bus=EventBus()))
    application = FastAPI(title="Room Inventory & Rate Calendar API")
    application.state.session = session
    application.state.event_log = EventLog().start(session.catalog.event_bus)
    application.include_router(rooms.router)
    application.include_router(router)
    logger.info("Calendar API ready with %d room types", len(session.catalog))
    return application


app = create_app()
