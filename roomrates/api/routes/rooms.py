"""Room catalog routes: room types and their rate plans.

Stale indices never produce an error: the catalog ignores them and the
unchanged room list is returned.
"""
from fastapi import APIRouter, Body, Depends

from roomrates.api.deps import get_session
from roomrates.domain.RatePlan import PlanTemplate, RatePlanDetails
from roomrates.domain.RoomTemplate import RoomTemplate
from roomrates.logic.session import CalendarSession
from roomrates.utilities.validators import RatePlanDetailsInput, RoomInput, RoomUpdateInput

router = APIRouter(prefix="/api/rooms", tags=["rooms"])


def _rooms_payload(session: CalendarSession):
    rooms = session.catalog.to_dict()
    return {"count": len(rooms), "rooms": rooms}


@router.get("")
async def list_rooms(session: CalendarSession = Depends(get_session)):
    return _rooms_payload(session)


@router.post("")
async def add_room(payload: RoomInput, session: CalendarSession = Depends(get_session)):
    session.catalog.add_room(RoomTemplate(payload.name, [], payload.room_count, payload.max_guests))
    return _rooms_payload(session)


@router.patch("/{room_idx}")
async def update_room(room_idx: int, payload: RoomUpdateInput, session: CalendarSession = Depends(get_session)):
    session.catalog.update_room(room_idx, **payload.model_dump(exclude_none=True))
    return _rooms_payload(session)


@router.delete("/{room_idx}")
async def delete_room(room_idx: int, session: CalendarSession = Depends(get_session)):
    session.catalog.delete_room(room_idx)
    return _rooms_payload(session)


@router.post("/{room_idx}/plans")
async def add_plan(room_idx: int, payload: RatePlanDetailsInput = Body(...),
                   session: CalendarSession = Depends(get_session)):
    details = RatePlanDetails.from_dict(payload.model_dump())
    session.catalog.add_plan(room_idx, PlanTemplate.from_details(details))
    return _rooms_payload(session)


@router.put("/{room_idx}/plans/{plan_idx}")
async def update_plan(room_idx: int, plan_idx: int, payload: RatePlanDetailsInput,
                      session: CalendarSession = Depends(get_session)):
    session.catalog.update_plan_details(room_idx, plan_idx, RatePlanDetails.from_dict(payload.model_dump()))
    return _rooms_payload(session)


@router.post("/{room_idx}/plans/{plan_idx}/toggle")
async def toggle_plan(room_idx: int, plan_idx: int, session: CalendarSession = Depends(get_session)):
    session.catalog.toggle_plan_active(room_idx, plan_idx)
    return _rooms_payload(session)


@router.delete("/{room_idx}/plans/{plan_idx}")
async def delete_plan(room_idx: int, plan_idx: int, session: CalendarSession = Depends(get_session)):
    session.catalog.delete_plan(room_idx, plan_idx)
    return _rooms_payload(session)
