"""Deterministic placeholder inventory and prices.

There is no inventory backend, so the calendar shows numbers derived from a
seed built out of the date and the room/plan index. Same inputs, same
numbers: re-rendering or navigating back to a week shows identical values.
"""
import math
from datetime import date, timedelta
from typing import List

from roomrates.domain.CalendarRoom import CalendarRatePlan, CalendarRoom, RoomInventory
from roomrates.domain.RoomTemplate import RoomTemplate
from roomrates.logic.calendar.week import is_weekend
from roomrates.utilities.constants import (
    AVAILABLE_SPAN, DAYS_IN_WEEK, INVENTORY_ROOM_STRIDE, PRICE_PLAN_STRIDE, PRICE_ROOM_STRIDE,
    PRICE_VARIANCE_SHIFT, PRICE_VARIANCE_SPAN, SOLD_SPAN, WEEKEND_BONUS,
)


def seeded_rand(seed: int) -> float:
    """frac(sin(seed) * 10000), in [0, 1)."""
    x = math.sin(seed) * 10000
    return x - math.floor(x)


def date_seed(d: date) -> int:
    # 2024-03-11 -> 20240311
    return d.year * 10000 + d.month * 100 + d.day


def synthesize_inventory(week_start: date, room_index: int) -> List[RoomInventory]:
    result = []
    for offset in range(DAYS_IN_WEEK):
        seed = date_seed(week_start + timedelta(days=offset)) + room_index * INVENTORY_ROOM_STRIDE
        result.append(RoomInventory(
            available=math.floor(seeded_rand(seed) * AVAILABLE_SPAN),
            sold=math.floor(seeded_rand(seed + 1) * SOLD_SPAN),
        ))
    return result


def synthesize_prices(week_start: date, room_index: int, plan_index: int, base_price: int) -> List[int]:
    result = []
    for offset in range(DAYS_IN_WEEK):
        day = week_start + timedelta(days=offset)
        seed = date_seed(day) + room_index * PRICE_ROOM_STRIDE + plan_index * PRICE_PLAN_STRIDE
        variance = math.floor(seeded_rand(seed) * PRICE_VARIANCE_SPAN) - PRICE_VARIANCE_SHIFT
        result.append(base_price + variance + (WEEKEND_BONUS if is_weekend(day) else 0))
    return result


def synthesize_room(week_start: date, room_index: int, template: RoomTemplate) -> CalendarRoom:
    """Baseline CalendarRoom for one room type in one week."""
    return CalendarRoom(
        name=template.name,
        inventory=synthesize_inventory(week_start, room_index),
        rate_plans=[
            CalendarRatePlan(plan.name,
                             synthesize_prices(week_start, room_index, plan_idx, plan.base_price),
                             plan.details.copy())
            for plan_idx, plan in enumerate(template.plans)
        ],
    )
