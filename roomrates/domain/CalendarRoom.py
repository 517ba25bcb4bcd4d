"""Week-materialized view of a room: 7 inventory cells plus 7 prices per rate plan.

Index 0 is Monday, index 6 is Sunday.
"""
from typing import List, Optional
from roomrates.domain.RatePlan import RatePlanDetails


class RoomInventory:
    def __init__(self, available: int = 0, sold: int = 0):
        # sold is not clamped to available
        self.available = available
        self.sold = sold

    def __eq__(self, other) -> bool:
        if not isinstance(other, RoomInventory):
            return NotImplemented
        return (self.available, self.sold) == (other.available, other.sold)

    def __str__(self) -> str:
        return f"{self.available} available / {self.sold} sold"

    __repr__ = __str__

    def to_dict(self):
        return {"available": self.available, "sold": self.sold}


class CalendarRatePlan:
    def __init__(self, name: str, prices: List[int], details: RatePlanDetails):
        self.name = name
        self.prices = prices[:]
        self.details = details

    def __eq__(self, other) -> bool:
        if not isinstance(other, CalendarRatePlan):
            return NotImplemented
        return (self.name, self.prices, self.details) == (other.name, other.prices, other.details)

    def __str__(self) -> str:
        return f"{self.name}: {self.prices}"

    __repr__ = __str__

    def to_dict(self):
        return {"name": self.name, "prices": self.prices[:], "details": self.details.to_dict()}


class CalendarRoom:
    def __init__(self, name: str, inventory: List[RoomInventory],
                 rate_plans: Optional[List[CalendarRatePlan]] = None):
        self.name = name
        self.inventory = inventory[:]
        self.rate_plans = rate_plans[:] if rate_plans else []

    def __eq__(self, other) -> bool:
        if not isinstance(other, CalendarRoom):
            return NotImplemented
        return (self.name, self.inventory, self.rate_plans) == (other.name, other.inventory, other.rate_plans)

    def __str__(self) -> str:
        return f"{self.name} - {len(self.rate_plans)} rate plans"

    __repr__ = __str__

    def copy(self) -> "CalendarRoom":
        '''Deep copy: cells and price lists are fresh objects, details are copied too.'''
        return CalendarRoom(
            self.name,
            [RoomInventory(inv.available, inv.sold) for inv in self.inventory],
            [CalendarRatePlan(p.name, p.prices, p.details.copy()) for p in self.rate_plans],
        )

    def to_dict(self):
        return {
            "name": self.name,
            "inventory": [inv.to_dict() for inv in self.inventory],
            "rate_plans": [p.to_dict() for p in self.rate_plans],
        }
