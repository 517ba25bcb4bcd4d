"""Room type entity: name, capacity and the ordered list of its rate plans."""
from typing import List, Optional
from roomrates.domain.RatePlan import PlanTemplate


class RoomTemplate:
    def __init__(self, name: str = "", plans: Optional[List[PlanTemplate]] = None,
                 room_count: int = 1, max_guests: int = 2):
        self.name = name
        self.plans = plans[:] if plans else []
        self.room_count = room_count
        self.max_guests = max_guests

    def __str__(self) -> str:
        return f"{self.name} - {self.room_count} rooms - up to {self.max_guests} guests - {len(self.plans)} plans"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return RoomTemplate(
            name=d.get("name", ""),
            plans=[PlanTemplate.from_dict(p) for p in d.get("plans", [])],
            room_count=d.get("room_count", 1),
            max_guests=d.get("max_guests", 2),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "room_count": self.room_count,
            "max_guests": self.max_guests,
            "plans": [p.to_dict() for p in self.plans],
        }
