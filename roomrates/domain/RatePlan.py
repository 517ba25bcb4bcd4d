"""Rate plan entities: business terms (RatePlanDetails) and the catalog template (PlanTemplate)."""
from typing import Optional
from roomrates.utilities.constants import DEFAULT_CANCELLATION_POLICY


class RatePlanDetails:
    def __init__(self, name: str = "", meal_plan_type: str = "",
                 cancellation_policy: str = DEFAULT_CANCELLATION_POLICY, inclusions: str = "",
                 base_rate: int = 0, extra_child_rate: int = 0, extra_child_meal_rate: int = 0,
                 extra_adult_meal_rate: int = 0, min_length_of_stay: int = 1, active: bool = True):
        self.name = name
        self.meal_plan_type = meal_plan_type
        self.cancellation_policy = cancellation_policy
        self.inclusions = inclusions
        self.base_rate = base_rate
        self.extra_child_rate = extra_child_rate
        self.extra_child_meal_rate = extra_child_meal_rate
        self.extra_adult_meal_rate = extra_adult_meal_rate
        self.min_length_of_stay = min_length_of_stay
        self.active = active

    def __eq__(self, other) -> bool:
        if not isinstance(other, RatePlanDetails):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        state = "active" if self.active else "deactivated"
        return f"{self.name} ({self.meal_plan_type}) - base {self.base_rate} - {state}"

    __repr__ = __str__

    def copy(self) -> "RatePlanDetails":
        return RatePlanDetails.from_dict(self.to_dict())

    @staticmethod
    def from_dict(data):
        '''Creates a RatePlanDetails from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"name", "meal_plan_type", "cancellation_policy", "inclusions", "base_rate",
                   "extra_child_rate", "extra_child_meal_rate", "extra_adult_meal_rate",
                   "min_length_of_stay", "active"}
        return RatePlanDetails(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self):
        return {
            "name": self.name,
            "meal_plan_type": self.meal_plan_type,
            "cancellation_policy": self.cancellation_policy,
            "inclusions": self.inclusions,
            "base_rate": self.base_rate,
            "extra_child_rate": self.extra_child_rate,
            "extra_child_meal_rate": self.extra_child_meal_rate,
            "extra_adult_meal_rate": self.extra_adult_meal_rate,
            "min_length_of_stay": self.min_length_of_stay,
            "active": self.active,
        }


class PlanTemplate:
    """A rate plan as stored in the catalog.

    name, meal_type and base_price mirror details.name, details.meal_plan_type
    and details.base_rate; writers go through from_details() or the catalog.
    """

    def __init__(self, name: str = "", meal_type: str = "", base_price: int = 0,
                 details: Optional[RatePlanDetails] = None):
        self.name = name
        self.meal_type = meal_type
        self.base_price = base_price
        self.details = details if details is not None else RatePlanDetails(
            name=name, meal_plan_type=meal_type, base_rate=base_price)

    @staticmethod
    def from_details(details: RatePlanDetails) -> "PlanTemplate":
        return PlanTemplate(details.name, details.meal_plan_type, details.base_rate, details.copy())

    def __str__(self) -> str:
        return f"{self.name} - {self.meal_type} - {self.base_price}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        # details win over the flat keys so name, meal type and base price stay in sync
        d = dict(data)
        details = RatePlanDetails.from_dict(d.get("details") or {
            "name": d.get("name", ""),
            "meal_plan_type": d.get("meal_type", ""),
            "base_rate": d.get("base_price", 0),
        })
        return PlanTemplate(details.name, details.meal_plan_type, details.base_rate, details)

    def to_dict(self):
        return {
            "name": self.name,
            "meal_type": self.meal_type,
            "base_price": self.base_price,
            "details": self.details.to_dict(),
        }
