"""
Input validation schemas using Pydantic, plus the cell value parser shared by
every editable grid cell.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Literal, Optional, Union

from roomrates.utilities.constants import DEFAULT_CANCELLATION_POLICY, DEFAULT_ROOM_NAME


def parse_cell_value(raw) -> Optional[int]:
    """Return raw as a non-negative int, or None when it is not one.

    Accepts ints and base-10 integer text with surrounding whitespace.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw >= 0 else None
    if isinstance(raw, str):
        text = raw.strip()
        if not text.isdigit() or not text.isascii():
            return None
        try:
            return int(text)
        except ValueError:
            # longer than the interpreter's int string conversion limit
            return None
    return None


class RatePlanDetailsInput(BaseModel):
    """Business terms of a rate plan, as edited in the plan drawer."""
    name: str = Field("", max_length=100)
    meal_plan_type: str = Field("", max_length=100)
    cancellation_policy: str = DEFAULT_CANCELLATION_POLICY
    inclusions: str = ""
    base_rate: int = Field(0, ge=0)
    extra_child_rate: int = Field(0, ge=0)
    extra_child_meal_rate: int = Field(0, ge=0)
    extra_adult_meal_rate: int = Field(0, ge=0)
    min_length_of_stay: int = Field(1, ge=0)
    active: bool = True

    @field_validator('name', 'meal_plan_type', 'cancellation_policy', 'inclusions')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class RoomInput(BaseModel):
    """Schema for a new room type."""
    name: str = Field(DEFAULT_ROOM_NAME, max_length=100)
    room_count: int = Field(1, ge=0)
    max_guests: int = Field(2, ge=0)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return v.strip() or DEFAULT_ROOM_NAME


class RoomUpdateInput(BaseModel):
    """Partial room update; unset fields are left alone."""
    name: Optional[str] = Field(None, max_length=100)
    room_count: Optional[int] = Field(None, ge=0)
    max_guests: Optional[int] = Field(None, ge=0)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if v is None:
            return v
        return v.strip() or DEFAULT_ROOM_NAME


class InventoryCellInput(BaseModel):
    room_index: int
    day_index: int
    field: Literal["available", "sold"]
    value: Union[int, str]


class PriceCellInput(BaseModel):
    room_index: int
    plan_index: int
    day_index: int
    value: Union[int, str]
