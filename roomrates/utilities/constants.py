from typing import Final

DAYS_IN_WEEK: Final[int] = 7
DAY_NAMES: Final[list[str]] = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
PICKER_DAY_LABELS: Final[list[str]] = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]
MONTH_SHORT: Final[list[str]] = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                                 "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
MONTH_NAMES: Final[list[str]] = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# Month grid limits for the date picker
MAX_GRID_ROWS: Final[int] = 6
MIN_GRID_ROWS: Final[int] = 4

# Placeholder data generation
INVENTORY_ROOM_STRIDE: Final[int] = 7919
PRICE_ROOM_STRIDE: Final[int] = 3571
PRICE_PLAN_STRIDE: Final[int] = 1237
AVAILABLE_SPAN: Final[int] = 130     # available in 0..129
SOLD_SPAN: Final[int] = 100          # sold in 0..99
PRICE_VARIANCE_SPAN: Final[int] = 2000
PRICE_VARIANCE_SHIFT: Final[int] = 500   # variance in -500..1499
WEEKEND_BONUS: Final[int] = 1000

INVENTORY_FIELDS: Final[tuple[str, ...]] = ("available", "sold")

DEFAULT_CANCELLATION_POLICY: Final[str] = "Free cancellation up to 72 hours of check in"
DEFAULT_PLAN_NAME: Final[str] = "New Plan"
DEFAULT_ROOM_NAME: Final[str] = "New Room"
