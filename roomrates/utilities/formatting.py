"""Display helpers: Indian-grouped currency and calendar labels."""
from datetime import date
from typing import Optional

from roomrates.utilities.config import CURRENCY_SYMBOL
from roomrates.utilities.constants import MONTH_NAMES, MONTH_SHORT


def group_indian(digits: str) -> str:
    """Group a string of digits the Indian way: last three, then pairs.

    '12345678' -> '1,23,45,678'
    """
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_price(value: int, symbol: Optional[str] = None) -> str:
    """Whole-unit price as shown in the calendar grid, e.g. '₹6,186'."""
    symbol = CURRENCY_SYMBOL if symbol is None else symbol
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{group_indian(str(abs(int(value))))}"


def format_currency(value: float, symbol: Optional[str] = None) -> str:
    """Two-decimal amount used for rate plan details, e.g. '₹4,999.00'."""
    symbol = CURRENCY_SYMBOL if symbol is None else symbol
    sign = "-" if value < 0 else ""
    whole, frac = f"{abs(value):.2f}".split(".")
    return f"{sign}{symbol}{group_indian(whole)}.{frac}"


def format_day_header(d: date) -> str:
    return f"{d.day} {MONTH_SHORT[d.month - 1]}"


def month_title(year: int, month: int) -> str:
    return f"{MONTH_NAMES[month - 1]} {year}"
