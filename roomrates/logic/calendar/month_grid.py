"""Month grid for the date picker: Monday-first rows of 7 dates, 4 to 6 rows."""
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from roomrates.logic.calendar.week import LAST_WEEK_START, is_in_week, monday_of, shift_week, week_dates
from roomrates.utilities.constants import MAX_GRID_ROWS, MIN_GRID_ROWS


def build_month_grid(year: int, month: int) -> List[List[date]]:
    """Rows of dates covering ``month`` (1-12) of ``year``.

    Rows start on the Monday on or before the 1st. Generation stops once at
    least 4 rows exist and the next date falls outside the month, capped at 6.
    Raises ValueError when the grid would run past date.max.
    """
    cursor = monday_of(date(year, month, 1))
    rows: List[List[date]] = []
    for row_idx in range(MAX_GRID_ROWS):
        if cursor > LAST_WEEK_START:
            raise ValueError(f"Month grid for {year}-{month:02d} runs past {date.max}")
        row = week_dates(cursor)
        rows.append(row)
        if row_idx >= MIN_GRID_ROWS - 1 and (row[-1] + timedelta(days=1)).month != month:
            break
        cursor = shift_week(cursor, 1)
    return rows


def prev_month(year: int, month: int) -> Tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> Tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1


def month_cells(year: int, month: int, today: date,
                selected_week_start: Optional[date] = None) -> List[Dict]:
    """Flatten the grid into tagged cells for rendering."""
    cells = []
    for row in build_month_grid(year, month):
        for d in row:
            cells.append({
                "date": d,
                "day": d.day,
                "in_month": d.month == month,
                "is_today": d == today,
                "in_selected_week": selected_week_start is not None and is_in_week(d, selected_week_start),
            })
    return cells
