# client/calendar_view.py
"""
Calendar presenter.

Decides how each day of a month is shown: booked days beat past days, and
only days that are neither are open for booking.
"""
import calendar
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional


class DayState(str, Enum):
    BOOKED = "booked"
    PAST = "past"
    AVAILABLE = "available"


@dataclass(frozen=True)
class CalendarDay:
    day: date
    state: DayState
    occupant: Optional[str] = None

    @property
    def key(self) -> str:
        return self.day.isoformat()

    @property
    def clickable(self) -> bool:
        return self.state is DayState.AVAILABLE

    @property
    def title(self) -> str:
        if self.state is DayState.BOOKED:
            return f"Booked by {self.occupant}"
        if self.state is DayState.PAST:
            return "Past Date"
        return "Available"


@dataclass
class CalendarMonth:
    year: int
    month: int
    leading_blanks: int
    days: List[CalendarDay] = field(default_factory=list)

    @property
    def title(self) -> str:
        return f"{calendar.month_name[self.month]} {self.year}"


def day_state(day: date, snapshot: Dict[str, str], today: date) -> CalendarDay:
    occupant = snapshot.get(day.isoformat())
    if occupant is not None:
        return CalendarDay(day, DayState.BOOKED, occupant)
    if day < today:
        return CalendarDay(day, DayState.PAST)
    return CalendarDay(day, DayState.AVAILABLE)


def build_month(year: int, month: int, snapshot: Dict[str, str], today: date) -> CalendarMonth:
    """Lay out one month on a Sunday-first grid."""
    first_weekday, days_in_month = calendar.monthrange(year, month)
    leading = (first_weekday + 1) % 7
    days = [day_state(date(year, month, d), snapshot, today) for d in range(1, days_in_month + 1)]
    return CalendarMonth(year=year, month=month, leading_blanks=leading, days=days)


def render_text(view: CalendarMonth) -> str:
    """Plain-text grid: ``xx`` booked, ``..`` past, day number when open."""
    lines = [view.title.center(27), " ".join(f"{d:>3}" for d in ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"))]
    cells = ["   "] * view.leading_blanks
    for d in view.days:
        if d.state is DayState.BOOKED:
            cells.append(" xx")
        elif d.state is DayState.PAST:
            cells.append(" ..")
        else:
            cells.append(f"{d.day.day:3d}")
    for i in range(0, len(cells), 7):
        lines.append(" ".join(cells[i:i + 7]))
    return "\n".join(lines)
