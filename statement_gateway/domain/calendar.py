"""Calendar rules for transaction placement and interest posting"""

from datetime import date, timedelta
from typing import AbstractSet, List

INTEREST_CYCLE_DAYS = 90
SATURDAY = 5  # date.weekday()


def is_saturday(day: date) -> bool:
    """Saturday is the weekly bank holiday"""
    return day.weekday() == SATURDAY


def in_holiday_set(day: date, holidays: AbstractSet[str]) -> bool:
    """Check the caller-supplied calendar (ISO date strings)"""
    return day.isoformat() in holidays


def is_holiday(day: date, holidays: AbstractSet[str]) -> bool:
    return is_saturday(day) or in_holiday_set(day, holidays)


def interest_cycle_dates(start: date, end: date, cycle_days: int = INTEREST_CYCLE_DAYS) -> List[date]:
    """
    Interest posting dates: start + 90, start + 180, ... while <= end.

    Cycles are fixed windows counted from the statement start, not
    calendar quarters.
    """
    cycles = max((end - start).days, 0) // cycle_days
    return [start + timedelta(days=cycle_days * k) for k in range(1, cycles + 1)]
