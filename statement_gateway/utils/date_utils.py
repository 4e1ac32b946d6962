"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import List


def generate_date_range(start: date, end: date) -> List[date]:
    """
    Every day from start to end, inclusive (empty when end < start).

    Offsets are computed up front so the walk never steps past end, which
    keeps ranges ending on date.max valid.
    """
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(days)]


def day_span(start: date, end: date) -> int:
    """Whole days between start and end (0 when equal)"""
    return max((end - start).days, 0)
