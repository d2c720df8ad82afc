"""
Logistics Domain - Calendar Bucketing.

Groups delivery/pickup events into day buckets for the upcoming
calendar days or the upcoming working days (Mon-Fri).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable, Generic, Iterable, List, TypeVar

T = TypeVar('T')

# Monday=0 ... Sunday=6
WEEKEND_DAYS = (5, 6)


@dataclass
class DayBucket(Generic[T]):
    """Events scheduled for one day."""

    day: date
    events: List[T] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.events


def is_working_day(day: date) -> bool:
    return day.weekday() not in WEEKEND_DAYS


def next_calendar_days(start: date, count: int) -> List[date]:
    """``count`` consecutive days beginning with ``start``."""
    return [start + timedelta(days=offset) for offset in range(max(count, 0))]


def next_working_days(start: date, count: int) -> List[date]:
    """
    First ``count`` working days on or after ``start``.

    ``start`` itself is included when it is a working day.
    """
    days: List[date] = []
    current = start
    while len(days) < count:
        if is_working_day(current):
            days.append(current)
        current += timedelta(days=1)
    return days


def format_day_label(day: date, today: date, long: bool = False) -> str:
    """
    Human label for a bucket header.

    "Today" for today, otherwise "Mon, 25 May" (short) or
    "Monday, May 25" (long).
    """
    if day == today:
        return "Today"
    if long:
        return f"{day:%A}, {day:%b} {day.day}"
    return f"{day:%a}, {day.day} {day:%b}"


def bucket_by_day(
    events: Iterable[T],
    days: List[date],
    get_day: Callable[[T], date],
    skip_empty: bool = True,
) -> List[DayBucket[T]]:
    """
    Distribute events over the given days.

    Events whose day is not in ``days`` are dropped. Order of events inside
    a bucket follows the order of the input iterable.
    """
    buckets = {day: DayBucket(day=day) for day in days}
    for event in events:
        bucket = buckets.get(get_day(event))
        if bucket is not None:
            bucket.events.append(event)

    result = [buckets[day] for day in days]
    if skip_empty:
        result = [bucket for bucket in result if not bucket.is_empty]
    return result
