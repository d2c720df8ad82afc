"""
Logistics timeline.

Day-bucketed views of upcoming deliveries and pickups.
"""

from domain.logistics.calendar import (
    bucket_by_day,
    format_day_label,
    next_calendar_days,
    next_working_days,
)
from infrastructure.persistence.models import Delivery


def _events_between(first_day, last_day, queryset=None):
    queryset = queryset if queryset is not None else Delivery.objects.all()
    return (
        queryset
        .filter(date__gte=first_day, date__lte=last_day)
        .select_related('project')
        .prefetch_related('projects_involved')
        .order_by('date', 'time', 'created_at')
    )


def _build_timeline(days, today, long_labels, queryset=None):
    if not days:
        return []
    events = _events_between(days[0], days[-1], queryset)
    buckets = bucket_by_day(events, days, get_day=lambda e: e.date)
    return [
        {
            'day': bucket.day,
            'label': format_day_label(bucket.day, today, long=long_labels),
            'is_today': bucket.day == today,
            'events': bucket.events,
        }
        for bucket in buckets
    ]


def upcoming_timeline(today, days=14, queryset=None):
    """Next ``days`` calendar days starting today; empty days are omitted."""
    return _build_timeline(next_calendar_days(today, days), today, False, queryset)


def working_days_timeline(today, days=6, queryset=None):
    """Next ``days`` working days (Mon-Fri) from today; empty days are omitted."""
    return _build_timeline(next_working_days(today, days), today, True, queryset)
