"""
Check-in/check-out window evaluation against an event's schedule.

Windows only bind on the event's own date; times are compared as
minutes since midnight like the schedule rules.
"""

from datetime import datetime
from typing import Optional

from acetrack.domain.entities import Event
from acetrack.domain.event_lifecycle import to_minutes


def _minutes(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute


def _outside(moment: datetime, start: Optional[str], end: Optional[str]) -> bool:
    minutes = _minutes(moment)
    if start is not None and minutes < to_minutes(start):
        return True
    if end is not None and minutes > to_minutes(end):
        return True
    return False


def check_in_closed(event: Event, moment: datetime) -> bool:
    if moment.date() != event.event_date:
        return False
    return _outside(moment, event.check_in_start_time, event.check_in_end_time)


def check_out_closed(event: Event, moment: datetime) -> bool:
    if moment.date() != event.event_date:
        return False
    return _outside(moment, event.check_out_start_time, event.check_out_end_time)


def is_late(event: Event, moment: datetime) -> bool:
    """Arrival after the event started, on the event day"""
    return moment.date() == event.event_date and _minutes(moment) > to_minutes(event.start_time)
