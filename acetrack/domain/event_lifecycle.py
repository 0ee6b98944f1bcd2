"""
Event Lifecycle

Status state machine and schedule validation for events.

    draft -> published | cancelled
    published -> ongoing | cancelled
    ongoing -> completed | cancelled
    completed -> (terminal)
    cancelled -> draft
"""

import re
from dataclasses import dataclass, fields, replace
from datetime import date
from typing import Dict, FrozenSet, Mapping, Optional

from acetrack.libs.result import Error, Result, Return
from acetrack.domain.access_control import Action, Actor, authorize
from acetrack.domain.entities import Event, EventStatus

ALLOWED_TRANSITIONS: Dict[EventStatus, FrozenSet[EventStatus]] = {
    EventStatus.draft: frozenset({EventStatus.published, EventStatus.cancelled}),
    EventStatus.published: frozenset({EventStatus.ongoing, EventStatus.cancelled}),
    EventStatus.ongoing: frozenset({EventStatus.completed, EventStatus.cancelled}),
    EventStatus.completed: frozenset(),
    EventStatus.cancelled: frozenset({EventStatus.draft}),
}

# Date/time of events in these states is frozen for everyone but admins
LOCKED_STATUSES = frozenset({EventStatus.ongoing, EventStatus.completed})

TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")


@dataclass(frozen=True)
class Schedule:
    """The date/time fields of an event, as validated together"""

    start_time: str
    end_time: str
    event_date: Optional[date] = None
    check_in_start_time: Optional[str] = None
    check_in_end_time: Optional[str] = None
    check_out_start_time: Optional[str] = None
    check_out_end_time: Optional[str] = None

    @classmethod
    def of(cls, event: Event) -> "Schedule":
        return cls(
            start_time=event.start_time,
            end_time=event.end_time,
            event_date=event.event_date,
            check_in_start_time=event.check_in_start_time,
            check_in_end_time=event.check_in_end_time,
            check_out_start_time=event.check_out_start_time,
            check_out_end_time=event.check_out_end_time,
        )


SCHEDULE_FIELDS = frozenset(f.name for f in fields(Schedule))
TIME_FIELDS = tuple(f.name for f in fields(Schedule) if f.name != "event_date")


def to_minutes(value: str) -> int:
    """'09:30' -> 570"""
    if not TIME_PATTERN.match(value):
        raise ValueError(f"Invalid time format (HH:mm): {value}")
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def can_transition(current: EventStatus, requested: EventStatus) -> bool:
    return requested in ALLOWED_TRANSITIONS[EventStatus(current)]


def _invalid(field: str, message: str) -> Result[Schedule]:
    return Return.err(Error("VALIDATION_ERROR", message, reason=field))


def validate_schedule(schedule: Schedule, today: Optional[date] = None) -> Result[Schedule]:
    """
    Check every time relationship of a schedule; report the first failure.

    The date rule only runs when event_date is set, so updates that do
    not touch the date skip it.
    """
    for name in TIME_FIELDS:
        value = getattr(schedule, name)
        if value is not None and not TIME_PATTERN.match(value):
            return _invalid(name, f"Invalid time format (HH:mm) for {name}")

    start = to_minutes(schedule.start_time)
    end = to_minutes(schedule.end_time)
    check_in_start = _optional_minutes(schedule.check_in_start_time)
    check_in_end = _optional_minutes(schedule.check_in_end_time)
    check_out_start = _optional_minutes(schedule.check_out_start_time)
    check_out_end = _optional_minutes(schedule.check_out_end_time)

    if end <= start:
        return _invalid("end_time", "End time must be after start time")

    if check_in_start is not None and check_in_end is not None and check_in_end <= check_in_start:
        return _invalid(
            "check_in_end_time", "Check-in end time must be after check-in start time"
        )
    if check_in_start is not None and check_in_start > start:
        return _invalid(
            "check_in_start_time",
            "Check-in start time must be before or at event start time",
        )
    if check_in_end is not None and check_in_end < end:
        return _invalid(
            "check_in_end_time", "Check-in end time must be at or after event end time"
        )

    if (
        check_out_start is not None
        and check_out_end is not None
        and check_out_end <= check_out_start
    ):
        return _invalid(
            "check_out_end_time", "Check-out end time must be after check-out start time"
        )
    if check_out_start is not None and check_out_start < start:
        return _invalid(
            "check_out_start_time",
            "Check-out start time must be at or after event start time",
        )
    if check_out_end is not None and check_out_end < end:
        return _invalid(
            "check_out_end_time", "Check-out end time must be at or after event end time"
        )

    if schedule.event_date is not None:
        if schedule.event_date < (today or date.today()):
            return _invalid("event_date", "Event date cannot be in the past")

    return Return.ok(schedule)


def _optional_minutes(value: Optional[str]) -> Optional[int]:
    return None if value is None else to_minutes(value)


def validate_schedule_update(
    event: Event,
    changes: Mapping[str, object],
    actor: Actor,
    today: Optional[date] = None,
) -> Result[Schedule]:
    """
    Validate the schedule an update would produce.

    Editing the date/time of an ongoing or completed event is refused
    for non-admins before any field rule runs.
    """
    touched = SCHEDULE_FIELDS & {k for k, v in changes.items() if v is not None}
    if not touched:
        return Return.ok(Schedule.of(event))

    if EventStatus(event.status) in LOCKED_STATUSES and not actor.is_admin:
        return Return.err(
            Error(
                "PERMISSION_DENIED",
                "Cannot modify date/time of ongoing or completed events",
            )
        )

    # Stored date is only re-checked when the update supplies one
    overrides = {"event_date": None, **{name: changes[name] for name in touched}}
    merged = replace(Schedule.of(event), **overrides)
    return validate_schedule(merged, today=today)


def check_deletable(event: Event, actor: Actor) -> Optional[Error]:
    """Ongoing and completed events can only be deleted by admins"""
    if EventStatus(event.status) in LOCKED_STATUSES and not actor.is_admin:
        return Error("PERMISSION_DENIED", "Cannot delete ongoing or completed events")
    return None


def transition(event: Event, requested: EventStatus, actor: Actor) -> Result[Event]:
    """
    Move `event` to `requested` if the actor may and the table allows it.

    Mutates event.status in place; persisting is the caller's job.
    """
    if event.is_deleted:
        return Return.err(Error("EVENT_NOT_FOUND", "Event not found"))

    decision = authorize(actor, Action.change_event_status, event)
    if not decision.allowed:
        return Return.err(decision.as_error())

    try:
        requested = EventStatus(requested)
    except ValueError:
        return Return.err(
            Error("VALIDATION_ERROR", f"Unknown event status: {requested}", reason="status")
        )

    current = EventStatus(event.status)
    if not can_transition(current, requested):
        return Return.err(
            Error(
                "INVALID_TRANSITION",
                f"Cannot change status from {current.value} to {requested.value}",
            )
        )

    event.status = requested
    return Return.ok(event)
