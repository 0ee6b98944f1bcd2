"""
Event Use Cases

Event scheduling, lifecycle and listing.
"""

from .create_event_use_case import CreateEventUseCase
from .delete_event_use_case import DeleteEventUseCase
from .dtos import (
    CreateEventCommand,
    DeleteEventResponse,
    EventListResponse,
    EventResponse,
    EventStatsResponse,
    EventStatusChangeResponse,
    ListEventsQuery,
    UpdateEventCommand,
)
from .get_event_stats_use_case import GetEventStatsUseCase
from .get_event_use_case import GetEventUseCase
from .get_upcoming_events_use_case import GetUpcomingEventsUseCase
from .list_events_use_case import ListEventsUseCase
from .restore_event_use_case import RestoreEventUseCase
from .update_event_status_use_case import UpdateEventStatusUseCase
from .update_event_use_case import UpdateEventUseCase

__all__ = [
    "CreateEventUseCase",
    "ListEventsUseCase",
    "GetEventUseCase",
    "UpdateEventUseCase",
    "UpdateEventStatusUseCase",
    "DeleteEventUseCase",
    "RestoreEventUseCase",
    "GetUpcomingEventsUseCase",
    "GetEventStatsUseCase",
    "CreateEventCommand",
    "UpdateEventCommand",
    "ListEventsQuery",
    "EventResponse",
    "EventListResponse",
    "EventStatusChangeResponse",
    "DeleteEventResponse",
    "EventStatsResponse",
]
