"""
Event Use Case DTOs (Data Transfer Objects)

Command, query and response classes for the event domain.
"""

from datetime import date, datetime
from typing import Annotated, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from acetrack.app.use_cases.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, Pagination
from acetrack.domain.entities import EventStatus

TimeOfDay = Annotated[str, StringConstraints(pattern=r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")]


# ============================================================================
# Command DTOs
# ============================================================================


class CreateEventCommand(BaseModel):
    """Input for creating an event"""

    organization_id: UUID
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    event_date: date
    banner: str = Field(min_length=1, max_length=255)
    start_time: TimeOfDay
    end_time: TimeOfDay
    check_in_start_time: Optional[TimeOfDay] = None
    check_in_end_time: Optional[TimeOfDay] = None
    check_out_start_time: Optional[TimeOfDay] = None
    check_out_end_time: Optional[TimeOfDay] = None
    location: Optional[str] = Field(default=None, max_length=255)
    is_mandatory: bool = False


class UpdateEventCommand(BaseModel):
    """Partial update of an event; unset fields are left untouched"""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    event_date: Optional[date] = None
    banner: Optional[str] = Field(default=None, max_length=255)
    start_time: Optional[TimeOfDay] = None
    end_time: Optional[TimeOfDay] = None
    check_in_start_time: Optional[TimeOfDay] = None
    check_in_end_time: Optional[TimeOfDay] = None
    check_out_start_time: Optional[TimeOfDay] = None
    check_out_end_time: Optional[TimeOfDay] = None
    location: Optional[str] = Field(default=None, max_length=255)
    is_mandatory: Optional[bool] = None


class ListEventsQuery(BaseModel):
    """Filters accepted by the event list"""

    organization_id: Optional[UUID] = None
    status: Optional[EventStatus] = None
    is_mandatory: Optional[bool] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    search: Optional[str] = None
    include_deleted: bool = False
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=100)


# ============================================================================
# Response DTOs
# ============================================================================


class EventResponse(BaseModel):
    """Event as returned to callers"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    organization_id: UUID
    title: str
    description: Optional[str]
    event_date: date
    banner: str
    start_time: str
    end_time: str
    check_in_start_time: Optional[str]
    check_in_end_time: Optional[str]
    check_out_start_time: Optional[str]
    check_out_end_time: Optional[str]
    location: Optional[str]
    status: EventStatus
    is_mandatory: bool
    created_by: UUID
    deleted_at: Optional[datetime]
    created_at: datetime
    updated_at: Optional[datetime]


class EventListResponse(BaseModel):
    """Page of events"""

    events: List[EventResponse]
    pagination: Pagination


class EventStatusChangeResponse(BaseModel):
    """Result of a status transition"""

    event: EventResponse
    previous_status: EventStatus


class DeleteEventResponse(BaseModel):
    """Result of deleting an event"""

    status: str  # "deleted" (soft) or "purged" (permanent)
    event_id: UUID


class EventStatsResponse(BaseModel):
    """Event counters within the caller's visible scope"""

    total: int = 0
    draft: int = 0
    published: int = 0
    ongoing: int = 0
    completed: int = 0
    cancelled: int = 0
    mandatory: int = 0
    optional: int = 0
    upcoming: int = 0
    past: int = 0
