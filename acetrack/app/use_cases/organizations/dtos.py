"""
Organization Use Case DTOs (Data Transfer Objects)

Command, query and response classes for the organization domain.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from acetrack.app.use_cases.members.dtos import MemberResponse
from acetrack.app.use_cases.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, Pagination
from acetrack.app.use_cases.subscriptions.dtos import SubscriptionResponse, as_naive_utc
from acetrack.domain.entities import OrganizationStatus, SubscriptionDuration


# ============================================================================
# Command DTOs
# ============================================================================


class SubscriptionTermInput(BaseModel):
    """Initial subscription opened together with a new organization"""

    duration: SubscriptionDuration
    payment_amount: float = Field(ge=0)
    payment_method: Optional[str] = Field(default=None, max_length=100)
    start_date: Optional[datetime] = None
    notes: Optional[str] = Field(default=None, max_length=1000)

    normalize_start = field_validator("start_date")(as_naive_utc)


class CreateOrganizationCommand(BaseModel):
    """Input for founding an organization"""

    name: str = Field(min_length=2, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    logo: Optional[str] = Field(default=None, max_length=255)
    banner: Optional[str] = Field(default=None, max_length=255)
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = Field(default=None, max_length=500)
    website: Optional[str] = Field(default=None, max_length=255)
    allow_public_join: bool = False
    require_approval: bool = True
    max_members: Optional[int] = Field(default=None, ge=1)
    subscription: SubscriptionTermInput


class UpdateOrganizationCommand(BaseModel):
    """Partial update; status changes are reserved to admins"""

    name: Optional[str] = Field(default=None, min_length=2, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    logo: Optional[str] = Field(default=None, max_length=255)
    banner: Optional[str] = Field(default=None, max_length=255)
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = Field(default=None, max_length=500)
    website: Optional[str] = Field(default=None, max_length=255)
    allow_public_join: Optional[bool] = None
    require_approval: Optional[bool] = None
    max_members: Optional[int] = Field(default=None, ge=1)
    status: Optional[OrganizationStatus] = None


class ListOrganizationsQuery(BaseModel):
    """Filters accepted by the organization list"""

    status: Optional[OrganizationStatus] = None
    search: Optional[str] = None
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=100)


# ============================================================================
# Response DTOs
# ============================================================================


class OrganizationResponse(BaseModel):
    """Organization as returned to callers"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: Optional[str]
    logo: Optional[str]
    banner: Optional[str]
    contact_email: Optional[str]
    contact_phone: Optional[str]
    address: Optional[str]
    website: Optional[str]
    admin_user_id: UUID
    status: OrganizationStatus
    allow_public_join: bool
    require_approval: bool
    max_members: Optional[int]
    created_at: datetime
    updated_at: Optional[datetime]
    member_count: Optional[int] = None


class OrganizationListResponse(BaseModel):
    """Page of organizations"""

    organizations: List[OrganizationResponse]
    pagination: Pagination


class CreateOrganizationResponse(BaseModel):
    """New organization together with its pending subscription"""

    organization: OrganizationResponse
    subscription: SubscriptionResponse


class DeleteOrganizationResponse(BaseModel):
    """Response for delete organization use case"""

    status: str
    members_deactivated: int


class MyOrganizationResponse(BaseModel):
    """An organization the caller belongs to, with their membership"""

    organization: OrganizationResponse
    membership: MemberResponse
