"""
Member Use Case DTOs (Data Transfer Objects)

Command, query and response classes for organization membership.
"""

from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from acetrack.app.use_cases.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, Pagination
from acetrack.domain.entities import MemberRole, MemberStatus


# ============================================================================
# Command DTOs
# ============================================================================


class AddMemberCommand(BaseModel):
    """Direct add of a user to an organization by an administrator"""

    organization_id: UUID
    user_id: UUID
    role: MemberRole = MemberRole.member
    notes: Optional[str] = Field(default=None, max_length=1000)


class JoinRequestCommand(BaseModel):
    """Self-service request to join an organization"""

    organization_id: UUID
    message: Optional[str] = Field(default=None, max_length=1000)


class MemberDecisionCommand(BaseModel):
    """Administrator's answer to a pending join request"""

    action: Literal["approve", "reject"]
    role: Optional[MemberRole] = None
    notes: Optional[str] = Field(default=None, max_length=1000)


class UpdateMemberCommand(BaseModel):
    """Partial update of a member record"""

    role: Optional[MemberRole] = None
    status: Optional[MemberStatus] = None
    notes: Optional[str] = Field(default=None, max_length=1000)


class ListMembersQuery(BaseModel):
    """Filters accepted by the member list"""

    organization_id: Optional[UUID] = None
    role: Optional[MemberRole] = None
    status: Optional[MemberStatus] = None
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=100)


# ============================================================================
# Response DTOs
# ============================================================================


class MemberResponse(BaseModel):
    """Member record as returned to callers"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    organization_id: UUID
    user_id: UUID
    role: MemberRole
    status: MemberStatus
    notes: Optional[str]
    join_date: datetime
    updated_at: Optional[datetime]


class MemberListResponse(BaseModel):
    """Page of member records"""

    members: List[MemberResponse]
    pagination: Pagination


class MemberDecisionResponse(BaseModel):
    """Outcome of a join request decision"""

    status: str  # "approved" or "rejected"
    member: Optional[MemberResponse] = None


class RemoveMemberResponse(BaseModel):
    """Response for remove member use case"""

    status: str
