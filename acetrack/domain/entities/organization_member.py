"""
OrganizationMember Entity

Links User to Organization with a role.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import MemberRole, MemberStatus


class OrganizationMember(SQLModel, table=True):
    """
    OrganizationMember entity - links User to Organization with a role.

    Business Rules:
    - (organization_id, user_id) must be unique
    - Direct adds by an administrator are immediately active
    - Join requests are pending when the organization requires approval
    - Rejected join requests are deleted, not retained
    - The organization's designated admin can never be removed
    """

    __tablename__ = "organization_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    role: MemberRole = Field(default=MemberRole.member)
    status: MemberStatus = Field(default=MemberStatus.pending)
    notes: Optional[str] = Field(default=None, max_length=1000)

    join_date: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_member_organization_user", "organization_id", "user_id", unique=True),
        Index("idx_member_organization_status", "organization_id", "status"),
        Index("idx_member_user_status", "user_id", "status"),
    )
