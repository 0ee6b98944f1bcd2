"""
Organization Entity

A tenant that owns events, members and subscriptions.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import func
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import OrganizationStatus


class Organization(SQLModel, table=True):
    """
    Organization entity - isolated workspace for a club or institution.

    Business Rules:
    - name is unique case-insensitively (use case check, lower(name) index)
    - One user administers at most one organization (admin_user_id unique)
    - Soft delete: status=inactive, memberships inactivated
    - Non-admin callers only ever see active organizations
    """

    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200, index=True)
    description: Optional[str] = Field(default=None, max_length=1000)
    logo: Optional[str] = Field(default=None, max_length=255)
    banner: Optional[str] = Field(default=None, max_length=255)
    contact_email: Optional[str] = Field(default=None, max_length=255)
    contact_phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = Field(default=None, max_length=500)
    website: Optional[str] = Field(default=None, max_length=255)

    admin_user_id: UUID = Field(foreign_key="users.id", nullable=False, unique=True)

    status: OrganizationStatus = Field(default=OrganizationStatus.pending)

    # Settings
    allow_public_join: bool = Field(default=False)
    require_approval: bool = Field(default=True)
    max_members: Optional[int] = Field(default=None, ge=1)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_organization_status", "status"),
        Index("idx_organization_public_join", "allow_public_join"),
    )


Index("uq_organization_name_lower", func.lower(Organization.name), unique=True)
