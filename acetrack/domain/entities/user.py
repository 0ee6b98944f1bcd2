"""
User Entity

External identity referenced by every other entity.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import UserRole, UserStatus


class User(SQLModel, table=True):
    """
    User entity - a person who can join organizations and attend events.

    Business Rules:
    - Accounts are provisioned by the external auth service
    - role is the single global role consulted by access control
    - Only active users may perform mutations
    - role is promoted to org_admin when the user founds an organization
      and reverted to member when they give it up
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)

    role: UserRole = Field(default=UserRole.member)
    status: UserStatus = Field(default=UserStatus.active)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_role_status", "role", "status"),)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
