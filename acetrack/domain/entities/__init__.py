"""
AceTrack Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AttendanceStatus,
    CheckInMethod,
    EventStatus,
    MemberRole,
    MemberStatus,
    OrganizationStatus,
    SubscriptionDuration,
    SubscriptionStatus,
    UserRole,
    UserStatus,
)

# Export all entities
from .user import User
from .organization import Organization
from .organization_member import OrganizationMember
from .event import Event
from .subscription import Subscription
from .attendance import Attendance
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "AttendanceStatus",
    "CheckInMethod",
    "EventStatus",
    "MemberRole",
    "MemberStatus",
    "OrganizationStatus",
    "SubscriptionDuration",
    "SubscriptionStatus",
    "UserRole",
    "UserStatus",
    # Entities
    "User",
    "Organization",
    "OrganizationMember",
    "Event",
    "Subscription",
    "Attendance",
    "AuditEvent",
]
