"""
AceTrack Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Global role of a user, the primary input to access control"""

    admin = "admin"
    org_admin = "org_admin"
    member = "member"


class UserStatus(str, Enum):
    """User account status"""

    active = "active"
    inactive = "inactive"
    suspended = "suspended"


class OrganizationStatus(str, Enum):
    """Organization status"""

    active = "active"
    inactive = "inactive"
    pending = "pending"
    suspended = "suspended"


class MemberRole(str, Enum):
    """Role of a user within one organization"""

    org_admin = "org_admin"
    officer = "officer"
    member = "member"


class MemberStatus(str, Enum):
    """Organization membership status"""

    active = "active"
    inactive = "inactive"
    pending = "pending"


class EventStatus(str, Enum):
    """Event lifecycle status"""

    draft = "draft"
    published = "published"
    ongoing = "ongoing"
    completed = "completed"
    cancelled = "cancelled"


class SubscriptionDuration(str, Enum):
    """Paid subscription term"""

    six_months = "6months"
    one_year = "1year"
    two_years = "2years"


class SubscriptionStatus(str, Enum):
    """Subscription status"""

    pending = "pending"
    active = "active"
    expired = "expired"
    cancelled = "cancelled"


class AttendanceStatus(str, Enum):
    """Attendance outcome for one user at one event"""

    present = "present"
    absent = "absent"
    late = "late"


class CheckInMethod(str, Enum):
    """How a check-in was recorded"""

    qr_code = "qr_code"
    manual = "manual"
