from abc import ABC, abstractmethod

from acetrack.app.repositories.attendance_repository import IAttendanceRepository
from acetrack.app.repositories.audit_event_repository import IAuditEventRepository
from acetrack.app.repositories.event_repository import IEventRepository
from acetrack.app.repositories.organization_member_repository import (
    IOrganizationMemberRepository,
)
from acetrack.app.repositories.organization_repository import IOrganizationRepository
from acetrack.app.repositories.subscription_repository import ISubscriptionRepository
from acetrack.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    organizations: IOrganizationRepository
    members: IOrganizationMemberRepository
    events: IEventRepository
    subscriptions: ISubscriptionRepository
    attendances: IAttendanceRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
