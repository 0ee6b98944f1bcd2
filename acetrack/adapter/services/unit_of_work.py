from sqlmodel.ext.asyncio.session import AsyncSession

from acetrack.adapter.repositories.attendance_repository import AttendanceRepository
from acetrack.adapter.repositories.audit_event_repository import AuditEventRepository
from acetrack.adapter.repositories.event_repository import EventRepository
from acetrack.adapter.repositories.organization_member_repository import (
    OrganizationMemberRepository,
)
from acetrack.adapter.repositories.organization_repository import OrganizationRepository
from acetrack.adapter.repositories.subscription_repository import SubscriptionRepository
from acetrack.adapter.repositories.user_repository import UserRepository
from acetrack.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.organizations = OrganizationRepository(self.session)
        self.members = OrganizationMemberRepository(self.session)
        self.events = EventRepository(self.session)
        self.subscriptions = SubscriptionRepository(self.session)
        self.attendances = AttendanceRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed by the use case is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
