"""
Global role bookkeeping that follows organization-level admin changes.
"""

from uuid import UUID

from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.domain.entities import UserRole


async def promote_to_org_admin(uow: UnitOfWork, user_id: UUID) -> bool:
    """Raise a plain member's global role to org_admin; returns True if changed"""
    user = await uow.users.get_by_id(user_id)
    if user is None or user.role != UserRole.member:
        return False
    user.role = UserRole.org_admin
    await uow.users.update(user)
    return True


async def revert_to_member(uow: UnitOfWork, user_id: UUID) -> bool:
    """
    Drop an org_admin's global role back to member, unless they still
    administer an organization. Returns True if changed.
    """
    user = await uow.users.get_by_id(user_id)
    if user is None or user.role != UserRole.org_admin:
        return False
    if await uow.organizations.get_by_admin_user_id(user_id) is not None:
        return False
    user.role = UserRole.member
    await uow.users.update(user)
    return True
