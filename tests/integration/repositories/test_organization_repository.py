import pytest

from acetrack.adapter.repositories.organization_repository import OrganizationRepository
from acetrack.app.repositories.errors import DuplicateRecordError
from acetrack.domain.entities import Organization, OrganizationStatus


def build_organization(name, admin_user_id):
    return Organization(name=name, admin_user_id=admin_user_id, status=OrganizationStatus.active)


@pytest.mark.asyncio
async def test_name_is_unique_ignoring_case(db_session, create_user):
    first_id, _ = await create_user("first@example.com")
    second_id, _ = await create_user("second@example.com")
    repository = OrganizationRepository(db_session)
    await repository.create(build_organization("Chess Club", first_id))

    with pytest.raises(DuplicateRecordError) as exc_info:
        await repository.create(build_organization("CHESS CLUB", second_id))

    assert exc_info.value.field == "name"
    await db_session.rollback()


@pytest.mark.asyncio
async def test_one_organization_per_admin(db_session, create_user):
    founder_id, _ = await create_user("founder@example.com")
    repository = OrganizationRepository(db_session)
    await repository.create(build_organization("Chess Club", founder_id))

    with pytest.raises(DuplicateRecordError) as exc_info:
        await repository.create(build_organization("Go Club", founder_id))

    assert exc_info.value.field == "admin_user_id"
    await db_session.rollback()
