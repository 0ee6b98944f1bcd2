import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from acetrack.depends import get_unit_of_work
from acetrack.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from acetrack.api.utils.jwt import generate_jwt
from acetrack.domain.entities import User, UserRole


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from acetrack.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def create_user(db_session):
    """Insert a user and return (user_id, Authorization headers)"""

    async def _create(email: str, role: UserRole = UserRole.member, **fields):
        user = User(email=email, first_name="Test", last_name="User", role=role, **fields)
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        user_id = user.id
        return user_id, {"Authorization": f"Bearer {generate_jwt(user_id)}"}

    return _create


@pytest.fixture
def create_organization(client, create_user):
    """Found an organization through the API; returns (organization_id, founder_id, headers)"""

    async def _create(name: str = "Astronomy Club", founder_email: str = "founder@example.com", **fields):
        founder_id, headers = await create_user(founder_email)
        payload = {
            "name": name,
            "allow_public_join": True,
            "require_approval": True,
            "subscription": {"duration": "1year", "payment_amount": 100.0},
        }
        payload.update(fields)
        response = await client.post("/organizations", json=payload, headers=headers)
        assert response.status_code == 201
        data = response.json()
        return data["organization"]["id"], founder_id, headers

    return _create
