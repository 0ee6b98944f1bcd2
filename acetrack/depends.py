from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from acetrack.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from acetrack.api.utils.jwt import verify_jwt
from acetrack.app.services.unit_of_work import UnitOfWork
from acetrack.app.use_cases.users import LoadActorUseCase
from acetrack.domain.access_control import Actor

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None or "user_id" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload


async def _load_actor(user_id: str, uow: UnitOfWork) -> Actor:
    try:
        user_uuid = UUID(user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    result = await LoadActorUseCase(uow).execute(user_uuid)
    if result.is_err():
        if result.error.code == "USER_INACTIVE":
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=result.error.message)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=result.error.message)

    return result.value


async def get_current_actor(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Actor:
    """
    Resolve the authenticated caller into an Actor.

    Raises:
        HTTPException: 401 if the user no longer exists, 403 if inactive
    """
    return await _load_actor(current_user["user_id"], uow)


async def get_optional_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Optional[Actor]:
    """Actor for public endpoints; None when no credentials were sent"""
    if credentials is None:
        return None

    payload = verify_jwt(credentials.credentials)
    if payload is None or "user_id" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return await _load_actor(payload["user_id"], uow)
