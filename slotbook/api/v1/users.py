"""User registration and token endpoints."""

from fastapi import APIRouter, status

from slotbook.core.auth import token_auth
from slotbook.deps import DbSession
from slotbook.models.user import User
from slotbook.schemas.user import TokenRead, UserLogin, UserRead, UserRegister
from slotbook.services.user import UserService

router = APIRouter()


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register(data: UserRegister, db: DbSession) -> User:
    """Register a user. Their calendar is created in the same transaction."""
    return await UserService(db).register(
        email=data.email,
        password=data.password,
        display_name=data.display_name,
    )


@router.post("/token", response_model=TokenRead)
async def issue_token(data: UserLogin, db: DbSession) -> TokenRead:
    """Exchange email and password for a bearer token."""
    user = await UserService(db).authenticate(data.email, data.password)
    return TokenRead(access_token=token_auth.create_access_token(user))
