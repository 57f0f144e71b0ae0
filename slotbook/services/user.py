"""Registration and caller resolution."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from slotbook.core.auth import check_password_length, hash_password, verify_password
from slotbook.core.errors import AuthenticationError, EmailAlreadyExistsError, ForbiddenError
from slotbook.database import run_in_transaction
from slotbook.models.calendar import Calendar
from slotbook.models.user import User, normalize_email
from slotbook.repositories import CalendarRepository, UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Creates users together with their calendar and resolves callers."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = UserRepository(db)
        self.calendars = CalendarRepository(db)

    async def register(self, email: str, password: str, display_name: str) -> User:
        """Create a user and their calendar in one transaction."""
        email = normalize_email(email)
        check_password_length(password)

        async with run_in_transaction(self.db):
            if await self.users.exists_by_email(email):
                raise EmailAlreadyExistsError(email)

            user = User(
                email=email,
                password_hash=hash_password(password),
                display_name=display_name.strip(),
            )
            self.users.add(user)
            await self.db.flush()

            self.calendars.add(Calendar(user_id=user.id))
            await self.db.flush()

        logger.info(f"Registered user {user.id}")
        return user

    async def authenticate(self, email: str, password: str) -> User:
        user = await self.users.find_by_email(normalize_email(email))
        if user is None or not verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid email or password")
        return user

    async def resolve_user_id(self, principal_email: str) -> UUID:
        """Map an authenticated principal to its user id."""
        user = await self.users.find_by_email(normalize_email(principal_email))
        if user is None:
            raise ForbiddenError("Authenticated user not found")
        return user.id
