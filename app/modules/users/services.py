from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from typing import Optional, Tuple
import logging

from app.core.exceptions import ErrorKind, ServiceError
from app.core.security import (
    hash_password_async,
    verify_password_async,
    create_access_token,
)
from app.modules.users.models import User
from app.modules.users import schemas

logger = logging.getLogger(__name__)


class AuthService:
    """Registration and login"""

    @staticmethod
    async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    @staticmethod
    async def register_user(db: AsyncSession, user_data: schemas.UserRegistrationRequest) -> User:
        """
        Register a new account.

        The unique index on email is authoritative; the lookup only spares a
        bcrypt round for the common duplicate case.
        """
        email = user_data.email.lower()
        if await AuthService.get_user_by_email(db, email):
            raise ServiceError(ErrorKind.CONFLICT, "User already exists")

        user = User(
            name=user_data.name,
            email=email,
            hashed_password=await hash_password_async(user_data.password),
            role=user_data.role,
            occupation=user_data.occupation,
            contact_number=user_data.contact_number
        )

        try:
            db.add(user)
            await db.commit()
            await db.refresh(user)
        except IntegrityError:
            await db.rollback()
            raise ServiceError(ErrorKind.CONFLICT, "User already exists")

        logger.info(f"Registered {user.role.value} account {user.id}")
        return user

    @staticmethod
    async def authenticate_user(db: AsyncSession, email: str, password: str) -> Optional[User]:
        """Return the user when the credentials match, otherwise None"""
        user = await AuthService.get_user_by_email(db, email.lower())
        if not user:
            return None

        if not await verify_password_async(password, user.hashed_password):
            return None

        return user

    @staticmethod
    async def login(db: AsyncSession, login_data: schemas.UserLoginRequest) -> Tuple[str, User]:
        """Issue a bearer token; unknown email and wrong password fail alike"""
        user = await AuthService.authenticate_user(db, login_data.email, login_data.password)
        if not user:
            logger.info("Rejected login attempt")
            raise ServiceError(ErrorKind.INVALID_CREDENTIALS, "Invalid credentials")

        token = AuthService.create_token(user)
        return token, user

    @staticmethod
    def create_token(user: User) -> str:
        return create_access_token(data={"userId": user.id, "role": user.role.value})
