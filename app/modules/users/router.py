from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.schemas import MessageResponse
from app.modules.users import schemas
from app.modules.users.services import AuthService

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    user_data: schemas.UserRegistrationRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Register a new lender or borrower.

    - Rejects an email that is already registered
    - Stores only a bcrypt hash of the password
    """
    await AuthService.register_user(db, user_data)
    return {"message": "User registered successfully"}


@router.post("/login", response_model=schemas.LoginResponse)
async def login(
    login_data: schemas.UserLoginRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Login with email and password.

    - Returns a bearer token valid for one day
    - Returns the public profile (no password hash)
    """
    token, user = await AuthService.login(db, login_data)
    return schemas.LoginResponse(token=token, user=schemas.UserPublic.model_validate(user))
