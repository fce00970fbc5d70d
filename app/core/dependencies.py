from dataclasses import dataclass
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from app.core.exceptions import ErrorKind, ServiceError
from app.core.security import decode_token
from app.modules.users.models import UserRole

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login")


@dataclass(frozen=True)
class TokenIdentity:
    """Identity carried by a verified bearer token"""
    user_id: str
    role: UserRole


async def get_current_identity(token: str = Depends(oauth2_scheme)) -> TokenIdentity:
    """Get the caller's identity from the JWT in the Authorization header"""
    credentials_exception = ServiceError(
        ErrorKind.UNAUTHORIZED,
        "Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    payload = decode_token(token)
    user_id = payload.get("userId")
    role = payload.get("role")
    if not user_id or not role:
        raise credentials_exception

    try:
        return TokenIdentity(user_id=str(user_id), role=UserRole(role))
    except ValueError:
        raise credentials_exception


def require_role(required_role: UserRole):
    """Dependency factory rejecting identities without the given role"""

    async def checker(identity: TokenIdentity = Depends(get_current_identity)) -> TokenIdentity:
        if identity.role != required_role:
            raise ServiceError(ErrorKind.FORBIDDEN, f"Only {required_role.value}s allowed")
        return identity

    return checker


require_lender = require_role(UserRole.LENDER)
