from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.exceptions import AuthenticationError
from app.core.ownership import OwnerScope
from app.crud.user import user_crud
from app.models.user import User
from app.utils.jwt_verification import decode_token

security = HTTPBearer()

async def verify_token(authorization_credentials: HTTPAuthorizationCredentials = Security(security)):
    """Verify the bearer JWT and return its claims"""
    token = authorization_credentials.credentials
    return decode_token(token)


async def get_current_user(current_user: dict = Depends(verify_token)) -> User:
    user = await user_crud.get_by_username(current_user.get("sub"))
    if not user:
        raise AuthenticationError("User not found")
    return user


async def get_owner_scope(user: User = Depends(get_current_user)) -> OwnerScope:
    return OwnerScope.from_user(user)
