import jwt
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Optional
from app.configs.settings import settings
from app.core.exceptions import AuthenticationError


def create_token(subject: str, claims: Optional[Dict[str, Any]] = None, expires_in: Optional[int] = None) -> str:
    """Sign a bearer credential for `subject`. Issuing is done elsewhere in production; used by fixtures and tooling"""
    now = datetime.now(timezone.utc)
    payload = dict(claims or {})
    payload.update({
        "sub": subject,
        "iat": now,
        "exp": now + timedelta(seconds=expires_in if expires_in is not None else settings.JWT_EXPIRY),
    })
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Decode and verify a bearer JWT signed with the shared secret"""
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"verify_aud": False, "require": ["sub"]}
        )

        return payload

    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise AuthenticationError(f"Invalid token: {str(e)}")
