"""
Password hashing and bearer token handling.

Tokens are HS256 JWTs carrying the user id, username and role. They expire
after ACCESS_TOKEN_EXPIRE_HOURS and cannot be refreshed or revoked; an expired
token simply fails validation and the client has to log in again.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError
from laundry_pos.core.config import settings
from laundry_pos.schemas.auth_schema import TokenPayload

password_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class InvalidToken(Exception):
    """Raised when a token has a bad signature, a malformed payload or has expired."""


def get_password(password: str) -> str:
    return password_context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    return password_context.verify(password, hashed_password)


def dummy_verify() -> None:
    """Spend the same time as a real verification when there is no hash to check."""
    password_context.dummy_verify()


def create_access_token(
    user_id: str,
    username: str,
    role: str,
    secret: Optional[str] = None,
    expires_delta: Optional[timedelta] = None
) -> str:
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS)

    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {
        "id": user_id,
        "username": username,
        "role": role,
        "exp": expire
    }
    return jwt.encode(to_encode, secret or settings.JWT_SECRET, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, secret: Optional[str] = None) -> TokenPayload:
    try:
        payload = jwt.decode(
            token,
            secret or settings.JWT_SECRET,
            algorithms=[settings.ALGORITHM],
            options={"require_exp": True}
        )
    except JWTError as e:
        raise InvalidToken(str(e)) from e

    try:
        return TokenPayload(**payload)
    except ValidationError as e:
        raise InvalidToken("Token payload is malformed") from e
