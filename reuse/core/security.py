"""
Security: password hashing and JWT issue/verification.
Tokens are stateless: validity is signature + expiry, nothing is stored server-side.
"""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from reuse.config import get_settings
from reuse.core.errors import InvalidTokenError
from reuse.schemas.auth import Identity

settings = get_settings()
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    """One-way salted hash for storage. Never store plain passwords."""
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time comparison for login."""
    return pwd_context.verify(plain, hashed)


def dummy_verify() -> None:
    """Spend the same time as a real verification (login with unknown email)."""
    pwd_context.dummy_verify()


def create_access_token(user_id: int, email: str, expires_delta: timedelta | None = None) -> str:
    """Sign {id, email} with the server secret. Default expiry: jwt_expire_days."""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta if expires_delta is not None else timedelta(days=settings.jwt_expire_days))
    to_encode = {"id": user_id, "email": email, "iat": now, "exp": expire}
    return jwt.encode(
        to_encode, settings.jwt_secret.get_secret_value(), algorithm=settings.jwt_algorithm
    )


def decode_access_token(token: str) -> Identity:
    """Verify signature and expiry. Any failure is reported as InvalidTokenError."""
    try:
        payload = jwt.decode(
            token, settings.jwt_secret.get_secret_value(), algorithms=[settings.jwt_algorithm]
        )
    except JWTError as exc:
        raise InvalidTokenError() from exc
    user_id, email = payload.get("id"), payload.get("email")
    if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(email, str):
        raise InvalidTokenError()
    return Identity(id=user_id, email=email)
