"""
FastAPI dependencies - authorization guard.
The identity comes from the token alone; the user row is not re-read here.
"""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from reuse.core.errors import MissingTokenError
from reuse.core.security import decode_access_token
from reuse.schemas.auth import Identity

BEARER_PREFIX = "Bearer "

security = HTTPBearer(auto_error=False)


async def get_current_identity(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Identity:
    """Resolve `Authorization: Bearer <token>` to {id, email}. 401 if missing or invalid."""
    # HTTPBearer matches the scheme in any case; the header must start with "Bearer " exactly
    header = request.headers.get("Authorization", "")
    if not credentials or not credentials.credentials or not header.startswith(BEARER_PREFIX):
        raise MissingTokenError()
    return decode_access_token(credentials.credentials)


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
