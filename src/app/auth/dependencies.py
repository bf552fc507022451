"""FastAPI security dependencies.

The configured auth provider (local_jwt, header or disabled) identifies the
caller. The resulting user id scopes every recipe and list operation and is
bound into the log context for the rest of the request.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel

from app.auth.providers import (
    AuthenticationError,
    AuthResult,
    TokenExpiredError,
    get_auth_provider,
)
from app.observability.logging import bind_context


# Token extraction only; header and disabled modes run without a token
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/oauth/token",  # External auth provider OAuth2 endpoint
    scheme_name="JWT",
    description="JWT Bearer token authentication",
    auto_error=False,
)


class CurrentUser(BaseModel):
    """The authenticated caller."""

    id: str
    roles: list[str] = []

    @classmethod
    def from_auth_result(cls, result: AuthResult) -> CurrentUser:
        return cls(id=result.user_id, roles=result.roles)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_auth_result(
    request: Request,
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> AuthResult:
    """Identify the caller with the configured auth provider.

    Raises:
        HTTPException: 401 if the caller cannot be identified.
    """
    provider = get_auth_provider()
    try:
        return await provider.validate_token(token or "", request)
    except TokenExpiredError:
        raise _unauthorized("Token has expired") from None
    except AuthenticationError as e:
        raise _unauthorized(str(e) or "Authentication failed") from None


async def get_current_user(
    auth_result: Annotated[AuthResult, Depends(get_auth_result)],
) -> CurrentUser:
    """Primary dependency for protected routes."""
    user = CurrentUser.from_auth_result(auth_result)
    bind_context(user_id=user.id)
    return user
