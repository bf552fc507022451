"""Authentication provider protocol definition."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from starlette.requests import Request

    from app.auth.providers.models import AuthResult


@runtime_checkable
class AuthProvider(Protocol):
    """Interface shared by the local JWT, header and disabled providers."""

    @property
    def provider_name(self) -> str:
        """Short name used in logs."""
        ...

    async def validate_token(
        self,
        token: str,
        request: Request | None = None,
    ) -> AuthResult:
        """Identify the caller.

        Raises:
            AuthenticationError: If the caller cannot be identified.
        """
        ...

    async def initialize(self) -> None: ...

    async def shutdown(self) -> None: ...
