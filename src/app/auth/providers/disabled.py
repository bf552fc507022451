"""Provider used when authentication is turned off.

Every request is treated as the same ``anonymous`` user, so all callers
share one shopping list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from app.auth.providers.models import AuthResult
from app.observability.logging import get_logger


if TYPE_CHECKING:
    from starlette.requests import Request

logger = get_logger(__name__)

ANONYMOUS_USER_ID: Final[str] = "anonymous"


class DisabledAuthProvider:
    """Identifies every caller as the anonymous user."""

    @property
    def provider_name(self) -> str:
        return "disabled"

    async def validate_token(
        self,
        _token: str,
        _request: Request | None = None,
    ) -> AuthResult:
        return AuthResult(
            user_id=ANONYMOUS_USER_ID,
            roles=["anonymous"],
            token_type="none",  # noqa: S106 - not a password
            raw_claims={"auth_disabled": True},
        )

    async def initialize(self) -> None:
        logger.warning(
            "DisabledAuthProvider initialized - every request shares the "
            "anonymous user's lists"
        )

    async def shutdown(self) -> None:
        pass
