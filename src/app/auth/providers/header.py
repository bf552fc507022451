"""Header-based authentication provider.

Trusts the user id sent in a request header. Meant for local development
and for deployments behind a gateway that has already authenticated the
caller and forwards the id.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.auth.providers.exceptions import AuthenticationError
from app.auth.providers.models import AuthResult
from app.observability.logging import get_logger


if TYPE_CHECKING:
    from starlette.requests import Request

logger = get_logger(__name__)


class HeaderAuthProvider:
    """Reads the caller's id and roles from request headers.

    Attributes:
        user_id_header: Header carrying the user id (required).
        roles_header: Header carrying comma-separated roles (optional).
    """

    def __init__(
        self,
        user_id_header: str = "X-User-ID",
        roles_header: str = "X-User-Roles",
    ) -> None:
        self.user_id_header = user_id_header
        self.roles_header = roles_header

    @property
    def provider_name(self) -> str:
        return "header"

    async def validate_token(
        self,
        _token: str,
        request: Request | None = None,
    ) -> AuthResult:
        """Identify the caller from headers. The token is ignored.

        Raises:
            AuthenticationError: If there is no request or the id header is
                missing or blank.
        """
        if request is None:
            msg = "HeaderAuthProvider requires the request to read headers"
            raise AuthenticationError(msg)

        user_id = request.headers.get(self.user_id_header, "").strip()
        if not user_id:
            msg = f"Missing required header: {self.user_id_header}"
            raise AuthenticationError(msg)

        roles_value = request.headers.get(self.roles_header, "")
        roles = [role.strip() for role in roles_value.split(",") if role.strip()]

        logger.debug("Authenticated via headers", user_id=user_id, roles=roles)

        return AuthResult(
            user_id=user_id,
            roles=roles or ["user"],
            token_type="header",  # noqa: S106 - not a password
            raw_claims={"source": "headers"},
        )

    async def initialize(self) -> None:
        logger.info(
            "HeaderAuthProvider initialized",
            user_id_header=self.user_id_header,
        )
        logger.warning(
            "HeaderAuthProvider is enabled - ensure this is only used in "
            "development/testing or behind a trusted gateway"
        )

    async def shutdown(self) -> None:
        logger.debug("HeaderAuthProvider shutdown")
