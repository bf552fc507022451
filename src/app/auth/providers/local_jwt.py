"""Local JWT authentication provider.

Verifies access tokens issued by the external auth provider with a shared
secret. The ``sub`` claim becomes the user id that owns the caller's
recipes and lists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError, JWTError

from app.auth.providers.exceptions import (
    ConfigurationError,
    TokenExpiredError,
    TokenInvalidError,
)
from app.auth.providers.models import AuthResult
from app.observability.logging import get_logger


if TYPE_CHECKING:
    from starlette.requests import Request

logger = get_logger(__name__)


class LocalJWTAuthProvider:
    """Validates JWTs with python-jose.

    Attributes:
        secret_key: Key used to verify signatures.
        algorithm: Signing algorithm, HS256 unless configured otherwise.
        issuer: Expected 'iss' claim. Not checked when None.
        audience: Expected 'aud' claim. Not checked when None.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str | None = None,
        audience: list[str] | None = None,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.audience = audience or None

    @property
    def provider_name(self) -> str:
        return "local_jwt"

    async def validate_token(
        self,
        token: str,
        _request: Request | None = None,
    ) -> AuthResult:
        """Decode and verify ``token``.

        Raises:
            TokenExpiredError: If the token has expired.
            TokenInvalidError: If the token is missing, malformed, fails
                verification or has no subject.
        """
        if not token:
            msg = "Missing bearer token"
            raise TokenInvalidError(msg)

        decode_kwargs: dict[str, Any] = {"algorithms": [self.algorithm]}
        if self.issuer:
            decode_kwargs["issuer"] = self.issuer
        if self.audience:
            # python-jose checks a single expected audience
            decode_kwargs["audience"] = self.audience[0]
        else:
            decode_kwargs["options"] = {"verify_aud": False}

        try:
            payload = jwt.decode(token, self.secret_key, **decode_kwargs)
        except ExpiredSignatureError as e:
            logger.debug("Token expired")
            msg = "Token has expired"
            raise TokenExpiredError(msg) from e
        except JWTClaimsError as e:
            logger.warning("JWT claims validation failed", error=str(e))
            raise TokenInvalidError(str(e)) from e
        except JWTError as e:
            logger.warning("JWT validation failed", error=str(e))
            msg = "Invalid token"
            raise TokenInvalidError(msg) from e

        user_id = payload.get("sub")
        if not user_id:
            msg = "Token missing 'sub' claim"
            raise TokenInvalidError(msg)

        token_type = payload.get("type", "access")
        if token_type != "access":
            msg = f"Invalid token type: {token_type}. Expected 'access'."
            raise TokenInvalidError(msg)

        return AuthResult(
            user_id=str(user_id),
            roles=payload.get("roles", []),
            token_type=token_type,
            issuer=payload.get("iss"),
            expires_at=payload.get("exp"),
            raw_claims=payload,
        )

    async def initialize(self) -> None:
        """Check that a signing secret is configured."""
        if not self.secret_key:
            msg = "JWT secret key is not configured"
            raise ConfigurationError(msg)

        logger.info(
            "LocalJWTAuthProvider initialized",
            algorithm=self.algorithm,
            issuer_validation=self.issuer is not None,
            audience_validation=self.audience is not None,
        )

    async def shutdown(self) -> None:
        logger.debug("LocalJWTAuthProvider shutdown")
