"""Authentication provider factory.

Creates the provider selected by ``auth.mode`` and holds the instance used
by the request dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.auth.providers.disabled import DisabledAuthProvider
from app.auth.providers.exceptions import ConfigurationError
from app.auth.providers.header import HeaderAuthProvider
from app.auth.providers.local_jwt import LocalJWTAuthProvider
from app.core.config import AuthMode, get_settings
from app.observability.logging import get_logger


if TYPE_CHECKING:
    from app.auth.providers.protocol import AuthProvider
    from app.core.config import Settings

logger = get_logger(__name__)

# Fixed development secret - safe for local dev, blocked in production
_DEV_JWT_SECRET = "insecure-dev-key-do-not-use-in-production"  # noqa: S105

# Provider state container (avoids global statement for mutation)
_state: dict[str, AuthProvider | None] = {"provider": None}


def _get_jwt_secret(settings: Settings) -> str:
    """Get JWT secret, validating it's set in production.

    Raises:
        ConfigurationError: If secret is not set in production.
    """
    if settings.JWT_SECRET_KEY:
        return settings.JWT_SECRET_KEY

    if settings.is_production:
        msg = "JWT_SECRET_KEY must be set in production for local_jwt auth mode"
        raise ConfigurationError(msg)

    logger.warning("Using insecure development JWT secret - do not use in production")
    return _DEV_JWT_SECRET


def create_auth_provider(settings: Settings | None = None) -> AuthProvider:
    """Create an authentication provider based on configuration.

    Args:
        settings: Application settings. If None, loaded from environment.

    Raises:
        ConfigurationError: If required settings are missing for the auth mode.
    """
    if settings is None:
        settings = get_settings()

    mode = settings.auth_mode_enum
    logger.info("Creating auth provider", mode=mode.value)

    if mode == AuthMode.DISABLED:
        if settings.is_production:
            msg = "Auth mode 'disabled' is not allowed in production"
            raise ConfigurationError(msg)
        return DisabledAuthProvider()

    if mode == AuthMode.HEADER:
        return HeaderAuthProvider(
            user_id_header=settings.auth.headers.user_id,
            roles_header=settings.auth.headers.roles,
        )

    return LocalJWTAuthProvider(
        secret_key=_get_jwt_secret(settings),
        algorithm=settings.auth.jwt.algorithm,
        issuer=settings.auth.jwt.issuer,
        audience=settings.auth.jwt.audience,
    )


def get_auth_provider() -> AuthProvider:
    """Get the current auth provider instance.

    Raises:
        RuntimeError: If the provider has not been initialized.
    """
    provider = _state["provider"]
    if provider is None:
        msg = "Auth provider not initialized. Call set_auth_provider() during startup."
        raise RuntimeError(msg)
    return provider


def set_auth_provider(provider: AuthProvider) -> None:
    """Set the global auth provider instance."""
    _state["provider"] = provider
    logger.info("Auth provider set", provider=provider.provider_name)


async def initialize_auth_provider() -> AuthProvider:
    """Create, initialize, and set the auth provider."""
    provider = create_auth_provider()
    await provider.initialize()
    set_auth_provider(provider)
    return provider


async def shutdown_auth_provider() -> None:
    """Shutdown the global auth provider and clear it."""
    provider = _state["provider"]
    if provider is not None:
        await provider.shutdown()
        _state["provider"] = None
        logger.info("Auth provider shutdown complete")
