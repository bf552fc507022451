"""Authentication providers package.

Providers implement the ``AuthProvider`` protocol; the factory picks one
from ``auth.mode``:

- LocalJWTAuthProvider: Validates JWTs from the external auth provider
- HeaderAuthProvider: Trusts the X-User-ID header (development/gateway)
- DisabledAuthProvider: Every caller is the anonymous user

Usage:
    from app.auth.providers import get_auth_provider

    provider = get_auth_provider()
    result = await provider.validate_token(token, request)
"""

from app.auth.providers.disabled import ANONYMOUS_USER_ID, DisabledAuthProvider
from app.auth.providers.exceptions import (
    AuthenticationError,
    AuthProviderError,
    ConfigurationError,
    TokenExpiredError,
    TokenInvalidError,
)
from app.auth.providers.factory import (
    create_auth_provider,
    get_auth_provider,
    initialize_auth_provider,
    set_auth_provider,
    shutdown_auth_provider,
)
from app.auth.providers.header import HeaderAuthProvider
from app.auth.providers.local_jwt import LocalJWTAuthProvider
from app.auth.providers.models import AuthResult
from app.auth.providers.protocol import AuthProvider


__all__ = [
    "ANONYMOUS_USER_ID",
    "AuthProvider",
    "AuthProviderError",
    "AuthResult",
    "AuthenticationError",
    "ConfigurationError",
    "DisabledAuthProvider",
    "HeaderAuthProvider",
    "LocalJWTAuthProvider",
    "TokenExpiredError",
    "TokenInvalidError",
    "create_auth_provider",
    "get_auth_provider",
    "initialize_auth_provider",
    "set_auth_provider",
    "shutdown_auth_provider",
]
