"""Authentication module.

This module provides:
- Pluggable auth providers (local JWT, trusted header, disabled)
- FastAPI dependencies resolving the current user
"""

from app.auth.dependencies import CurrentUser, get_current_user


__all__ = [
    "CurrentUser",
    "get_current_user",
]
