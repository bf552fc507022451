"""Authentication provider models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class AuthResult(BaseModel):
    """Identity of the caller, whichever provider established it.

    Attributes:
        user_id: Owner key for all of the caller's documents ('sub' claim).
        roles: Role names, informational only.
        token_type: How the caller was identified (access, header, none).
        issuer: Token issuer ('iss' claim) when a token was validated.
        expires_at: Token expiration timestamp ('exp' claim).
        raw_claims: Original claims for debugging.
    """

    user_id: str = Field(..., min_length=1, description="Caller identifier")
    roles: list[str] = Field(default_factory=list, description="User roles")
    token_type: str = Field(default="access", description="Type of validated token")
    issuer: str | None = Field(default=None, description="Token issuer")
    expires_at: int | None = Field(default=None, description="Expiration timestamp")
    raw_claims: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}
