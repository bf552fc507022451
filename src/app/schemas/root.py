"""Root endpoint response schema."""

from __future__ import annotations

from pydantic import Field

from app.schemas.base import APIResponse


class RootResponse(APIResponse):
    """Basic service information for discovery."""

    service: str = Field(
        ...,
        description="Service name",
        examples=["Recipe Shopping Service"],
    )
    version: str = Field(..., description="Service version", examples=["0.1.0"])
    docs: str = Field(
        ...,
        description="API documentation URL or status",
        examples=["/docs"],
    )
    health: str = Field(
        ...,
        description="Health check endpoint URL",
        examples=["/api/v1/health"],
    )
