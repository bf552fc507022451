"""Root endpoint providing service information."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.schemas.root import RootResponse


router = APIRouter(tags=["Root"])


@router.get(
    "/",
    response_model=RootResponse,
    summary="Root endpoint",
    description="Basic service information and links to docs and health.",
)
async def root(
    settings: Annotated[Settings, Depends(get_settings)],
) -> RootResponse:
    """Return basic service information. Does not require authentication."""
    prefix = settings.api.v1_prefix
    return RootResponse(
        service=settings.app.name,
        version=settings.app.version,
        docs=f"{prefix}/docs" if settings.is_non_production else "disabled",
        health=f"{prefix}/health",
    )
