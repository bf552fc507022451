"""Response helpers shared by endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Response


if TYPE_CHECKING:
    from app.services.shopping.exporters import ExportResult


def download_response(result: ExportResult) -> Response:
    """Send an export as an attachment download."""
    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )
