"""Enumerations shared across schemas."""

from __future__ import annotations

from enum import StrEnum


class ExportFormat(StrEnum):
    """Document formats a shopping list can be exported to."""

    CSV = "csv"
    XLSX = "xlsx"
    DOCX = "docx"
    PDF = "pdf"
    PNG = "png"

    @property
    def media_type(self) -> str:
        """MIME type sent with the download."""
        return _MEDIA_TYPES[self]


_MEDIA_TYPES: dict[ExportFormat, str] = {
    ExportFormat.CSV: "text/csv; charset=utf-8",
    ExportFormat.XLSX: (
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    ),
    ExportFormat.DOCX: (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    ),
    ExportFormat.PDF: "application/pdf",
    ExportFormat.PNG: "image/png",
}


class HealthStatus(StrEnum):
    """Status reported by health and readiness probes."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    NOT_INITIALIZED = "not_initialized"
