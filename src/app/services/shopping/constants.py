"""Constants for the shopping list services."""

from __future__ import annotations

from typing import Final


# Layout of the PDF export (points) and the PNG snapshot (pixels)
PDF_MARGIN: Final[float] = 36.0
PDF_TITLE_FONT: Final[str] = "Helvetica-Bold"
PDF_TITLE_SIZE: Final[int] = 16
PDF_TABLE_HEADER: Final[tuple[str, str]] = ("Item", "Count")

IMAGE_PADDING: Final[int] = 24
IMAGE_LINE_SPACING: Final[int] = 10
IMAGE_BACKGROUND: Final[tuple[int, int, int]] = (255, 255, 255)
IMAGE_FOREGROUND: Final[tuple[int, int, int]] = (33, 33, 33)

XLSX_SHEET_NAME: Final[str] = "Shopping List"
