"""Shopping list export serializers.

Each ``to_*`` function is pure over the item sequence and renders items in
list order. ``ShoppingListExporter`` picks the serializer for a format and
names the download.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import TYPE_CHECKING
from xml.sax.saxutils import escape

import pandas as pd
from docx import Document
from PIL import Image, ImageDraw, ImageFont
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.observability.logging import get_logger
from app.observability.metrics import EXPORTS_TOTAL
from app.schemas.enums import ExportFormat
from app.services.shopping.constants import (
    IMAGE_BACKGROUND,
    IMAGE_FOREGROUND,
    IMAGE_LINE_SPACING,
    IMAGE_PADDING,
    PDF_MARGIN,
    PDF_TABLE_HEADER,
    PDF_TITLE_FONT,
    PDF_TITLE_SIZE,
    XLSX_SHEET_NAME,
)


if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.core.config.settings import ExportSettings
    from app.schemas.shopping import ShoppingListItem

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ExportResult:
    """A rendered export ready to be sent as a download."""

    content: bytes
    media_type: str
    filename: str


def to_csv(items: Sequence[ShoppingListItem]) -> bytes:
    """One ``name,count`` line per item, no header and no trailing newline.

    Names are written as-is; commas inside a name are not escaped.
    """
    return "\n".join(f"{item.name},{item.count}" for item in items).encode("utf-8")


def to_xlsx(items: Sequence[ShoppingListItem]) -> bytes:
    """Workbook with a single sheet and a ``name``/``count`` header row."""
    frame = pd.DataFrame.from_records(
        [{"name": item.name, "count": item.count} for item in items],
        columns=["name", "count"],
    )
    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        frame.to_excel(writer, sheet_name=XLSX_SHEET_NAME, index=False)
    return buffer.getvalue()


def to_docx(items: Sequence[ShoppingListItem], title: str) -> bytes:
    """Title paragraph followed by a two-column name/count table."""
    document = Document()
    document.add_paragraph(title)
    table = document.add_table(rows=0, cols=2)
    for item in items:
        cells = table.add_row().cells
        cells[0].text = item.name
        cells[1].text = str(item.count)

    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def to_pdf(items: Sequence[ShoppingListItem], title: str) -> bytes:
    """Title followed by an Item/Count table."""
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=letter,
        leftMargin=PDF_MARGIN,
        rightMargin=PDF_MARGIN,
        topMargin=PDF_MARGIN,
        bottomMargin=PDF_MARGIN,
        title=title,
    )
    styles = getSampleStyleSheet()
    title_style = styles["Title"]
    title_style.fontName = PDF_TITLE_FONT
    title_style.fontSize = PDF_TITLE_SIZE

    rows: list[list[str]] = [list(PDF_TABLE_HEADER)]
    rows.extend([item.name, str(item.count)] for item in items)

    table = Table(rows, repeatRows=1, hAlign="LEFT")
    table.setStyle(
        TableStyle(
            [
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                ("ALIGN", (1, 0), (1, -1), "RIGHT"),
            ]
        )
    )

    doc.build([Paragraph(escape(title), title_style), Spacer(1, 12), table])
    return buffer.getvalue()


def item_label(item: ShoppingListItem) -> str:
    """Text shown for an item: the name, with ``(xN)`` when N > 1."""
    if item.count > 1:
        return f"{item.name} (x{item.count})"
    return item.name


def to_png(
    items: Sequence[ShoppingListItem],
    title: str,
    *,
    width: int = 640,
    font_size: int = 18,
) -> bytes:
    """Raster snapshot: the title, then one line per item."""
    title_font = ImageFont.load_default(size=font_size + 6)
    body_font = ImageFont.load_default(size=font_size)

    lines = [(title, title_font)] + [(item_label(item), body_font) for item in items]
    line_heights = [
        _text_height(text, font) + IMAGE_LINE_SPACING for text, font in lines
    ]
    height = IMAGE_PADDING * 2 + sum(line_heights)

    image = Image.new("RGB", (width, height), IMAGE_BACKGROUND)
    draw = ImageDraw.Draw(image)
    y = IMAGE_PADDING
    for (text, font), line_height in zip(lines, line_heights, strict=True):
        draw.text((IMAGE_PADDING, y), text, font=font, fill=IMAGE_FOREGROUND)
        y += line_height

    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def _text_height(text: str, font: ImageFont.ImageFont | ImageFont.FreeTypeFont) -> int:
    _, top, _, bottom = font.getbbox(text or " ")
    return max(bottom - top, 1)


class ShoppingListExporter:
    """Render shopping list items in any supported format."""

    def __init__(self, settings: ExportSettings) -> None:
        self._settings = settings

    def filename(self, fmt: ExportFormat, list_id: str | None = None) -> str:
        """``shopping_list.<ext>``, or ``shopping_list_<id>.<ext>`` for a saved list."""
        stem = self._settings.filename_stem
        if list_id is not None:
            stem = f"{stem}_{list_id}"
        return f"{stem}.{fmt.value}"

    def export(
        self,
        items: Sequence[ShoppingListItem],
        fmt: ExportFormat,
        *,
        list_id: str | None = None,
    ) -> ExportResult:
        title = self._settings.title
        match fmt:
            case ExportFormat.CSV:
                content = to_csv(items)
            case ExportFormat.XLSX:
                content = to_xlsx(items)
            case ExportFormat.DOCX:
                content = to_docx(items, title)
            case ExportFormat.PDF:
                content = to_pdf(items, title)
            case ExportFormat.PNG:
                content = to_png(
                    items,
                    title,
                    width=self._settings.image_width,
                    font_size=self._settings.image_font_size,
                )

        EXPORTS_TOTAL.labels(format=fmt.value).inc()
        logger.debug(
            "Exported shopping list",
            format=fmt.value,
            items=len(items),
            size=len(content),
        )
        return ExportResult(
            content=content,
            media_type=fmt.media_type,
            filename=self.filename(fmt, list_id),
        )
