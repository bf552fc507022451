"""Unit tests for shopping list export serializers.

Tests cover:
- Exact CSV output
- XLSX, DOCX, PDF and PNG content read back with their libraries
- Filenames, media types and the export counter
"""

from __future__ import annotations

from io import BytesIO

import pandas as pd
import pytest
from docx import Document
from PIL import Image
from prometheus_client import REGISTRY

from app.core.config.settings import ExportSettings
from app.schemas.enums import ExportFormat
from app.schemas.shopping import ShoppingListItem
from app.services.shopping.exporters import (
    ShoppingListExporter,
    item_label,
    to_csv,
    to_docx,
    to_pdf,
    to_png,
    to_xlsx,
)


pytestmark = pytest.mark.unit


@pytest.fixture
def items() -> list[ShoppingListItem]:
    return [
        ShoppingListItem(name="milk", count=2),
        ShoppingListItem(name="bread", count=1),
    ]


@pytest.fixture
def exporter() -> ShoppingListExporter:
    return ShoppingListExporter(ExportSettings())


class TestCsv:
    """Tests for to_csv."""

    def test_exact_output(self, items: list[ShoppingListItem]) -> None:
        """Should join name,count lines with no header or trailing newline."""
        assert to_csv(items) == b"milk,2\nbread,1"

    def test_empty_list(self) -> None:
        assert to_csv([]) == b""

    def test_commas_are_not_escaped(self) -> None:
        items = [ShoppingListItem(name="salt, coarse", count=1)]

        assert to_csv(items) == b"salt, coarse,1"

    def test_utf8(self) -> None:
        items = [ShoppingListItem(name="crème fraîche", count=1)]

        assert to_csv(items).decode("utf-8") == "crème fraîche,1"


class TestXlsx:
    """Tests for to_xlsx."""

    def test_single_sheet_with_header(self, items: list[ShoppingListItem]) -> None:
        content = to_xlsx(items)

        sheets = pd.read_excel(BytesIO(content), sheet_name=None)
        assert list(sheets) == ["Shopping List"]
        frame = sheets["Shopping List"]
        assert list(frame.columns) == ["name", "count"]
        assert frame.to_dict("records") == [
            {"name": "milk", "count": 2},
            {"name": "bread", "count": 1},
        ]

    def test_empty_list_keeps_header(self) -> None:
        frame = pd.read_excel(BytesIO(to_xlsx([])))

        assert list(frame.columns) == ["name", "count"]
        assert frame.empty


class TestDocx:
    """Tests for to_docx."""

    def test_title_then_table(self, items: list[ShoppingListItem]) -> None:
        document = Document(BytesIO(to_docx(items, "Shopping List")))

        assert document.paragraphs[0].text == "Shopping List"
        assert len(document.tables) == 1
        rows = [[cell.text for cell in row.cells] for row in document.tables[0].rows]
        assert rows == [["milk", "2"], ["bread", "1"]]

    def test_empty_list_has_empty_table(self) -> None:
        document = Document(BytesIO(to_docx([], "Shopping List")))

        assert len(document.tables[0].rows) == 0


class TestPdf:
    """Tests for to_pdf."""

    def test_produces_pdf(self, items: list[ShoppingListItem]) -> None:
        content = to_pdf(items, "Shopping List")

        assert content.startswith(b"%PDF-")
        assert content.rstrip().endswith(b"%%EOF")

    def test_title_with_markup_characters(self) -> None:
        """Titles are escaped before being laid out as a paragraph."""
        content = to_pdf([], "Fish & <Chips>")

        assert content.startswith(b"%PDF-")


class TestPng:
    """Tests for to_png and item_label."""

    def test_label_shows_count_above_one(self) -> None:
        assert item_label(ShoppingListItem(name="milk", count=2)) == "milk (x2)"
        assert item_label(ShoppingListItem(name="bread", count=1)) == "bread"

    def test_produces_png_of_configured_width(
        self, items: list[ShoppingListItem]
    ) -> None:
        content = to_png(items, "Shopping List", width=400)

        assert content.startswith(b"\x89PNG\r\n\x1a\n")
        with Image.open(BytesIO(content)) as image:
            assert image.format == "PNG"
            assert image.width == 400

    def test_height_grows_with_items(self, items: list[ShoppingListItem]) -> None:
        with Image.open(BytesIO(to_png([], "Shopping List"))) as empty:
            empty_height = empty.height
        with Image.open(BytesIO(to_png(items, "Shopping List"))) as filled:
            filled_height = filled.height

        assert filled_height > empty_height


class TestShoppingListExporter:
    """Tests for ShoppingListExporter."""

    def test_filename_for_current_list(self, exporter: ShoppingListExporter) -> None:
        assert exporter.filename(ExportFormat.CSV) == "shopping_list.csv"

    def test_filename_for_saved_list(self, exporter: ShoppingListExporter) -> None:
        assert exporter.filename(ExportFormat.PDF, "abc123") == "shopping_list_abc123.pdf"

    def test_filename_stem_from_settings(self) -> None:
        exporter = ShoppingListExporter(ExportSettings(filename_stem="groceries"))

        assert exporter.filename(ExportFormat.XLSX) == "groceries.xlsx"

    def test_export_csv(
        self, exporter: ShoppingListExporter, items: list[ShoppingListItem]
    ) -> None:
        result = exporter.export(items, ExportFormat.CSV)

        assert result.content == b"milk,2\nbread,1"
        assert result.media_type == "text/csv; charset=utf-8"
        assert result.filename == "shopping_list.csv"

    @pytest.mark.parametrize(
        ("fmt", "magic"),
        [
            (ExportFormat.XLSX, b"PK"),
            (ExportFormat.DOCX, b"PK"),
            (ExportFormat.PDF, b"%PDF"),
            (ExportFormat.PNG, b"\x89PNG"),
        ],
    )
    def test_export_binary_formats(
        self,
        exporter: ShoppingListExporter,
        items: list[ShoppingListItem],
        fmt: ExportFormat,
        magic: bytes,
    ) -> None:
        result = exporter.export(items, fmt, list_id="L1")

        assert result.content.startswith(magic)
        assert result.media_type == fmt.media_type
        assert result.filename == f"shopping_list_L1.{fmt.value}"

    def test_export_counts_by_format(
        self, exporter: ShoppingListExporter, items: list[ShoppingListItem]
    ) -> None:
        labels = {"format": "csv"}
        before = REGISTRY.get_sample_value("shopping_list_exports_total", labels) or 0

        exporter.export(items, ExportFormat.CSV)

        after = REGISTRY.get_sample_value("shopping_list_exports_total", labels)
        assert after == before + 1
