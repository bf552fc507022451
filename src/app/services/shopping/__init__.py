"""Shopping list service module.

Derives ingredients from selected recipes, keeps the count-keyed shopping
list and the favorites, and exports the list.
"""

from app.services.shopping.exporters import ExportResult, ShoppingListExporter
from app.services.shopping.service import ShoppingListService
from app.services.shopping.state import ShoppingListState


__all__ = [
    "ExportResult",
    "ShoppingListExporter",
    "ShoppingListService",
    "ShoppingListState",
]
