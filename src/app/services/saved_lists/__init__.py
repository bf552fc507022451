"""Saved shopping list service module."""

from app.services.saved_lists.service import SavedListService


__all__ = ["SavedListService"]
