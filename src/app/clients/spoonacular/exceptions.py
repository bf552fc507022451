"""Spoonacular client exceptions.

These exceptions are caught by the endpoint layer and converted to
appropriate HTTP responses.
"""

from __future__ import annotations


class RecipeSearchError(Exception):
    """Base exception for recipe search errors."""


class RecipeSearchUnavailableError(RecipeSearchError):
    """Raised when Spoonacular cannot be used right now.

    This includes connection errors, timeouts, an exhausted quota and a
    missing API key.
    """


class RecipeSearchTimeoutError(RecipeSearchUnavailableError):
    """Raised when a request to Spoonacular times out."""


class RecipeSearchQuotaError(RecipeSearchUnavailableError):
    """Raised when Spoonacular answers 402 because the daily quota is used up."""


class RecipeSearchResponseError(RecipeSearchError):
    """Raised when Spoonacular returns an error response."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        super().__init__(message)


class RecipeSearchNotFoundError(RecipeSearchResponseError):
    """Raised when a recipe id is unknown to Spoonacular."""

    def __init__(self, message: str) -> None:
        super().__init__(status_code=404, message=message)
