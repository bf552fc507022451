"""Spoonacular response payloads.

Only the fields the service reads are declared; everything else the API
sends is ignored.
"""

from __future__ import annotations

from pydantic import Field

from app.schemas.base import DownstreamResponse


class SpoonacularSearchResult(DownstreamResponse):
    id: int
    title: str
    image: str | None = None


class SpoonacularSearchResponse(DownstreamResponse):
    """Body of ``GET /recipes/complexSearch``."""

    results: list[SpoonacularSearchResult] = Field(default_factory=list)
    offset: int = 0
    number: int = 0
    total_results: int = 0


class SpoonacularIngredient(DownstreamResponse):
    name: str = ""
    original: str = ""


class SpoonacularStep(DownstreamResponse):
    number: int = 0
    step: str = ""


class SpoonacularInstructionBlock(DownstreamResponse):
    name: str = ""
    steps: list[SpoonacularStep] = Field(default_factory=list)


class SpoonacularRecipeInformation(DownstreamResponse):
    """Body of ``GET /recipes/{id}/information``."""

    id: int
    title: str
    image: str | None = None
    ready_in_minutes: int | None = None
    servings: int | None = None
    source_url: str | None = None
    extended_ingredients: list[SpoonacularIngredient] = Field(default_factory=list)
    analyzed_instructions: list[SpoonacularInstructionBlock] = Field(
        default_factory=list
    )
    instructions: str | None = None
