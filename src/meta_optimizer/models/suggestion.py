"""Pydantic model for the optimizer's structured reply."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SuggestionResult(BaseModel):
    """One successful optimization: analysis plus rewritten title and description."""

    analysis: str
    optimized_title: str = Field(alias="optimizedTitle")
    optimized_description: str = Field(alias="optimizedDescription")

    model_config = {"populate_by_name": True, "frozen": True}
