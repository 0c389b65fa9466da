"""Pydantic models for the recipe import pipeline."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ImportRecipeRequest(BaseModel):
    """Inbound import request. ``url`` is checked by the pipeline, not by pydantic."""

    url: Any = None


class FetchedPage(BaseModel):
    """Raw page as returned by the fetcher; lives only for one import."""

    final_url: str
    html_body: str
    http_status: int
    truncated: bool = False


class StructuredHint(BaseModel):
    """Best-effort hints scraped from the page before the model call."""

    # Falls back to the JSON-LD image when the page has no og:image
    og_image_url: Optional[str] = None
    recipe_json_ld: Optional[str] = None


class ExtractedPage(BaseModel):
    """Structured hints plus the cleaned plain-text rendition of a page."""

    hint: StructuredHint = Field(default_factory=StructuredHint)
    cleaned_text: str = ""


class ImportedRecipe(BaseModel):
    """A complete, validated recipe suggestion returned to the caller."""

    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    ingredients: List[str] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImportResult(BaseModel):
    """Outcome of one import attempt."""

    success: bool
    recipe: Optional[ImportedRecipe] = None
    status_code: int = 200
    error_code: Optional[str] = None
    error_message: Optional[str] = None
