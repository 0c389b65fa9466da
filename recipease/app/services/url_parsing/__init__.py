"""Recipe import from URLs.

Guards the URL, fetches the page, extracts og:image / JSON-LD hints and
plain text, builds the model prompt, and normalizes the model's reply.
"""

from recipease.app.services.url_parsing.errors import RecipeImportError
from recipease.app.services.url_parsing.extractors import extract_structured_data
from recipease.app.services.url_parsing.html_fetcher import fetch_page
from recipease.app.services.url_parsing.models import (
    ExtractedPage,
    FetchedPage,
    ImportedRecipe,
    ImportRecipeRequest,
    ImportResult,
    StructuredHint,
)
from recipease.app.services.url_parsing.normalizer import normalize_model_output
from recipease.app.services.url_parsing.prompt_builder import build_extraction_prompt
from recipease.app.services.url_parsing.url_guard import is_blocked_host, validate_import_url

__all__ = [
    # Models
    "ExtractedPage",
    "FetchedPage",
    "ImportedRecipe",
    "ImportRecipeRequest",
    "ImportResult",
    "StructuredHint",
    # Errors
    "RecipeImportError",
    # Pipeline stages
    "build_extraction_prompt",
    "extract_structured_data",
    "fetch_page",
    "is_blocked_host",
    "normalize_model_output",
    "validate_import_url",
]
