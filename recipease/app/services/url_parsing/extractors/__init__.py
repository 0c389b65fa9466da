"""Best-effort structured data extraction from fetched HTML.

Each extraction attempt (og:image, JSON-LD, plain text) fails on its own;
a failure only means an empty hint, never an error for the caller.
"""

import json
import logging

from bs4 import BeautifulSoup

from recipease.app.services.url_parsing.extractors.open_graph import extract_og_image
from recipease.app.services.url_parsing.extractors.page_text import extract_page_text
from recipease.app.services.url_parsing.extractors.schema_org import (
    find_recipe_json_ld,
    is_recipe_type,
)
from recipease.app.services.url_parsing.models import ExtractedPage, StructuredHint
from recipease.app.services.url_parsing.parsing_utils import extract_image

logger = logging.getLogger(__name__)


def extract_structured_data(html: str) -> ExtractedPage:
    """Collect the og:image, the JSON-LD Recipe fragment and the cleaned page text."""
    try:
        soup = BeautifulSoup(html or "", "lxml")
    except Exception as exc:  # noqa: BLE001
        logger.warning("Unable to parse HTML: %s", exc)
        return ExtractedPage()

    hint = StructuredHint()
    try:
        hint.og_image_url = extract_og_image(soup)
    except Exception as exc:  # noqa: BLE001
        logger.warning("og:image extraction failed: %s", exc)

    try:
        recipe = find_recipe_json_ld(soup)
        if recipe is not None:
            hint.recipe_json_ld = json.dumps(recipe, ensure_ascii=False)
            if not hint.og_image_url:
                hint.og_image_url = extract_image(recipe.get("image"))
    except Exception as exc:  # noqa: BLE001
        logger.warning("JSON-LD extraction failed: %s", exc)

    cleaned_text = ""
    try:
        cleaned_text = extract_page_text(soup)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Page text extraction failed: %s", exc)

    logger.info(
        "Structured data: og_image=%s json_ld=%s text_chars=%d",
        bool(hint.og_image_url),
        bool(hint.recipe_json_ld),
        len(cleaned_text),
    )
    return ExtractedPage(hint=hint, cleaned_text=cleaned_text)


__all__ = [
    "extract_og_image",
    "extract_page_text",
    "extract_structured_data",
    "find_recipe_json_ld",
    "is_recipe_type",
]
