"""Coerce raw model output into an ``ImportedRecipe``.

The model reply is untrusted: every field is type-checked on its own and
anything of the wrong shape is dropped rather than trusted.
"""

import json
import logging
import re
from typing import Any, List, Optional

from recipease.app.services.url_parsing.constants import (
    MAX_DESCRIPTION_LENGTH,
    MAX_INGREDIENTS,
    MAX_STEPS,
    MAX_TAGS,
    MAX_TITLE_LENGTH,
    TAG_SET,
)
from recipease.app.services.url_parsing.errors import (
    IncompleteRecipeError,
    UnparsableOutputError,
)
from recipease.app.services.url_parsing.models import ImportedRecipe
from recipease.app.services.url_parsing.parsing_utils import clean_text, string_items

logger = logging.getLogger(__name__)

_LEADING_FENCE = re.compile(r"^```(?:json)?[ \t]*\n?", re.I)
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```$")
_GENERIC_WORDS = re.compile(r"\b(?:recipes?|rezepte?|recette|receta|ricetta)\b", re.I)
_SECTION_SEPARATOR = re.compile(r"(?:\s*[:|]|\s+[-–—])\s+")
_MARKETING_PREFIX = re.compile(
    r"^(?:(?:the|my|our)\s+)?(?:(?:original|best|ultimate|authentic|perfect|easy)(?:\s+ever)?(?:[\s,!-]+|$))+",
    re.I,
)


def strip_code_fence(raw: str) -> str:
    """Remove a leading ```json fence and a trailing ``` fence, if present."""
    text = (raw or "").strip()
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def parse_model_json(raw: str) -> dict:
    text = strip_code_fence(raw)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("Model output is not valid JSON: %s (first 200 chars: %s)", exc, text[:200])
        raise UnparsableOutputError() from exc
    if not isinstance(data, dict):
        logger.warning("Model output is JSON but not an object: %s", type(data).__name__)
        raise UnparsableOutputError()
    return data


def _strip_title_noise(segment: str) -> str:
    title = clean_text(_GENERIC_WORDS.sub(" ", segment))
    title = _MARKETING_PREFIX.sub("", title)
    return clean_text(title).strip(" -:|,")


def clean_title(value: Any) -> str:
    """Strip generic words, site sections and marketing prefixes.

    The title is split on section separators and the first section that still
    names something once the noise is gone wins, so both "Recipe: Lemon Pasta"
    and "Lemon Pasta | My Blog" become "Lemon Pasta".
    """
    if not isinstance(value, str):
        return ""
    for segment in _SECTION_SEPARATOR.split(clean_text(value)):
        title = _strip_title_noise(segment)
        if title:
            return title[:MAX_TITLE_LENGTH].strip()
    return ""


def clean_description(value: Any, title: str) -> str:
    if isinstance(value, str):
        description = clean_text(value)
        if description:
            return description[:MAX_DESCRIPTION_LENGTH].rstrip()
    return f"A homemade {title.lower()} recipe, ready to cook."[:MAX_DESCRIPTION_LENGTH]


def filter_tags(value: Any) -> List[str]:
    """Lowercase string tags and keep only those in the closed vocabulary, in order."""
    if not isinstance(value, list):
        return []
    tags: List[str] = []
    for entry in value:
        if not isinstance(entry, str):
            continue
        tag = entry.strip().lower()
        if tag in TAG_SET and tag not in tags:
            tags.append(tag)
        if len(tags) >= MAX_TAGS:
            break
    return tags


def normalize_model_output(raw_text: str, og_image_url: Optional[str]) -> ImportedRecipe:
    """Map the model reply onto the canonical recipe, or raise a typed failure.

    The page's own image hint always wins over anything the model suggests.
    """
    data = parse_model_json(raw_text)

    title = clean_title(data.get("title"))
    ingredients = string_items(data.get("ingredients"), MAX_INGREDIENTS)
    steps = string_items(data.get("steps"), MAX_STEPS)

    if not title or not ingredients or not steps:
        logger.warning(
            "Incomplete extraction: title=%s ingredients=%d steps=%d",
            bool(title),
            len(ingredients),
            len(steps),
        )
        raise IncompleteRecipeError()

    return ImportedRecipe(
        title=title,
        description=clean_description(data.get("description"), title),
        image_url=og_image_url,
        tags=filter_tags(data.get("tags")),
        ingredients=ingredients,
        steps=steps,
    )
