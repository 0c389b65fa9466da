"""Deterministic extraction prompt for the recipe model."""

import json
from typing import List

from recipease.app.services.url_parsing.constants import (
    CLEANED_TEXT_LIMIT,
    MAX_DESCRIPTION_LENGTH,
    MAX_INGREDIENTS,
    MAX_STEPS,
    MAX_TAGS,
    SPLIT_JSON_LD_LIMIT,
    SPLIT_TEXT_LIMIT,
    TAG_VOCABULARY,
    TARGET_LANGUAGE,
)
from recipease.app.services.url_parsing.models import StructuredHint
from recipease.app.services.url_parsing.parsing_utils import truncate

SYSTEM_PROMPT = (
    "You extract recipes from web pages. Respond with a single JSON object and nothing else."
)

OUTPUT_SCHEMA = (
    '{"title": string, "description": string|null, "imageUrl": string|null, '
    '"tags": [string], "ingredients": [string], "steps": [string]}'
)

EXAMPLE_INPUT = (
    "Grandma's BEST Ever Banana Bread Recipe | Sunny Kitchen Blog. "
    "Ingredients: 3 ripe bananas, 1/3 cup melted butter, 3/4 cup sugar, 1 egg, "
    "1 tsp baking soda, 1 1/2 cups flour. Mash the bananas, stir in the butter. "
    "Mix in sugar, egg and baking soda. Add the flour. Bake 60 minutes at 175C."
)

EXAMPLE_OUTPUT = {
    "title": "Banana Bread",
    "description": "Moist banana bread made with ripe bananas and melted butter.",
    "imageUrl": None,
    "tags": ["baking", "breakfast", "american"],
    "ingredients": [
        "3 ripe bananas",
        "1/3 cup melted butter",
        "3/4 cup sugar",
        "1 egg",
        "1 tsp baking soda",
        "1 1/2 cups flour",
    ],
    "steps": [
        "Mash the bananas and stir in the melted butter.",
        "Mix in the sugar, egg and baking soda.",
        "Add the flour and stir until just combined.",
        "Bake for 60 minutes at 175C.",
    ],
}


def _instructions() -> str:
    tags = ", ".join(TAG_VOCABULARY)
    return "\n".join(
        [
            "Extract the recipe from the page content below.",
            "",
            "Return ONLY valid JSON matching this schema:",
            OUTPUT_SCHEMA,
            "",
            "Rules:",
            f"- Write every free-text field in {TARGET_LANGUAGE}, translating if the page uses another language.",
            "- Title: the dish name only. Remove the words 'recipe' or 'rezept', site names, "
            "anything after a ':', '-' or '|' separator, and marketing words such as "
            "'best', 'ultimate', 'authentic', 'original', 'perfect', 'easy'. At most 6 words.",
            f"- Description: one or two sentences, at most {MAX_DESCRIPTION_LENGTH} characters, or null.",
            f"- Tags: at most {MAX_TAGS}, chosen ONLY from: {tags}.",
            f"- Ingredients: one entry per ingredient with its quantity, at most {MAX_INGREDIENTS}, in page order.",
            f"- Steps: one entry per instruction, at most {MAX_STEPS}, in page order.",
            "- Do not invent ingredients or steps that are not on the page.",
            "",
            "Example input:",
            EXAMPLE_INPUT,
            "Example output:",
            json.dumps(EXAMPLE_OUTPUT, ensure_ascii=False),
        ]
    )


def build_extraction_prompt(hint: StructuredHint, cleaned_text: str) -> str:
    """Assemble the user prompt from the structured hint and the cleaned page text.

    With a JSON-LD fragment both inputs share the budget (3000 + 3000 chars);
    otherwise the cleaned text gets the full 6000.
    """
    parts: List[str] = [_instructions(), ""]
    if hint.recipe_json_ld:
        parts.append("Structured recipe data (JSON-LD):")
        parts.append(truncate(hint.recipe_json_ld, SPLIT_JSON_LD_LIMIT))
        parts.append("")
        parts.append("Page text:")
        parts.append(truncate(cleaned_text, SPLIT_TEXT_LIMIT))
    else:
        parts.append("Page text:")
        parts.append(truncate(cleaned_text, CLEANED_TEXT_LIMIT))
    return "\n".join(parts)
