"""Import a recipe suggestion from an arbitrary web page.

Validate URL -> fetch page -> extract structured data -> build prompt ->
call model -> normalize. Each stage fails fast; every failure is reported as
one ``ImportResult`` error code and nothing partial reaches the caller.
"""

import logging
from typing import Any

from recipease.app.core.config import get_settings
from recipease.app.services import llm_client
from recipease.app.services.url_parsing.errors import (
    GENERIC_FAILURE_MESSAGE,
    MissingCredentialError,
    MissingUrlError,
    ModelAuthError,
    ModelsExhaustedError,
    ModelUnavailableError,
    RecipeImportError,
)
from recipease.app.services.url_parsing.extractors import extract_structured_data
from recipease.app.services.url_parsing.html_fetcher import fetch_page
from recipease.app.services.url_parsing.models import ImportedRecipe, ImportResult
from recipease.app.services.url_parsing.normalizer import normalize_model_output
from recipease.app.services.url_parsing.prompt_builder import (
    SYSTEM_PROMPT,
    build_extraction_prompt,
)
from recipease.app.services.url_parsing.url_guard import validate_import_url

logger = logging.getLogger(__name__)


async def _complete(prompt: str) -> str:
    try:
        return await llm_client.complete(prompt, system_prompt=SYSTEM_PROMPT)
    except llm_client.LLMConfigurationError as exc:
        logger.error("Model call not configured: %s", exc)
        raise MissingCredentialError() from exc
    except llm_client.AllModelsExhaustedError as exc:
        logger.warning("%s", exc)
        raise ModelsExhaustedError() from exc
    except llm_client.LLMAuthError as exc:
        logger.error("Model provider auth failed: %s", exc)
        raise ModelAuthError() from exc
    except llm_client.LLMError as exc:
        logger.error("Model call failed: %s", exc)
        raise ModelUnavailableError() from exc


async def run_import(url: Any) -> ImportedRecipe:
    """Run the pipeline for ``url``; raises ``RecipeImportError`` on any stage failure."""
    if not isinstance(url, str) or not url.strip():
        raise MissingUrlError()
    parsed = validate_import_url(url)

    if not get_settings().llm_api_key:
        logger.error("LLM_API_KEY is not configured; refusing import")
        raise MissingCredentialError()

    page = await fetch_page(parsed.geturl())
    extracted = extract_structured_data(page.html_body)
    prompt = build_extraction_prompt(extracted.hint, extracted.cleaned_text)
    raw_text = await _complete(prompt)
    logger.debug("Model raw content (truncated) for url=%s: %s", page.final_url, raw_text[:1000])
    return normalize_model_output(raw_text, extracted.hint.og_image_url)


async def import_recipe(url: Any) -> ImportResult:
    """Import ``url`` and report the outcome; never raises."""
    try:
        recipe = await run_import(url)
    except RecipeImportError as exc:
        logger.info("Recipe import failed for %s: %s", url, exc.error_code)
        return ImportResult(
            success=False,
            status_code=exc.status_code,
            error_code=exc.error_code,
            error_message=exc.message,
        )
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected error importing %s", url)
        return ImportResult(
            success=False,
            status_code=500,
            error_code="unexpected",
            error_message=GENERIC_FAILURE_MESSAGE,
        )

    logger.info(
        "Imported recipe %r from %s (%d ingredients, %d steps)",
        recipe.title,
        url,
        len(recipe.ingredients),
        len(recipe.steps),
    )
    return ImportResult(success=True, recipe=recipe)
