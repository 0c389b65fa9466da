"""Chat-completion client for recipe extraction.

Candidate models are tried in priority order. Only a rate-limit response moves
on to the next candidate; any other failure aborts the call.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from recipease.app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Base class for model call failures."""


class LLMConfigurationError(LLMError):
    pass


class LLMRateLimitError(LLMError):
    pass


class LLMAuthError(LLMError):
    pass


class LLMUnavailableError(LLMError):
    pass


class LLMTimeoutError(LLMError):
    pass


class AllModelsExhaustedError(LLMError):
    def __init__(self, models: List[str]):
        self.models = models
        super().__init__(f"All candidate models were rate limited: {', '.join(models)}")


def should_fallback(exc: Exception) -> bool:
    """Only rate-limit failures advance to the next candidate model."""
    return isinstance(exc, LLMRateLimitError)


def _headers(api_key: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


def _extract_content(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if isinstance(choices, list) and choices:
        choice = choices[0]
        if isinstance(choice, dict):
            message = choice.get("message") or {}
            if isinstance(message, dict):
                content = message.get("content")
                if isinstance(content, str):
                    return content
    return None


async def _call_model(
    client: httpx.AsyncClient,
    settings: Settings,
    model: str,
    system_prompt: str,
    prompt: str,
) -> str:
    payload = {
        "model": model,
        "temperature": settings.llm_temperature,
        "max_tokens": settings.llm_max_tokens,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt},
        ],
        "stream": False,
    }
    url = f"{settings.llm_base_url.rstrip('/')}/chat/completions"
    try:
        response = await client.post(url, json=payload, headers=_headers(settings.llm_api_key or ""))
    except httpx.TimeoutException as exc:
        raise LLMTimeoutError(f"Model {model} timed out") from exc
    except httpx.HTTPError as exc:
        raise LLMUnavailableError(f"Model {model} request failed: {exc}") from exc

    if response.status_code == 429:
        raise LLMRateLimitError(f"Model {model} is rate limited")
    if response.status_code in (401, 403):
        raise LLMAuthError(f"Model provider rejected credentials (status {response.status_code})")
    if response.status_code >= 400:
        logger.error(
            "Model %s returned status %s: %s", model, response.status_code, response.text[:500]
        )
        raise LLMUnavailableError(f"Model {model} returned status {response.status_code}")

    try:
        data = response.json()
    except ValueError as exc:
        raise LLMUnavailableError(f"Model {model} returned a non-JSON body") from exc

    content = _extract_content(data)
    if content is None:
        raise LLMUnavailableError(f"Model {model} response missing assistant content")
    return content


async def complete(prompt: str, system_prompt: str) -> str:
    """Run ``prompt`` against the configured candidates and return the raw reply text."""
    settings = get_settings()
    if not settings.llm_api_key:
        raise LLMConfigurationError("LLM_API_KEY is not configured")
    candidates = settings.llm_model_candidates
    if not candidates:
        raise LLMConfigurationError("LLM_MODELS is empty")

    timeout = httpx.Timeout(settings.llm_timeout_seconds, connect=10.0)
    async with httpx.AsyncClient(timeout=timeout) as client:
        for model in candidates:
            try:
                content = await asyncio.wait_for(
                    _call_model(client, settings, model, system_prompt, prompt),
                    timeout=settings.llm_timeout_seconds,
                )
            except asyncio.TimeoutError as exc:
                raise LLMTimeoutError(f"Model {model} timed out") from exc
            except LLMError as exc:
                if should_fallback(exc):
                    logger.warning("Model %s rate limited; trying next candidate", model)
                    continue
                raise
            logger.info("Model %s returned %d chars", model, len(content))
            return content

    raise AllModelsExhaustedError(candidates)
