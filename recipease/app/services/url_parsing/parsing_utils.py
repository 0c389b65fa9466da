"""General parsing utilities for recipe extraction."""

import re
from typing import Any, List, Optional


def clean_text(text: str) -> str:
    """Normalize whitespace in text."""
    return re.sub(r"\s+", " ", text or "").strip()


def truncate(text: str, limit: int) -> str:
    return (text or "")[:limit]


def extract_image(value: Any) -> Optional[str]:
    """Extract an image URL from the schema.org image shapes (string, list, ImageObject)."""
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, dict):
        return extract_image(value.get("url") or value.get("contentUrl"))
    if isinstance(value, list):
        for item in value:
            found = extract_image(item)
            if found:
                return found
    return None


def string_items(value: Any, limit: int) -> List[str]:
    """Keep only non-empty string entries of a list, in order, capped at ``limit``."""
    if not isinstance(value, list):
        return []
    items: List[str] = []
    for entry in value:
        if not isinstance(entry, str):
            continue
        cleaned = entry.strip()
        if cleaned:
            items.append(cleaned)
        if len(items) >= limit:
            break
    return items
