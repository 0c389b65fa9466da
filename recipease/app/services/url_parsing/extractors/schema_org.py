"""Schema.org JSON-LD recipe discovery."""

import json
import logging
import re
from typing import Any, Iterable, Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

LD_JSON_TYPE = re.compile(r"application/ld\+json", re.I)


def is_recipe_type(obj: Any) -> bool:
    """True when ``obj`` is a dict whose ``@type`` is, or includes, ``Recipe``."""
    if not isinstance(obj, dict):
        return False
    obj_type = obj.get("@type")
    types = obj_type if isinstance(obj_type, list) else [obj_type]
    return any(isinstance(t, str) and t.strip().lower() == "recipe" for t in types)


def _candidates(data: Any) -> Iterable[Any]:
    if isinstance(data, list):
        for item in data:
            yield from _candidates(item)
        return
    if not isinstance(data, dict):
        return
    yield data
    graph = data.get("@graph")
    if isinstance(graph, list):
        yield from graph


def find_recipe_json_ld(soup: BeautifulSoup) -> Optional[dict]:
    """Return the first JSON-LD ``Recipe`` object in document order.

    Blocks that fail to parse are skipped. ``@graph`` arrays are searched too.
    """
    scripts = soup.find_all("script", attrs={"type": LD_JSON_TYPE})
    for idx, script in enumerate(scripts):
        raw_json = script.string or script.get_text()
        if not raw_json or not raw_json.strip():
            continue
        try:
            data = json.loads(raw_json)
        except json.JSONDecodeError as exc:
            logger.debug("JSON-LD block %d failed to parse: %s", idx, exc)
            continue

        for candidate in _candidates(data):
            if is_recipe_type(candidate):
                logger.info("Found JSON-LD Recipe in block %d", idx)
                return candidate
    return None
