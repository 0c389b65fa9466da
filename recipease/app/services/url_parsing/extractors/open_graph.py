"""Open Graph preview image extraction."""

import re
from typing import Optional

from bs4 import BeautifulSoup

OG_IMAGE_PROPERTY = re.compile(r"^\s*og:image\s*$", re.I)


def extract_og_image(soup: BeautifulSoup) -> Optional[str]:
    """Return the content of the first ``<meta property="og:image">`` tag, if any."""
    for tag in soup.find_all("meta", attrs={"property": OG_IMAGE_PROPERTY}):
        content = (tag.get("content") or "").strip()
        if content:
            return content
    return None
