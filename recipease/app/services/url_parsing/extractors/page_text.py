"""Plain-text rendition of a page for the model prompt."""

from bs4 import BeautifulSoup

from recipease.app.services.url_parsing.constants import CLEANED_TEXT_LIMIT
from recipease.app.services.url_parsing.parsing_utils import clean_text, truncate

STRIPPED_TAGS = ("script", "style", "noscript")


def extract_page_text(soup: BeautifulSoup, limit: int = CLEANED_TEXT_LIMIT) -> str:
    """Drop script/style blocks and all markup, collapse whitespace, truncate.

    Mutates ``soup``; run it after any extraction that needs the scripts.
    """
    for tag in soup.find_all(STRIPPED_TAGS):
        tag.decompose()
    return truncate(clean_text(soup.get_text(" ")), limit)
