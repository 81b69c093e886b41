"""Field extractors: turn the elements matched by a query into typed values."""
import logging
import re
from typing import List, Optional

from bs4 import Tag as Element
from soupsieve import SoupSieve

from ao3work.errors import ElementNotFound, InvalidFormat, NoItemsFound
from ao3work.schemas import Chapter, Tag

logger = logging.getLogger(__name__)

# The archive groups digits with commas ("12,345")
THOUSANDS_SEPARATORS = re.compile(r",")
DIGITS = re.compile(r"[0-9]+")


def element_text(element: Element) -> str:
    """Concatenated descendant text of an element, trimmed."""
    return element.get_text().strip()


def _first(document: Element, query: SoupSieve) -> Optional[Element]:
    return query.select_one(document)


def extract_text(document: Element, query: SoupSieve, field: str) -> str:
    """
    Extract the text of the first element matching ``query``.

    Args:
        document: Parsed page
        query: Compiled query for the field
        field: Field name reported in errors

    Returns:
        Trimmed text content

    Raises:
        ElementNotFound: if nothing matches
    """
    element = _first(document, query)
    if element is None:
        raise ElementNotFound(field)
    return element_text(element)


def parse_count(raw: str, field: str) -> int:
    """
    Parse a displayed count such as ``"12,345"``.

    Separators are stripped; anything else that is not an ASCII digit makes
    the value invalid.
    """
    cleaned = THOUSANDS_SEPARATORS.sub("", raw)
    if not DIGITS.fullmatch(cleaned):
        raise InvalidFormat(field, raw)
    return int(cleaned)


def extract_integer(document: Element, query: SoupSieve, field: str) -> int:
    """
    Extract a non-negative integer from the first matching element.

    A missing element is reported as ``InvalidFormat`` with ``raw=None`` so
    callers can still tell it apart from malformed text.
    """
    element = _first(document, query)
    if element is None:
        raise InvalidFormat(field)
    return parse_count(element_text(element), field)


def extract_tags(
    document: Element,
    query: SoupSieve,
    field: str,
    link_attribute: str = "href",
) -> List[Tag]:
    """
    Extract every matching link as a Tag, in document order.

    Elements without a link are skipped. An empty result is an error: every
    work carries at least one tag of each kind.

    Raises:
        NoItemsFound: if no element with a link matches
    """
    tags = []
    for element in query.select(document):
        link = element.get(link_attribute)
        if not link:
            logger.debug(f"Skipping {field} element without {link_attribute}")
            continue
        tags.append(Tag(name=element_text(element), link=link))

    if not tags:
        raise NoItemsFound(field)
    return tags


def extract_chapters(
    document: Element,
    query: SoupSieve,
    field: str,
    id_attribute: str = "value",
) -> List[Chapter]:
    """
    Extract the chapter menu options.

    Single-chapter works have no menu, so an empty list is a valid result.
    """
    chapters = []
    for element in query.select(document):
        chapter_id = element.get(id_attribute)
        if chapter_id is None:
            logger.debug(f"Skipping {field} option without {id_attribute}")
            continue
        chapters.append(Chapter(name=element_text(element), id=chapter_id))
    return chapters
