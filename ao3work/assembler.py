"""Assemble a Work from a parsed work page."""
import logging
from typing import Optional

from bs4 import BeautifulSoup
from bs4 import Tag as Element

from ao3work.errors import NoItemsFound
from ao3work.extractors import extract_chapters, extract_integer, extract_tags, extract_text
from ao3work.inline import parse_paragraph
from ao3work.queries import QueryRegistry, get_query_registry
from ao3work.schemas import Work

logger = logging.getLogger(__name__)

TEXT_FIELDS = ('title', 'author', 'date_published', 'date_updated', 'language')
COUNT_FIELDS = ('word_count', 'hit_count')
TAG_FIELDS = ('tags', 'characters', 'warnings', 'relationships', 'ratings')


def parse_document(page_text: str) -> BeautifulSoup:
    """Parse raw page markup with lxml."""
    return BeautifulSoup(page_text, 'lxml')


def assemble_work(document: Element, registry: Optional[QueryRegistry] = None) -> Work:
    """
    Run every extractor over ``document`` and build the Work.

    Fields are extracted in a fixed order and the first failure propagates
    unchanged, so no partially filled Work ever escapes.

    Args:
        document: Parsed page; only read, never modified
        registry: Query registry, the shared one by default

    Returns:
        The assembled Work

    Raises:
        WorkError: the first extraction failure
    """
    registry = registry or get_query_registry()
    fields = {}

    for field in TEXT_FIELDS:
        fields[field] = extract_text(document, registry.get(field), field)
        logger.debug(f"{field}: {fields[field]!r}")

    for field in COUNT_FIELDS:
        fields[field] = extract_integer(document, registry.get(field), field)
        logger.debug(f"{field}: {fields[field]}")

    for field in TAG_FIELDS:
        fields[field] = extract_tags(
            document, registry.get(field), field, registry.TAG_LINK_ATTRIBUTE
        )
        logger.debug(f"{field}: {len(fields[field])} tags")

    fields['chapters'] = extract_chapters(
        document, registry.get('chapters'), 'chapters', registry.CHAPTER_ID_ATTRIBUTE
    )

    paragraphs = registry.get('body').select(document)
    if not paragraphs:
        raise NoItemsFound('body')
    fields['body'] = [parse_paragraph(paragraph) for paragraph in paragraphs]

    work = Work(**fields)
    logger.info(
        f"Extracted work: {work.title} by {work.author} "
        f"({work.word_count} words, {len(work.chapters)} chapters, "
        f"{len(work.body)} paragraphs)"
    )
    return work


def parse_work(page_text: str, registry: Optional[QueryRegistry] = None) -> Work:
    """Parse raw page markup into a Work."""
    return assemble_work(parse_document(page_text), registry)
