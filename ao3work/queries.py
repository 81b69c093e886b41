"""Registry of the structural queries that locate each field on a work page."""
import logging
from functools import lru_cache
from typing import Dict

import soupsieve
from soupsieve import SoupSieve

logger = logging.getLogger(__name__)

_META = "dl.work.meta.group"


class QueryRegistry:
    """
    Mapping from logical field name to a compiled CSS query.

    The query table is fixed. Compilation happens once in ``__init__`` so a
    malformed selector fails at start-up with ``soupsieve.SelectorSyntaxError``
    instead of surfacing as an extraction error.
    """

    FIELD_QUERY_MAP = {
        'title': '#workskin .preface.group h2.title.heading',
        'author': '#workskin .preface.group h3.byline.heading',
        'date_published': f'{_META} dd.stats dd.published',
        'date_updated': f'{_META} dd.stats dd.status',
        'language': f'{_META} dd.language',
        'word_count': f'{_META} dd.stats dd.words',
        'hit_count': f'{_META} dd.stats dd.hits',
        'tags': f'{_META} dd.freeform.tags a.tag',
        'characters': f'{_META} dd.character.tags a.tag',
        'warnings': f'{_META} dd.warning.tags a.tag',
        'relationships': f'{_META} dd.relationship.tags a.tag',
        'ratings': f'{_META} dd.rating.tags a.tag',
        'chapters': '#chapter_index select option',
        'body': '#chapters .userstuff > p',
    }

    # Attribute holding the link of a tag / the id of a chapter option
    TAG_LINK_ATTRIBUTE = 'href'
    CHAPTER_ID_ATTRIBUTE = 'value'

    def __init__(self, queries: Dict[str, str] = None):
        source = self.FIELD_QUERY_MAP if queries is None else queries
        self._compiled: Dict[str, SoupSieve] = {
            field: soupsieve.compile(query) for field, query in source.items()
        }
        logger.debug(f"Compiled {len(self._compiled)} field queries")

    def get(self, field: str) -> SoupSieve:
        """
        Return the compiled query for a field.

        Raises:
            KeyError: if no query is registered under ``field``
        """
        return self._compiled[field]

    def __contains__(self, field: str) -> bool:
        return field in self._compiled

    @property
    def fields(self) -> tuple:
        return tuple(self._compiled)


@lru_cache(maxsize=None)
def get_query_registry() -> QueryRegistry:
    """Build the process-wide registry on first use and reuse it afterwards."""
    return QueryRegistry()
