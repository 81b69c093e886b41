"""Inline content parser for body paragraphs."""
import logging
from typing import Iterator, Union

from bs4 import NavigableString
from bs4 import Tag as Element
from bs4.element import PreformattedString

from ao3work.errors import NoItemsFound
from ao3work.schemas import Bold, Ignored, Italic, Paragraph, Text

logger = logging.getLogger(__name__)

# Styled tag name -> span type
STYLE_TAGS = {
    'strong': Bold,
    'b': Bold,
    'em': Italic,
    'i': Italic,
}

Outcome = Union[Text, Bold, Italic, Ignored]


def classify_child(node) -> Outcome:
    """
    Classify one immediate child of a paragraph.

    Text nodes become ``Text``; strong/em (and b/i) become ``Bold``/``Italic``
    carrying all of their descendant text, so a style nested inside another
    is flattened into the outer one. Text that trims to nothing still yields
    a span with empty text. Every other node is reported as ``Ignored``
    rather than dropped silently.
    """
    if isinstance(node, PreformattedString):
        # Comment, CData, Doctype, ...
        return Ignored(tag=f"#{type(node).__name__.lower()}", reason="non-content")

    if isinstance(node, NavigableString):
        return Text(text=node.strip())

    if isinstance(node, Element):
        span_type = STYLE_TAGS.get(node.name)
        if span_type is None:
            return Ignored(tag=node.name, reason="unsupported")
        return span_type(text=node.get_text().strip())

    return Ignored(tag=type(node).__name__, reason="non-content")


def classify_children(paragraph: Element) -> Iterator[Outcome]:
    """Classify the immediate children of ``paragraph`` in document order."""
    for child in paragraph.children:
        yield classify_child(child)


def parse_paragraph(paragraph: Element) -> Paragraph:
    """
    Build a Paragraph from one paragraph element.

    Empty spans (whitespace between elements, ``&nbsp;`` spacers) are dropped
    when the paragraph has other content; a spacer paragraph keeps its empty
    span.

    Raises:
        NoItemsFound: if no child produced a span
    """
    spans = []
    for outcome in classify_children(paragraph):
        if isinstance(outcome, Ignored):
            logger.debug(f"Ignored <{outcome.tag}> in paragraph ({outcome.reason})")
            continue
        spans.append(outcome)

    if not spans:
        raise NoItemsFound("paragraph")

    content = [span for span in spans if span.text]
    return Paragraph(spans=content or spans)
