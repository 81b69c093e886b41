"""Pydantic schemas for the extracted work model."""
from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

# Characters that attach to the preceding span when rendering plain text
CLOSING_PUNCTUATION = ".,;:!?)]}\u2019\u201d\u2026"


class FrozenModel(BaseModel):
    """Base for immutable records."""

    model_config = ConfigDict(frozen=True)


# Classification Schemas
class Tag(FrozenModel):
    """One classification link (freeform tag, character, warning...)."""
    name: str
    link: str = Field(..., min_length=1)


class Chapter(FrozenModel):
    """Entry of the chapter selector menu."""
    name: str
    id: str


# Content Schemas
class Text(FrozenModel):
    """Plain run of text."""
    kind: Literal["text"] = "text"
    text: str


class Bold(FrozenModel):
    """Run of text inside a strong/b element."""
    kind: Literal["bold"] = "bold"
    text: str


class Italic(FrozenModel):
    """Run of text inside an em/i element."""
    kind: Literal["italic"] = "italic"
    text: str


ContentSpan = Annotated[Union[Text, Bold, Italic], Field(discriminator="kind")]


class Ignored(FrozenModel):
    """
    Child node the inline parser deliberately skipped.

    Never stored on a Work; returned by the classifier so callers can see
    what was dropped and why.
    """
    tag: str
    reason: Literal["unsupported", "non-content"]


class Paragraph(FrozenModel):
    """Ordered inline spans of one body paragraph."""
    spans: Tuple[ContentSpan, ...] = Field(..., min_length=1)

    def plain_text(self) -> str:
        """Join the spans, without a space before closing punctuation."""
        text = ""
        for span in self.spans:
            if not span.text:
                continue
            if text and span.text[0] not in CLOSING_PUNCTUATION:
                text += " "
            text += span.text
        return text


# Work Schema
class Work(FrozenModel):
    """Everything extracted from one work page."""
    title: str
    author: str
    date_published: str
    date_updated: str
    language: str
    word_count: int = Field(..., ge=0)
    hit_count: int = Field(..., ge=0)

    tags: Tuple[Tag, ...]
    characters: Tuple[Tag, ...]
    relationships: Tuple[Tag, ...]
    warnings: Tuple[Tag, ...]
    ratings: Tuple[Tag, ...]

    chapters: Tuple[Chapter, ...] = ()
    body: Tuple[Paragraph, ...]

    def to_plain_text(self) -> str:
        """Render the body as plain text, one paragraph per line."""
        return "\n".join(paragraph.plain_text() for paragraph in self.body)

    def body_word_count(self) -> int:
        """
        Count whitespace-separated words in the rendered body.

        Only covers the chapter that was fetched, so it can legitimately
        differ from ``word_count`` on multi-chapter works.
        """
        return len(self.to_plain_text().split())
