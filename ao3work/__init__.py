"""Extract metadata and body text from Archive of Our Own work pages."""
from ao3work.assembler import assemble_work, parse_document, parse_work
from ao3work.errors import (
    ElementNotFound,
    InvalidFormat,
    InvalidWorkId,
    NetworkError,
    NoItemsFound,
    WorkError,
)
from ao3work.fetcher import fetch_work, fetch_work_async, fetch_work_page
from ao3work.schemas import Bold, Chapter, Italic, Paragraph, Tag, Text, Work

__version__ = "0.1.0"

__all__ = [
    "assemble_work",
    "parse_document",
    "parse_work",
    "fetch_work",
    "fetch_work_async",
    "fetch_work_page",
    "WorkError",
    "ElementNotFound",
    "InvalidFormat",
    "InvalidWorkId",
    "NetworkError",
    "NoItemsFound",
    "Work",
    "Tag",
    "Chapter",
    "Paragraph",
    "Text",
    "Bold",
    "Italic",
]
