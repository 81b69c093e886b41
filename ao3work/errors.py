"""Errors raised while fetching and extracting a work."""
from typing import Optional


class WorkError(Exception):
    """Base class for every failure surfaced by the extraction pipeline."""

    field: Optional[str] = None


class ElementNotFound(WorkError):
    """A mandatory single-valued field matched no element."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Element not found: {field}")


class InvalidFormat(WorkError):
    """
    A field's text could not be converted to its target type.

    ``raw`` is the offending text, or None when the element was absent
    altogether (numeric fields report a missing element this way).
    """

    def __init__(self, field: str, raw: Optional[str] = None):
        self.field = field
        self.raw = raw
        if raw is None:
            message = f"Invalid format: {field} (element missing)"
        else:
            message = f"Invalid format: {field} ({raw!r})"
        super().__init__(message)

    @property
    def missing(self) -> bool:
        return self.raw is None


class NoItemsFound(WorkError):
    """A list field that needs at least one item yielded none."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"No items found: {field}")


class InvalidWorkId(WorkError):
    """The fetched page is the archive's not-found page."""

    def __init__(self, work_id: str):
        self.work_id = work_id
        super().__init__(f"Invalid work ID or inaccessible work: {work_id}")


class NetworkError(WorkError):
    """Transport-level failure while fetching a page."""

    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"Network error: {cause}")
