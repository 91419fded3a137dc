from __future__ import annotations

from typing import Optional


class PageRangeError(ValueError):
    """Base error for page range handling; tools surface the message as-is."""

    def __init__(self, message: str, segment: Optional[str] = None) -> None:
        super().__init__(message)
        self.segment = segment


class InvalidInput(PageRangeError):
    pass


class InvalidRange(PageRangeError):
    pass


class InvalidPageNumber(PageRangeError):
    pass


class EmptyResult(PageRangeError):
    pass
