from __future__ import annotations

import re
from typing import Iterable, List, Optional, Set

from .errors import EmptyResult, InvalidInput, InvalidPageNumber, InvalidRange


_SYNTAX_RE = re.compile(r"^[0-9,\s-]+$")


def _to_int(text: str) -> Optional[int]:
    # str.isdigit() accepts superscripts and other unicode digits
    if not text or not all("0" <= ch <= "9" for ch in text):
        return None
    return int(text, 10)


def parse_page_range(expr: str, total_pages: int) -> List[int]:
    """Expand a range expression like ``"1-3,5"`` into sorted zero-based indices.

    Pages outside ``1..total_pages`` are dropped without error; malformed
    segments raise. An expression with no in-bound pages returns ``[]``.
    """
    if not isinstance(expr, str) or not expr.strip():
        raise InvalidInput("Invalid range string")
    if isinstance(total_pages, bool) or not isinstance(total_pages, int):
        raise InvalidInput(f"Invalid page count: {total_pages!r}")

    pages: Set[int] = set()
    for part in expr.split(','):
        part = part.strip()
        if not part:
            continue
        if '-' in part:
            a, b = part.split('-', 1)
            start = _to_int(a.strip())
            end = _to_int(b.strip())
            if start is None or end is None:
                raise InvalidRange(f"Invalid range: {part}", segment=part)
            if start > end:
                raise InvalidRange(f"Invalid range: {part} (start > end)", segment=part)
            # clamp before iterating so huge spans stay bounded by the document
            pages.update(i - 1 for i in range(max(start, 1), min(end, total_pages) + 1))
        else:
            val = _to_int(part)
            if val is None:
                raise InvalidPageNumber(f"Invalid page number: {part}", segment=part)
            if 1 <= val <= total_pages:
                pages.add(val - 1)
    return sorted(pages)


def require_pages(expr: str, total_pages: int) -> List[int]:
    pages = parse_page_range(expr, total_pages)
    if not pages:
        raise EmptyResult("No valid pages in range")
    return pages


def format_page_range(indices: Iterable[int]) -> str:
    """Render zero-based indices as a compact 1-based expression, e.g. ``"1-3,5"``."""
    unique: Set[int] = set()
    for idx in indices:
        if isinstance(idx, bool) or not isinstance(idx, int) or idx < 0:
            raise InvalidInput(f"Invalid page index: {idx!r}")
        unique.add(idx)
    if not unique:
        return ""

    pages = [i + 1 for i in sorted(unique)]
    terms: List[str] = []
    start = end = pages[0]
    for p in pages[1:]:
        if p == end + 1:
            end = p
            continue
        terms.append(str(start) if start == end else f"{start}-{end}")
        start = end = p
    terms.append(str(start) if start == end else f"{start}-{end}")
    return ",".join(terms)


def is_valid_range_syntax(expr: str) -> bool:
    if not isinstance(expr, str) or not expr:
        return False
    if not _SYNTAX_RE.match(expr):
        return False
    if "--" in expr or ",," in expr:
        return False
    return True


def clamp_pages(pages: Iterable[int], max_page: int) -> List[int]:
    """Keep 1-based page numbers inside ``1..max_page``, first occurrence order."""
    result: List[int] = []
    seen: Set[int] = set()
    for p in pages:
        if 1 <= p <= max_page and p not in seen:
            seen.add(p)
            result.append(p)
    return result
