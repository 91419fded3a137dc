from __future__ import annotations

from typing import List

from fastmcp import FastMCP  # type: ignore

from ..utils import parsers
from ..utils.telemetry import instrument_tool


def register(app: FastMCP) -> None:
    @app.tool()
    @instrument_tool("parse_page_range")
    async def parse_page_range(page_range: str, total_pages: int) -> dict:
        """Expand a range like "1-3,5" into 1-based page numbers within the document.

        Out-of-range pages are dropped; an expression with no valid pages fails.
        """
        indices = parsers.require_pages(page_range, total_pages)
        return {
            "page_numbers": [i + 1 for i in indices],
            "count": len(indices),
            "normalized": parsers.format_page_range(indices),
        }

    @app.tool()
    @instrument_tool("format_page_range")
    async def format_page_range(page_numbers: List[int]) -> dict:
        """Compact 1-based page numbers into a range expression, e.g. [1,2,3,5] -> "1-3,5"."""
        return {"page_range": parsers.format_page_range(n - 1 for n in page_numbers)}

    @app.tool()
    @instrument_tool("validate_range_syntax")
    async def validate_range_syntax(page_range: str) -> dict:
        """Quick syntax check (digits, commas, hyphens, spaces). Does not check bounds."""
        return {"page_range": page_range, "valid": parsers.is_valid_range_syntax(page_range)}
