from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastmcp import FastMCP  # type: ignore

from ..services import pdf_processor
from ..utils.telemetry import instrument_tool


def register(app: FastMCP) -> None:
    @app.tool()
    @instrument_tool("merge_pdfs")
    async def merge_pdfs(input_files: List[str], output_path: Optional[str] = None) -> dict:
        """Merge multiple PDF files into one document, in the given order."""
        return pdf_processor.merge_pdfs(input_files, output_path)

    @app.tool()
    @instrument_tool("split_pdf")
    async def split_pdf(file_path: str, page_range: str, output_path: Optional[str] = None) -> dict:
        """Create a new PDF holding the pages selected by a range such as "1-3,5,7-10"."""
        return pdf_processor.split_pdf(file_path, page_range, output_path)

    @app.tool()
    @instrument_tool("split_pdf_by_ranges")
    async def split_pdf_by_ranges(file_path: str, split_ranges: List[Dict[str, Any]]) -> dict:
        """Split a PDF into several files.

        Each entry: {"pages": "1-3", "output_path": "/path/part1.pdf"}; output_path is optional.
        """
        return {"parts": pdf_processor.split_pdf_by_ranges(file_path, split_ranges)}

    @app.tool()
    @instrument_tool("extract_pages")
    async def extract_pages(file_path: str, page_numbers: List[int], output_path: Optional[str] = None) -> dict:
        """Extract 1-based pages, keeping the order given."""
        return pdf_processor.extract_pages(file_path, page_numbers, output_path)

    @app.tool()
    @instrument_tool("rotate_pages")
    async def rotate_pages(file_path: str, page_range: str, degrees: int, output_path: Optional[str] = None) -> dict:
        """Rotate the selected pages clockwise by 90, 180, 270 (or -90 for counter-clockwise)."""
        return pdf_processor.rotate_pages(file_path, page_range, degrees, output_path)

    @app.tool()
    @instrument_tool("delete_pages")
    async def delete_pages(file_path: str, page_range: str, output_path: Optional[str] = None) -> dict:
        """Remove the selected pages. At least one page must remain."""
        return pdf_processor.delete_pages(file_path, page_range, output_path)

    @app.tool()
    @instrument_tool("reorder_pages")
    async def reorder_pages(file_path: str, new_order: List[int], output_path: Optional[str] = None) -> dict:
        """Rebuild the PDF in a new page order (1-based list, one entry per page)."""
        return pdf_processor.reorder_pages(file_path, new_order, output_path)
