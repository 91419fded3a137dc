from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional

from PyPDF2 import PdfReader, PdfWriter

from ..utils.errors import EmptyResult
from ..utils.logger import get_logger
from ..utils.parsers import clamp_pages, format_page_range, require_pages
from ..utils.validators import validate_pdf, validate_pdfs, validate_rotation
from .file_manager import format_file_size, resolve_output_path


logger = get_logger(__name__)


def _open(file_path: str) -> tuple[Path, PdfReader]:
    pdf_path = validate_pdf(file_path)
    return pdf_path, PdfReader(str(pdf_path))


def _save(writer: PdfWriter, out: Path) -> dict:
    # out is only replaced once the full document has been written
    handle, temp_name = tempfile.mkstemp(prefix=f"{out.stem}_tmp_", suffix=out.suffix, dir=str(out.parent))
    os.close(handle)
    temp_path = Path(temp_name)
    try:
        with temp_path.open("wb") as f:
            writer.write(f)
        temp_path.replace(out)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
    size = out.stat().st_size
    return {
        "output_path": str(out.resolve()),
        "page_count": len(writer.pages),
        "output_size": size,
        "output_size_human": format_file_size(size),
    }


def _copy_pages(reader: PdfReader, indices: Iterable[int]) -> PdfWriter:
    writer = PdfWriter()
    for i in indices:
        writer.add_page(reader.pages[i])
    return writer


def get_page_count(file_path: str) -> int:
    _, reader = _open(file_path)
    return len(reader.pages)


def merge_pdfs(input_files: List[str], output_path: Optional[str] = None) -> dict:
    if not input_files:
        raise ValueError("No files provided for merging")
    pdf_paths = validate_pdfs(input_files)

    writer = PdfWriter()
    for p in pdf_paths:
        for page in PdfReader(str(p)).pages:
            writer.add_page(page)

    out = resolve_output_path(output_path, None, "merged")
    result = _save(writer, out)
    result["inputs"] = [str(p) for p in pdf_paths]
    logger.info("merged %d file(s) into %s (%d pages)", len(pdf_paths), out, result["page_count"])
    return result


def split_pdf(file_path: str, page_range: str, output_path: Optional[str] = None) -> dict:
    """Write the pages selected by ``page_range`` to a new PDF, in page order."""
    if not isinstance(page_range, str) or not page_range.strip():
        raise ValueError("No page range provided")
    pdf_path, reader = _open(file_path)
    indices = require_pages(page_range, len(reader.pages))

    out = resolve_output_path(output_path, pdf_path.name, "split")
    result = _save(_copy_pages(reader, indices), out)
    result["pages"] = format_page_range(indices)
    logger.info("split %s pages=%s -> %s", pdf_path, result["pages"], out)
    return result


def split_pdf_by_ranges(file_path: str, split_ranges: List[dict]) -> List[dict]:
    """Split into several files; each entry is ``{"pages": "1-3", "output_path": ...}``.

    Every range is parsed before anything is written, so one bad entry leaves
    no partial output behind.
    """
    if not split_ranges:
        raise ValueError("split_ranges cannot be empty")
    pdf_path, reader = _open(file_path)
    total = len(reader.pages)

    plan = []
    for r in split_ranges:
        pages = r.get("pages")
        if not isinstance(pages, str) or not pages.strip():
            raise ValueError("Each range must include a 'pages' expression")
        plan.append((require_pages(pages, total), r.get("output_path")))

    results: List[dict] = []
    for part, (indices, output_path) in enumerate(plan, start=1):
        out = resolve_output_path(output_path, pdf_path.name, f"part{part:02d}")
        result = _save(_copy_pages(reader, indices), out)
        result["pages"] = format_page_range(indices)
        results.append(result)
    logger.info("split %s into %d part(s)", pdf_path, len(results))
    return results


def extract_pages(file_path: str, page_numbers: List[int], output_path: Optional[str] = None) -> dict:
    """Copy the given 1-based pages, in the order given, into a new PDF."""
    if not page_numbers:
        raise ValueError("No pages selected for extraction")
    pdf_path, reader = _open(file_path)
    selected = clamp_pages(page_numbers, len(reader.pages))
    if not selected:
        raise EmptyResult("No valid pages selected")

    indices = [p - 1 for p in selected]
    out = resolve_output_path(output_path, pdf_path.name, "extracted")
    result = _save(_copy_pages(reader, indices), out)
    result["page_numbers"] = selected
    logger.info("extracted pages=%s from %s -> %s", selected, pdf_path, out)
    return result


def rotate_pages(file_path: str, page_range: str, degrees: int, output_path: Optional[str] = None) -> dict:
    degrees = validate_rotation(degrees)
    pdf_path, reader = _open(file_path)
    indices = set(require_pages(page_range, len(reader.pages)))

    writer = PdfWriter()
    for idx, page in enumerate(reader.pages):
        if idx in indices:
            page = page.rotate(degrees)
        writer.add_page(page)

    out = resolve_output_path(output_path, pdf_path.name, "rotated")
    result = _save(writer, out)
    result["rotated_pages"] = format_page_range(indices)
    result["degrees"] = degrees
    logger.info("rotated pages=%s by %d in %s -> %s", result["rotated_pages"], degrees, pdf_path, out)
    return result


def delete_pages(file_path: str, page_range: str, output_path: Optional[str] = None) -> dict:
    pdf_path, reader = _open(file_path)
    total = len(reader.pages)
    doomed = set(require_pages(page_range, total))
    keep = [i for i in range(total) if i not in doomed]
    if not keep:
        raise ValueError("Cannot delete all pages from PDF")

    out = resolve_output_path(output_path, pdf_path.name, "modified")
    result = _save(_copy_pages(reader, keep), out)
    result["deleted_pages"] = format_page_range(doomed)
    logger.info("deleted pages=%s from %s -> %s", result["deleted_pages"], pdf_path, out)
    return result


def reorder_pages(file_path: str, new_order: List[int], output_path: Optional[str] = None) -> dict:
    """Rebuild the PDF with pages in ``new_order`` (1-based, one entry per page)."""
    if not new_order:
        raise ValueError("No page order provided")
    pdf_path, reader = _open(file_path)
    total = len(reader.pages)
    if len(new_order) != total:
        raise ValueError(f"Order array length ({len(new_order)}) must match page count ({total})")
    if not all(1 <= n <= total for n in new_order):
        raise ValueError("Invalid page numbers in order array")

    out = resolve_output_path(output_path, pdf_path.name, "reordered")
    result = _save(_copy_pages(reader, [n - 1 for n in new_order]), out)
    result["order"] = list(new_order)
    logger.info("reordered %s -> %s", pdf_path, out)
    return result


def get_pdf_info(file_path: str) -> dict:
    pdf_path, reader = _open(file_path)
    size = pdf_path.stat().st_size
    return {
        "path": str(pdf_path),
        "pages": len(reader.pages),
        "size": size,
        "size_human": format_file_size(size),
        "version": getattr(reader, "pdf_header", None),
        "encrypted": reader.is_encrypted,
    }
