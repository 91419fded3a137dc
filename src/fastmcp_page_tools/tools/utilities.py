from __future__ import annotations

from typing import Optional

from fastmcp import FastMCP  # type: ignore

from ..config import settings
from ..services import pdf_processor
from ..services.file_manager import cleanup_expired, format_file_size, list_resources
from ..utils.telemetry import instrument_tool


def register(app: FastMCP) -> None:
    @app.tool()
    @instrument_tool("server_info")
    async def server_info() -> dict:
        """Return basic server info and configuration snapshot (non-secret)."""
        return {
            "name": settings.server_name,
            "version": settings.server_version,
            "max_file_size_mb": settings.max_file_size_mb,
            "temp_dir": str(settings.temp_path),
            "log_file": str(settings.log_path),
        }

    @app.tool()
    @instrument_tool("get_pdf_info")
    async def get_pdf_info(file_path: str) -> dict:
        """Page count, size and encryption flag of a PDF."""
        return pdf_processor.get_pdf_info(file_path)

    @app.tool()
    @instrument_tool("list_temp_resources")
    async def list_temp_resources(max_items: Optional[int] = 100) -> dict:
        """List generated files in temp storage, newest first."""
        if max_items is not None and max_items < 0:
            raise ValueError("max_items must be >= 0")
        cleanup_expired()
        resources = sorted(list_resources(), key=lambda r: r.created, reverse=True)
        items = [
            {
                "path": str(r.path),
                "filename": r.path.name,
                "size": r.size,
                "size_human": format_file_size(r.size),
                "created": r.created,
                "content_type": r.content_type,
            }
            for r in resources
        ]
        return {"items": items if max_items is None else items[:max_items]}
