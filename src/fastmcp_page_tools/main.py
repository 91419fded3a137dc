from __future__ import annotations

from fastmcp import FastMCP  # type: ignore

from .config import settings
from .services.file_manager import cleanup_expired
from .tools import page_ranges, pdf_manipulation, utilities
from .utils.logger import get_logger

logger = get_logger(__name__)

TOOL_MODULES = (page_ranges, pdf_manipulation, utilities)


def build_app() -> FastMCP:
    app = FastMCP(settings.server_name, version=settings.server_version)
    for module in TOOL_MODULES:
        module.register(app)

    try:
        removed = cleanup_expired()
    except OSError as exc:
        logger.error("startup cleanup of %s failed: %s", settings.temp_path, exc)
    else:
        logger.info("startup cleanup removed %d expired file(s)", removed)
    return app


def run() -> None:
    build_app().run()


if __name__ == "__main__":  # pragma: no cover
    run()
