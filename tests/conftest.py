import os
import tempfile
from pathlib import Path

import pytest
from reportlab.pdfgen import canvas

# Settings are read at import time; keep logs and temp files out of the repo.
_SANDBOX = Path(tempfile.mkdtemp(prefix="page_tools_tests_"))
os.environ.setdefault("TEMP_DIR", str(_SANDBOX / "temp_files"))
os.environ.setdefault("LOG_FILE_PATH", str(_SANDBOX / "logs" / "tests.log"))


@pytest.fixture
def make_pdf(tmp_path: Path):
    def _make(label: str = "doc", pages: int = 3) -> Path:
        p = tmp_path / f"{label}.pdf"
        c = canvas.Canvas(str(p))
        for i in range(pages):
            c.drawString(100, 750, f"{label} p{i+1}")
            c.showPage()
        c.save()
        return p

    return _make
