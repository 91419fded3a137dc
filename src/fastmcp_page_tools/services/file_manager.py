from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from ..config import settings


SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def temp_dir() -> Path:
    p = settings.temp_path
    p.mkdir(parents=True, exist_ok=True)
    return p


def cleanup_expired(now: float | None = None) -> int:
    now = now or time.time()
    removed = 0
    for f in temp_dir().glob("**/*"):
        if not f.is_file():
            continue
        try:
            if now - f.stat().st_mtime > settings.retention_seconds:
                f.unlink(missing_ok=True)
                removed += 1
        except FileNotFoundError:
            pass
    return removed


@dataclass
class ResourceInfo:
    path: Path
    size: int
    created: float
    content_type: str


def list_resources() -> List[ResourceInfo]:
    resources: List[ResourceInfo] = []
    for f in temp_dir().glob("**/*"):
        if f.is_file():
            stat = f.stat()
            resources.append(
                ResourceInfo(
                    path=f.resolve(),
                    size=stat.st_size,
                    created=stat.st_ctime,
                    content_type="application/pdf" if f.suffix.lower() == ".pdf" else "application/octet-stream",
                )
            )
    return resources


def _timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%d_%H-%M-%S")


def timestamped_filename(prefix: str = "document", now: Optional[datetime] = None) -> str:
    """``merged`` -> ``merged_2024-05-01_13-45-10.pdf`` (UTC)."""
    return f"{prefix}_{_timestamp(now)}.pdf"


def action_filename(original: Optional[str], action: str, now: Optional[datetime] = None) -> str:
    """Name an output after its source: ``report.pdf`` -> ``report_rotated_<ts>.pdf``."""
    if not original:
        return timestamped_filename(action, now)
    name = Path(original).name
    base = name[:-4] if name.lower().endswith(".pdf") else name
    return f"{base}_{action}_{_timestamp(now)}.pdf"


def format_file_size(num_bytes: int) -> str:
    if num_bytes <= 0:
        return "0 Bytes"
    i = 0
    while num_bytes >= 1024 ** (i + 1) and i < len(SIZE_UNITS) - 1:
        i += 1
    value = round(num_bytes / (1024 ** i), 2)
    text = str(int(value)) if value == int(value) else str(value)
    return f"{text} {SIZE_UNITS[i]}"


def _unique_name(name: str) -> str:
    """Return a unique filename if the target already exists in temp_dir()."""
    candidate = temp_dir() / name
    if not candidate.exists():
        return name
    return f"{candidate.stem}-{uuid.uuid4().hex[:6]}{candidate.suffix}"


def resolve_output_path(output_path: Optional[str], original: Optional[str], action: str) -> Path:
    """Return the requested output path, or an action-named file in temp storage."""
    if output_path:
        out = Path(output_path)
    else:
        out = temp_dir() / _unique_name(action_filename(original, action))
    if out.suffix.lower() != ".pdf":
        out = out.with_name(out.name + ".pdf")
    out.parent.mkdir(parents=True, exist_ok=True)
    return out
