"""Temporary working directories for render calls."""

from __future__ import annotations

import logging
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


def write_bytes(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


def safe_rmtree(path: Path) -> None:
    """Remove ``path``; failures are logged, never raised."""
    if not path.exists():
        return
    try:
        shutil.rmtree(path)
    except OSError as exc:
        logger.warning(f"Failed to remove temporary directory {path}: {exc}")


@contextmanager
def temporary_workspace(prefix: str = "svgcrop-") -> Iterator[Path]:
    """Yield a fresh directory that is removed on exit, success or failure."""
    work_dir = Path(tempfile.mkdtemp(prefix=prefix))
    try:
        yield work_dir
    finally:
        safe_rmtree(work_dir)
