"""Scoped temporary directories for container repackaging."""

from __future__ import annotations

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from luject.injection.models import Workspace
from luject.utils.logging import get_logger

log = get_logger(__name__)


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path, ignore_errors=True)
    else:
        path.unlink(missing_ok=True)


@contextmanager
def workspace(input_path: Path, temp_root: str | Path | None = None) -> Generator[Workspace, None, None]:
    """Yield the extraction dir and intermediate archive for ``input_path``.

    Paths are derived from the input's base name, so two concurrent runs on
    the same input collide; callers serialize per input.
    """
    root = Path(temp_root) if temp_root else Path(tempfile.gettempdir()) / "luject"
    root.mkdir(parents=True, exist_ok=True)
    ws = Workspace(
        extract_dir=root / f"{input_path.stem}.tmp",
        archive_path=root / f"{input_path.stem}.unsigned{input_path.suffix or '.apk'}",
    )
    _remove(ws.extract_dir)
    _remove(ws.archive_path)
    log.debug("workspace_acquired", extract_dir=str(ws.extract_dir), archive=str(ws.archive_path))
    try:
        yield ws
    finally:
        _remove(ws.extract_dir)
        _remove(ws.archive_path)
        log.debug("workspace_released", extract_dir=str(ws.extract_dir))
