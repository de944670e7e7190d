"""Zip-compatible extraction and re-archiving of container packages."""

from __future__ import annotations

import zipfile
from pathlib import Path

from luject.errors import ArchiveError
from luject.tools.locator import ToolLocator
from luject.utils.logging import get_logger
from luject.utils.process import run_tool

log = get_logger(__name__)


class ZipArchiver:
    """Extracts with :mod:`zipfile` and archives with the ``zip`` program."""

    def __init__(self, locator: ToolLocator, verbose: bool = False) -> None:
        self._locator = locator
        self._verbose = verbose

    def extract(self, archive: Path, dest: Path) -> None:
        dest.mkdir(parents=True, exist_ok=True)
        dest_root = dest.resolve()
        try:
            with zipfile.ZipFile(archive, "r") as z:
                for member in z.infolist():
                    target = (dest_root / member.filename).resolve()
                    if target != dest_root and dest_root not in target.parents:
                        raise ArchiveError(f"Refusing to extract outside {dest}: {member.filename}")
                    z.extract(member, dest_root)
        except (zipfile.BadZipFile, OSError) as exc:
            raise ArchiveError(f"Failed to extract {archive}: {exc}") from exc
        log.debug("archive_extracted", archive=str(archive), dest=str(dest))

    def create(self, dest: Path, source_dir: Path) -> None:
        """Zip the contents of ``source_dir`` (relative paths) into ``dest``."""
        zip_program = self._locator.zip()
        run_tool([zip_program, "-r", dest.resolve(), "."], verbose=self._verbose, cwd=source_dir)
        log.debug("archive_created", dest=str(dest), source=str(source_dir))
