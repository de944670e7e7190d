"""Fakes and archive builders used across the unit tests."""

from __future__ import annotations

import shutil
import zipfile
from collections.abc import Sequence
from pathlib import Path

from luject.formats.base import FormatInjector
from luject.formats.classifier import FormatClassifier
from luject.tools.archiver import ZipArchiver
from luject.tools.locator import ToolLocator


class RecordingInjector(FormatInjector):
    """Appends a marker per library instead of rewriting real binaries."""

    name = "recording"

    def __init__(self) -> None:
        self.calls: list[tuple[Path, Path, list[str]]] = []

    def add_libraries(self, input_path: Path, output_path: Path, library_names: Sequence[str]) -> None:
        self.calls.append((Path(input_path), Path(output_path), list(library_names)))
        data = Path(input_path).read_bytes()
        for name in library_names:
            marker = f"\nNEEDED:{name}".encode()
            if marker not in data:
                data += marker
        Path(output_path).write_bytes(data)


class FailingInjector(FormatInjector):
    name = "failing"

    def add_libraries(self, input_path: Path, output_path: Path, library_names: Sequence[str]) -> None:
        from luject.errors import InjectionError

        raise InjectionError(f"cannot rewrite {input_path}")


class StubClassifier(FormatClassifier):
    """Classifier whose content probe returns canned text."""

    def __init__(self, locator: ToolLocator, probe_text: str | None = None) -> None:
        super().__init__(locator)
        self.probe_text = probe_text
        self.probe_calls = 0

    def probe(self, path: str | Path) -> str | None:
        self.probe_calls += 1
        return self.probe_text


class PyZipArchiver(ZipArchiver):
    """Real extraction, zipfile-backed creation so no `zip` binary is needed."""

    def create(self, dest: Path, source_dir: Path) -> None:
        with zipfile.ZipFile(dest, "w", zipfile.ZIP_DEFLATED) as z:
            for path in sorted(source_dir.rglob("*")):
                if path.is_file():
                    z.write(path, path.relative_to(source_dir).as_posix())


class CopySigner:
    """Copies the unsigned archive to the output and records what it saw."""

    def __init__(self) -> None:
        self.seen_entries: list[str] = []

    def sign(self, unsigned: Path, signed: Path) -> Path:
        with zipfile.ZipFile(unsigned) as z:
            self.seen_entries = z.namelist()
        signed.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(unsigned, signed)
        return signed


class NoopAligner:
    def __init__(self, available: bool = True) -> None:
        self.available = available
        self.aligned: list[Path] = []

    def align(self, container: Path) -> bool:
        if self.available:
            self.aligned.append(container)
        return self.available


def build_apk(path: Path, entries: dict[str, bytes]) -> Path:
    with zipfile.ZipFile(path, "w") as z:
        for name, data in entries.items():
            z.writestr(name, data)
    return path


def apk_entries(path: Path) -> dict[str, bytes]:
    with zipfile.ZipFile(path) as z:
        return {name: z.read(name) for name in z.namelist() if not name.endswith("/")}


