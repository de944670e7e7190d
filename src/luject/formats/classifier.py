"""Decide which injection path an artifact needs."""

from __future__ import annotations

from pathlib import Path

from luject.injection.models import Format
from luject.tools.locator import ToolLocator
from luject.utils.logging import get_logger
from luject.utils.process import probe_output

log = get_logger(__name__)

EXTENSION_FORMATS: dict[str, Format] = {
    ".so": Format.ELF,
    ".dylib": Format.MACHO,
    ".exe": Format.PE,
    ".dll": Format.PE,
    ".apk": Format.APK,
    ".ipa": Format.IPA,
}

# ordered: first substring found in the `file` output wins
SIGNATURE_FORMATS: list[tuple[str, Format]] = [
    ("ELF", Format.ELF),
    ("Mach-O", Format.MACHO),
]


class FormatClassifier:
    def __init__(self, locator: ToolLocator) -> None:
        self._locator = locator

    def classify(self, path: str | Path) -> Format:
        """Classify by file extension, falling back to content sniffing."""
        path = Path(path)
        fmt = EXTENSION_FORMATS.get(path.suffix.lower())
        if fmt is not None:
            return fmt
        return self.sniff(path)

    def probe(self, path: str | Path) -> str | None:
        """Raw output of the content-sniffing tool, or None if it cannot run."""
        file_program = self._locator.file()
        if file_program is None:
            log.debug("sniff_unavailable", path=str(path))
            return None
        return probe_output([file_program, path])

    def sniff(self, path: str | Path) -> Format:
        output = self.probe(path)
        if output:
            for signature, fmt in SIGNATURE_FORMATS:
                if signature in output:
                    log.debug("format_sniffed", path=str(path), format=fmt.value)
                    return fmt
        return Format.UNKNOWN
