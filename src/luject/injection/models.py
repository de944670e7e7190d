"""Frozen value objects describing an injection run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from luject.config.defaults import INJECTED_SUFFIX
from luject.errors import InputNotFoundError


class Format(str, Enum):
    ELF = "ELF"
    MACHO = "Mach-O"
    PE = "PE"
    APK = "APK"
    IPA = "IPA"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Artifact:
    path: Path
    format: Format


def default_output_path(input_path: Path) -> Path:
    """``/a/b/c.so`` -> ``/a/b/c_injected.so``."""
    return input_path.with_name(f"{input_path.stem}{INJECTED_SUFFIX}{input_path.suffix}")


@dataclass(frozen=True)
class InjectionRequest:
    input_path: Path
    libraries: tuple[Path, ...]
    output_path: Path | None = None
    pattern: str | None = None  # glob over inner library names, APK only
    verbose: bool = False

    @classmethod
    def create(
        cls,
        input_path: str | Path,
        libraries: list[str | Path] | tuple[str | Path, ...],
        output_path: str | Path | None = None,
        pattern: str | None = None,
        verbose: bool = False,
    ) -> InjectionRequest:
        return cls(
            input_path=Path(input_path),
            libraries=tuple(Path(lib) for lib in libraries),
            output_path=Path(output_path) if output_path is not None else None,
            pattern=pattern,
            verbose=verbose,
        )

    @property
    def resolved_output(self) -> Path:
        return self.output_path if self.output_path is not None else default_output_path(self.input_path)

    @property
    def library_names(self) -> list[str]:
        """Only the file names end up in dependency tables."""
        return [lib.name for lib in self.libraries]

    def validate(self) -> None:
        if not self.input_path.is_file():
            raise InputNotFoundError(self.input_path, "input")
        if not self.libraries:
            raise ValueError("At least one library to inject is required")
        for library in self.libraries:
            if not library.is_file():
                raise InputNotFoundError(library, "library")


@dataclass(frozen=True)
class Workspace:
    extract_dir: Path
    archive_path: Path


@dataclass(frozen=True)
class RepackageResult:
    output: Path
    arch: str
    injected: tuple[str, ...] = ()
    installed: tuple[str, ...] = ()
    aligned: bool = False
