"""ELF injector: adds DT_NEEDED entries."""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from pathlib import Path

import lief
from elftools.common.exceptions import ELFError
from elftools.elf.dynamic import DynamicSegment
from elftools.elf.elffile import ELFFile

from luject.errors import InjectionError
from luject.formats.base import FormatInjector
from luject.utils.logging import get_logger

log = get_logger(__name__)

LOADABLE_TYPES = ("ET_EXEC", "ET_DYN")


def needed_libraries(path: Path) -> list[str]:
    """Return the DT_NEEDED names of an ELF file in table order."""
    try:
        with open(path, "rb") as f:
            elf = ELFFile(f)
            e_type = elf.header.e_type
            if e_type not in LOADABLE_TYPES:
                raise InjectionError(f"{path} is {e_type}, not an executable or shared object")
            if elf.num_segments() == 0:
                raise InjectionError(f"{path} has no program headers")
            needed: list[str] = []
            for segment in elf.iter_segments():
                if isinstance(segment, DynamicSegment):
                    for tag in segment.iter_tags():
                        if tag.entry.d_tag == "DT_NEEDED":
                            needed.append(tag.needed)
            return needed
    except ELFError as exc:
        raise InjectionError(f"Not a valid ELF file: {path} ({exc})") from exc


class ElfInjector(FormatInjector):
    name = "elf"

    def add_libraries(
        self,
        input_path: Path,
        output_path: Path,
        library_names: Sequence[str],
    ) -> None:
        present = set(needed_libraries(input_path))
        missing = self._missing(present, library_names)
        if not missing:
            log.info("elf_already_injected", path=str(input_path), libraries=list(library_names))
            if Path(input_path) != Path(output_path):
                shutil.copyfile(input_path, output_path)
            return

        binary = lief.ELF.parse(str(input_path))
        if binary is None:
            raise InjectionError(f"LIEF could not parse ELF file: {input_path}")
        for name in missing:
            binary.add_library(name)
        binary.write(str(output_path))
        log.info("elf_injected", path=str(output_path), added=missing)
