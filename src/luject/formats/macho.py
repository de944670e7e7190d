"""Mach-O injector: adds LC_LOAD_DYLIB commands to every slice."""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from pathlib import Path

import lief

from luject.errors import InjectionError
from luject.formats.base import FormatInjector
from luject.utils.logging import get_logger

log = get_logger(__name__)


class MachOInjector(FormatInjector):
    name = "macho"

    def add_libraries(
        self,
        input_path: Path,
        output_path: Path,
        library_names: Sequence[str],
    ) -> None:
        fat = lief.MachO.parse(str(input_path))
        if fat is None:
            raise InjectionError(f"LIEF could not parse Mach-O file: {input_path}")

        changed = False
        for binary in fat:
            present = {lib.name for lib in binary.libraries}
            missing = self._missing(present, library_names)
            for name in missing:
                binary.add_library(name)
            if missing:
                changed = True
                log.debug("macho_slice_injected", cpu=str(binary.header.cpu_type), added=missing)

        if not changed:
            log.info("macho_already_injected", path=str(input_path))
            if Path(input_path) != Path(output_path):
                shutil.copyfile(input_path, output_path)
            return

        fat.write(str(output_path))
        log.info("macho_injected", path=str(output_path), libraries=list(library_names))
