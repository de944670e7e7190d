"""PE injector: adds import descriptors and rebuilds the import table."""

from __future__ import annotations

import shutil
from collections.abc import Sequence
from pathlib import Path

import lief

from luject.errors import InjectionError
from luject.formats.base import FormatInjector
from luject.utils.logging import get_logger

log = get_logger(__name__)


class PEInjector(FormatInjector):
    name = "pe"

    def add_libraries(
        self,
        input_path: Path,
        output_path: Path,
        library_names: Sequence[str],
    ) -> None:
        binary = lief.PE.parse(str(input_path))
        if binary is None:
            raise InjectionError(f"LIEF could not parse PE file: {input_path}")

        # the Windows loader matches DLL names case-insensitively
        present = {imp.name for imp in binary.imports}
        missing = self._missing(present, library_names, fold_case=True)
        if not missing:
            log.info("pe_already_injected", path=str(input_path))
            if Path(input_path) != Path(output_path):
                shutil.copyfile(input_path, output_path)
            return

        for name in missing:
            binary.add_import(name)

        config = lief.PE.Builder.config_t()
        config.imports = True
        binary.write(str(output_path), config)
        log.info("pe_injected", path=str(output_path), added=missing)
