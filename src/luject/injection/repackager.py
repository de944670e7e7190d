"""APK repackaging: extract, inject into lib/<arch>/*.so, re-zip, sign, align."""

from __future__ import annotations

import fnmatch
import shutil
from pathlib import Path

from luject.config.models import LujectConfig
from luject.errors import InputNotFoundError
from luject.formats.base import FormatInjector
from luject.formats.classifier import FormatClassifier
from luject.formats.elf import ElfInjector
from luject.injection.models import InjectionRequest, RepackageResult
from luject.injection.workspace import workspace
from luject.tools.aligner import Aligner
from luject.tools.archiver import ZipArchiver
from luject.tools.locator import ToolLocator
from luject.tools.signer import Signer
from luject.utils.formatters import print_stage, print_step, print_warning
from luject.utils.logging import get_logger

log = get_logger(__name__)


class ContainerRepackager:
    """Injects dependencies into the native libraries of one APK architecture.

    Collaborators left as ``None`` are built per request so that the
    request's verbosity reaches every external tool.
    """

    def __init__(
        self,
        config: LujectConfig,
        locator: ToolLocator,
        elf_injector: FormatInjector | None = None,
        archiver: ZipArchiver | None = None,
        signer: Signer | None = None,
        aligner: Aligner | None = None,
        classifier: FormatClassifier | None = None,
    ) -> None:
        self._config = config
        self._locator = locator
        self._elf = elf_injector or ElfInjector()
        self._archiver = archiver
        self._signer = signer
        self._aligner = aligner
        self._classifier = classifier or FormatClassifier(locator)

    def select_architecture(self, input_path: Path) -> str:
        """Pick the single ABI directory to patch.

        Only two ABIs are considered: the default one, or the 64-bit ARM one
        when the content probe of the input mentions aarch64. Containers that
        need any other ABI must set ``container.arch`` explicitly.
        """
        container = self._config.container
        if container.arch:
            return container.arch
        result = self._classifier.probe(input_path)
        if result and container.arm64_marker in result:
            return container.arm64_arch
        return container.default_arch

    def matching_libraries(self, libdir: Path, pattern: str | None) -> list[Path]:
        glob = f"{pattern or '*'}.{self._config.container.library_extension}"
        return sorted(
            p for p in libdir.iterdir() if p.is_file() and fnmatch.fnmatch(p.name, glob)
        )

    def repackage(self, request: InjectionRequest) -> RepackageResult:
        input_path = request.input_path
        output_path = request.resolved_output
        verbose = request.verbose
        container = self._config.container

        archiver = self._archiver or ZipArchiver(self._locator, verbose=verbose)
        signer = self._signer or Signer(self._config, self._locator, verbose=verbose)
        aligner = self._aligner or Aligner(self._config, self._locator, verbose=verbose)

        with workspace(input_path, self._config.temp_dir) as ws:
            print_step(f"extract {input_path.name}", str(ws.extract_dir) if verbose else None)
            archiver.extract(input_path, ws.extract_dir)

            shutil.rmtree(ws.extract_dir / container.signature_dir, ignore_errors=True)

            arch = self.select_architecture(input_path)
            libdir = ws.extract_dir / "lib" / arch
            if not libdir.is_dir():
                raise InputNotFoundError(f"lib/{arch}", "native library directory")
            log.info("container_arch_selected", arch=arch, libdir=str(libdir))

            library_names = request.library_names
            matched = self.matching_libraries(libdir, request.pattern)
            if not matched:
                print_warning(f"no libraries in lib/{arch} matched {request.pattern or '*'}")

            injected: list[str] = []
            for libfile in matched:
                if libfile.name in library_names:
                    print_warning(f"skip {libfile.name}: it is one of the injected libraries")
                    continue
                print_step(f"inject to {libfile.name}")
                self._elf.add_libraries(libfile, libfile, library_names)
                injected.append(libfile.name)

            installed: list[str] = []
            for library in request.libraries:
                if not library.is_file():
                    raise InputNotFoundError(library, "library")
                print_step(f"install {library.name}")
                shutil.copy(library, libdir / library.name)
                installed.append(library.name)

            archiver.create(ws.archive_path, ws.extract_dir)

            print_stage(f"resign {ws.archive_path.name}")
            signer.sign(ws.archive_path, output_path)

            aligned = aligner.align(output_path)
            if aligned:
                print_stage(f"optimize {output_path.name}")

        return RepackageResult(
            output=output_path,
            arch=arch,
            injected=tuple(injected),
            installed=tuple(installed),
            aligned=aligned,
        )
