"""Top-level entry: classify the input and route it to the right injector."""

from __future__ import annotations

from pathlib import Path

from luject.config.models import LujectConfig
from luject.errors import FormatNotImplementedError, UnsupportedFormatError
from luject.formats import default_injectors
from luject.formats.base import FormatInjector
from luject.formats.classifier import FormatClassifier
from luject.injection.models import Artifact, Format, InjectionRequest
from luject.injection.repackager import ContainerRepackager
from luject.tools.locator import ToolLocator
from luject.utils.logging import get_logger

log = get_logger(__name__)

BINARY_FORMATS = (Format.ELF, Format.MACHO, Format.PE)


class InjectionDispatcher:
    def __init__(
        self,
        config: LujectConfig,
        locator: ToolLocator | None = None,
        injectors: dict[Format, FormatInjector] | None = None,
        classifier: FormatClassifier | None = None,
        repackager: ContainerRepackager | None = None,
    ) -> None:
        self._config = config
        self._locator = locator or ToolLocator(config)
        self._injectors = injectors if injectors is not None else default_injectors()
        self._classifier = classifier or FormatClassifier(self._locator)
        self._repackager = repackager or ContainerRepackager(
            config,
            self._locator,
            elf_injector=self._injectors.get(Format.ELF),
            classifier=self._classifier,
        )

    def classify(self, path: Path) -> Artifact:
        return Artifact(path=path, format=self._classifier.classify(path))

    def inject(self, request: InjectionRequest) -> Path:
        """Inject ``request.libraries`` and return the output path."""
        request.validate()
        artifact = self.classify(request.input_path)
        output_path = request.resolved_output
        log.info(
            "inject",
            input=str(artifact.path),
            format=artifact.format.value,
            output=str(output_path),
            libraries=request.library_names,
        )

        fmt = artifact.format
        if fmt is Format.UNKNOWN:
            fmt = self._classifier.sniff(artifact.path)
            if fmt not in BINARY_FORMATS:
                raise UnsupportedFormatError(f"Unrecognized format: {artifact.path}")

        if fmt in BINARY_FORMATS:
            injector = self._injectors.get(fmt)
            if injector is None:
                raise UnsupportedFormatError(f"No injector registered for {fmt.value}: {artifact.path}")
            output_path.parent.mkdir(parents=True, exist_ok=True)
            injector.add_libraries(artifact.path, output_path, request.library_names)
            return output_path

        if fmt is Format.APK:
            return self._repackager.repackage(request).output

        if fmt is Format.IPA:
            raise FormatNotImplementedError(f"IPA injection is not implemented: {artifact.path}")

        raise UnsupportedFormatError(f"Unrecognized format: {artifact.path}")
