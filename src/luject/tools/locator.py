"""Discovery of the external programs the injection pipeline shells out to."""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Callable
from pathlib import Path

from luject.config.defaults import DEFAULT_RESOURCES_DIR
from luject.config.models import LujectConfig
from luject.errors import ToolNotFoundError
from luject.utils.logging import get_logger
from luject.utils.process import can_execute

log = get_logger(__name__)

ProgramCheck = Callable[[Path], bool]


def _exe(name: str) -> str:
    return name + ".exe" if sys.platform == "win32" else name


class ToolLocator:
    """Resolves tool paths on every call; nothing is cached between runs."""

    def __init__(self, config: LujectConfig) -> None:
        self._config = config

    def find_program(
        self,
        name: str,
        override: str | None = None,
        check: ProgramCheck | None = None,
    ) -> Path | None:
        """Return the program path, or None if missing or failing ``check``."""
        candidate: Path | None = None
        if override:
            p = Path(override)
            if p.is_file():
                candidate = p
            else:
                log.debug("tool_override_missing", tool=name, path=override)
        if candidate is None:
            found = shutil.which(name)
            candidate = Path(found) if found else None

        if candidate is None:
            log.debug("tool_not_found", tool=name)
            return None
        if check is not None and not check(candidate):
            log.debug("tool_check_rejected", tool=name, path=str(candidate))
            return None
        return candidate

    def require_program(
        self,
        name: str,
        override: str | None = None,
        check: ProgramCheck | None = None,
        hint: str = "",
    ) -> Path:
        program = self.find_program(name, override=override, check=check)
        if program is None:
            raise ToolNotFoundError(name, hint)
        return program

    def zip(self) -> Path:
        return self.require_program("zip", self._config.tools.zip, hint="install zip and add it to PATH")

    def file(self) -> Path | None:
        return self.find_program("file", self._config.tools.file)

    def zipalign(self, sample: str | Path) -> Path | None:
        """Find zipalign and confirm it runs against ``sample`` before trusting it."""
        alignment = str(self._config.container.alignment)

        def _check(program: Path) -> bool:
            return can_execute([program, "-c", alignment, sample])

        return self.find_program("zipalign", self._config.tools.zipalign, check=_check)

    def java_home(self) -> Path:
        java_home = self._config.tools.java_home or os.environ.get("JAVA_HOME")
        if not java_home:
            raise ToolNotFoundError("$JAVA_HOME", "set JAVA_HOME to a JDK installation")
        return Path(java_home)

    def jarsigner(self) -> Path:
        jarsigner = self.java_home() / "bin" / _exe("jarsigner")
        if not jarsigner.is_file():
            raise ToolNotFoundError(str(jarsigner), "check that $JAVA_HOME points at a JDK")
        return jarsigner

    def keytool(self) -> Path:
        if self._config.tools.keytool:
            return self.require_program("keytool", self._config.tools.keytool)
        keytool = self.java_home() / "bin" / _exe("keytool")
        if not keytool.is_file():
            raise ToolNotFoundError(str(keytool), "check that $JAVA_HOME points at a JDK")
        return keytool

    def resources_dir(self) -> Path:
        if self._config.resources_dir:
            return Path(self._config.resources_dir).expanduser()
        return DEFAULT_RESOURCES_DIR
