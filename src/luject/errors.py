"""Exception hierarchy for injection failures."""

from __future__ import annotations

from collections.abc import Sequence


class LujectError(Exception):
    """Base class for every failure raised by luject."""


class InputNotFoundError(LujectError, FileNotFoundError):
    """An input artifact, library or container directory does not exist."""

    def __init__(self, path: object, what: str = "file") -> None:
        self.path = str(path)
        self.what = what
        super().__init__(f"{what} not found: {self.path}")

    def __str__(self) -> str:
        return f"{self.what} not found: {self.path}"


class ToolNotFoundError(LujectError, FileNotFoundError):
    """A required external program could not be located."""

    def __init__(self, tool: str, hint: str = "") -> None:
        self.tool = tool
        self.hint = hint
        super().__init__(self.__str__())

    def __str__(self) -> str:
        msg = f"{self.tool} not found"
        return f"{msg} ({self.hint})" if self.hint else msg


class ToolExecutionError(LujectError, RuntimeError):
    """An external program exited with a non-zero status."""

    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.argv = [str(a) for a in argv]
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(self.__str__())

    def __str__(self) -> str:
        msg = f"{self.argv[0]} failed with exit code {self.returncode}"
        if self.stderr:
            msg += f": {self.stderr.strip()[:500]}"
        return msg


class ArchiveError(LujectError, RuntimeError):
    """A container could not be extracted."""


class InjectionError(LujectError, RuntimeError):
    """A binary could not be parsed or rewritten."""


class UnsupportedFormatError(LujectError, ValueError):
    """The input format could not be recognized."""


class FormatNotImplementedError(LujectError, NotImplementedError):
    """The input format is recognized but injection is not implemented for it."""
