"""Capability interface shared by the per-format dependency injectors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path


class FormatInjector(ABC):
    """Adds shared-library dependencies to a single binary.

    Implementations must accept ``input_path == output_path`` and leave
    names that are already present alone, so re-running is safe.
    """

    name: str = "base"

    @abstractmethod
    def add_libraries(
        self,
        input_path: Path,
        output_path: Path,
        library_names: Sequence[str],
    ) -> None:
        """Write ``input_path`` to ``output_path`` with ``library_names`` added."""
        ...

    @staticmethod
    def _missing(present: set[str], library_names: Sequence[str], fold_case: bool = False) -> list[str]:
        seen = {p.lower() for p in present} if fold_case else set(present)
        missing = []
        for name in library_names:
            key = name.lower() if fold_case else name
            if key not in seen:
                missing.append(name)
                seen.add(key)
        return missing
