"""Per-format dependency injectors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from luject.formats.base import FormatInjector
from luject.formats.elf import ElfInjector
from luject.formats.macho import MachOInjector
from luject.formats.pe import PEInjector

if TYPE_CHECKING:
    from luject.injection.models import Format


def default_injectors() -> dict[Format, FormatInjector]:
    from luject.injection.models import Format

    return {
        Format.ELF: ElfInjector(),
        Format.MACHO: MachOInjector(),
        Format.PE: PEInjector(),
    }


__all__ = ["ElfInjector", "FormatInjector", "MachOInjector", "PEInjector", "default_injectors"]
