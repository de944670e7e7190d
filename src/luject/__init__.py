"""luject: static injector of dynamic libraries for applications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from luject.version import __version__

if TYPE_CHECKING:
    from luject.config.models import LujectConfig
    from luject.injection.dispatcher import InjectionDispatcher
    from luject.tools.locator import ToolLocator


@dataclass
class LujectContext:
    """Dependency-injection container shared by the CLI."""

    config: LujectConfig | None = None
    locator: ToolLocator | None = None
    dispatcher: InjectionDispatcher | None = None

    def ensure_config(self) -> LujectConfig:
        if self.config is None:
            from luject.config.loader import load_config

            self.config = load_config()
        return self.config

    def ensure_locator(self) -> ToolLocator:
        if self.locator is None:
            from luject.tools.locator import ToolLocator

            self.locator = ToolLocator(self.ensure_config())
        return self.locator

    def ensure_dispatcher(self) -> InjectionDispatcher:
        if self.dispatcher is None:
            from luject.injection.dispatcher import InjectionDispatcher

            self.dispatcher = InjectionDispatcher(
                self.ensure_config(), locator=self.ensure_locator()
            )
        return self.dispatcher

    def reset(self) -> None:
        self.config = None
        self.locator = None
        self.dispatcher = None


__all__ = ["LujectContext", "__version__"]
