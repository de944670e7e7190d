"""Optional zipalign pass over a signed container."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from luject.config.models import LujectConfig
from luject.tools.locator import ToolLocator
from luject.utils.logging import get_logger
from luject.utils.process import run_tool

log = get_logger(__name__)


class Aligner:
    def __init__(self, config: LujectConfig, locator: ToolLocator, verbose: bool = False) -> None:
        self._config = config
        self._locator = locator
        self._verbose = verbose

    def align(self, container: Path) -> bool:
        """Align ``container`` in place. Returns False when zipalign is unavailable."""
        zipalign = self._locator.zipalign(container)
        if zipalign is None:
            log.info("zipalign_unavailable", container=str(container))
            return False

        fd, tmp_name = tempfile.mkstemp(suffix=container.suffix, dir=container.parent)
        os.close(fd)
        tmp = Path(tmp_name)
        try:
            run_tool(
                [zipalign, "-f", "-v", str(self._config.container.alignment), container, tmp],
                verbose=self._verbose,
            )
            os.replace(tmp, container)
        finally:
            tmp.unlink(missing_ok=True)

        log.info("container_aligned", container=str(container))
        return True
