"""structlog setup for the luject CLI.

User-facing progress ("extract", "inject to", "resign") goes through the
rich console; structlog carries the diagnostic events on stderr. Both
structlog and LIEF's own logger follow the ``logging`` config section,
and ``--verbose`` turns everything up to DEBUG.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from luject.config.models import LoggingConfig

_LIEF_LEVELS = {
    "DEBUG": "DEBUG",
    "INFO": "INFO",
    "WARNING": "WARN",
    "WARN": "WARN",
    "ERROR": "ERROR",
    "CRITICAL": "CRITICAL",
}


def _renderer(json_output: bool) -> structlog.types.Processor:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(level: str = "WARNING", json_output: bool = False) -> None:
    """Route structlog events through a single stderr handler at ``level``."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))


def set_lief_level(level: str) -> None:
    import lief

    name = _LIEF_LEVELS.get(level.upper(), "ERROR")
    lief.logging.set_level(getattr(lief.logging.LEVEL, name))


def setup_cli_logging(config: LoggingConfig, verbose: bool = False) -> str:
    """Apply the ``logging`` config section; returns the effective level."""
    level = "DEBUG" if verbose else config.level.upper()
    setup_logging(level=level, json_output=config.json_output)
    set_lief_level("DEBUG" if verbose else config.lief_level)
    return level


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
