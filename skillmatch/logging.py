"""Structured logging for skillmatch.

Library modules only call ``get_logger``. The embedding host calls
``configure_logging`` once at startup with the same ``MatchmakerConfig`` it
hands to sessions, so one object decides both the match rules and the log
level. Lines are JSON for hosts that ship logs elsewhere, or Rich-backed
console output for local runs.
"""

import logging
from typing import TYPE_CHECKING

import structlog
from structlog.processors import (
    JSONRenderer,
    StackInfoRenderer,
    TimeStamper,
    add_log_level,
    format_exc_info,
)

if TYPE_CHECKING:
    from skillmatch.matchmaking.models import MatchmakerConfig


def _level_number(name: str) -> int:
    level = logging.getLevelName(name.upper())
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.INFO


def _renderer(cli_mode: bool):
    if cli_mode:
        from structlog.dev import ConsoleRenderer
        return ConsoleRenderer(colors=False)
    return JSONRenderer(sort_keys=True)


def configure_logging(
    config: "MatchmakerConfig | None" = None,
    cli_mode: bool = False
) -> None:
    """Install the structlog pipeline for this process.

    Args:
        config: Source of ``log_level``. When None, the environment decides
                via ``load_config`` (``SKILLMATCH_LOG_LEVEL``, default INFO).
        cli_mode: Render human-readable console lines instead of JSON.
    """
    if config is None:
        from skillmatch.config import load_config
        config = load_config()

    structlog.configure(
        processors=[
            add_log_level,
            TimeStamper(fmt="iso", key="ts"),
            StackInfoRenderer(),
            format_exc_info,
            _renderer(cli_mode),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(config.log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Return a structlog logger, named after the calling module when given."""
    return structlog.get_logger(name) if name else structlog.get_logger()
