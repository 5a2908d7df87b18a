"""Environment configuration for skillmatch."""

import os

from skillmatch.matchmaking.models import HISTORY_SIZE, MATCH_SIZE, MatchmakerConfig

MATCH_SIZE_ENV = "SKILLMATCH_MATCH_SIZE"
HISTORY_SIZE_ENV = "SKILLMATCH_HISTORY_SIZE"
LOG_LEVEL_ENV = "SKILLMATCH_LOG_LEVEL"


def load_config() -> MatchmakerConfig:
    """Build a MatchmakerConfig from ``SKILLMATCH_*`` environment variables.

    Unset variables fall back to the built-in defaults. Values are coerced and
    validated by pydantic, so a non-numeric or non-positive size raises
    ``pydantic.ValidationError``.
    """
    return MatchmakerConfig(
        match_size=os.environ.get(MATCH_SIZE_ENV, MATCH_SIZE),
        history_size=os.environ.get(HISTORY_SIZE_ENV, HISTORY_SIZE),
        log_level=os.environ.get(LOG_LEVEL_ENV, "INFO"),
    )
