"""Skill tracking and skill-ordered match selection."""

from skillmatch.matchmaking.models import (
    HISTORY_SIZE,
    MATCH_SIZE,
    MatchmakerConfig,
    PlayerSkillTracker,
    PlayerStanding,
)
from skillmatch.matchmaking.pool import MatchPool

__all__ = [
    "MatchPool",
    "PlayerSkillTracker",
    "PlayerStanding",
    "MatchmakerConfig",
    "HISTORY_SIZE",
    "MATCH_SIZE",
]
