"""Data models for skill-based matchmaking."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from skillmatch.logging import get_logger
from skillmatch.matchmaking.skill import mean_skill, push_score

log = get_logger(__name__)

# Number of recent scores that back a player's skill
HISTORY_SIZE = 5

# Number of players returned by a single match request
MATCH_SIZE = 2


class PlayerSkillTracker(BaseModel):
    """A single player's recent scores and the skill derived from them.

    The history is a FIFO window: once it holds ``history_size`` scores,
    recording another one drops the oldest. Trackers are shared by reference,
    so a pool holding one sees every score recorded through it. Assigning
    ``history`` or ``history_size`` re-applies the window.

    Equality is pydantic value equality: two trackers with the same scores
    compare equal. Use ``is`` to tell players apart.
    """
    model_config = ConfigDict(validate_assignment=True)

    history: list[int] = Field(default_factory=list)
    history_size: int = Field(HISTORY_SIZE, ge=1)
    matches_recorded: int = Field(0, ge=0)  # lifetime count, not bounded by the window

    @model_validator(mode="after")
    def trim_history(self) -> "PlayerSkillTracker":
        if self.matches_recorded < len(self.history):
            self.matches_recorded = len(self.history)
        overflow = len(self.history) - self.history_size
        if overflow > 0:
            del self.history[:overflow]
        return self

    def record_score(self, score: int) -> None:
        """Record a match score, evicting the oldest once the window is full."""
        self.matches_recorded += 1
        evicted = push_score(self.history, score, self.history_size)
        log.debug("Score recorded", score=score, evicted=evicted, window=len(self.history))

    def calculate_skill(self) -> float:
        """Mean of the current history, 0.0 for a player with no scores."""
        return mean_skill(self.history)


class PlayerStanding(BaseModel):
    """Read-only snapshot of a registered player."""
    player_id: str
    skill: float
    history: list[int]
    matches_recorded: int = 0


class MatchmakerConfig(BaseModel):
    """Configuration for matchmaking."""
    match_size: int = Field(MATCH_SIZE, ge=1)
    history_size: int = Field(HISTORY_SIZE, ge=1)
    log_level: str = "INFO"
