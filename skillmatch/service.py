"""Session layer that exposes matchmaking to a host by player id.

The core types work with tracker references. Hosts such as a lobby service
or a scripting bridge usually hold string identifiers instead, so this module
keeps the id-to-tracker registry and returns plain data structures. It has no
presentation dependencies.
"""

from skillmatch.config import load_config
from skillmatch.events import EventHandler, NullEventHandler
from skillmatch.logging import get_logger
from skillmatch.matchmaking.models import MatchmakerConfig, PlayerSkillTracker, PlayerStanding
from skillmatch.matchmaking.pool import MatchPool
from skillmatch.matchmaking.selection import rank_by_skill

logger = get_logger(__name__)


class MatchmakingSession:
    """Registry of players by id backed by a single MatchPool.

    Every registered player is added to the pool once. Players stay in the
    pool after being matched; removal is left to the host.
    """

    def __init__(
        self,
        config: MatchmakerConfig | None = None,
        event_handler: EventHandler | None = None
    ):
        self.config = config or load_config()
        self.event_handler = event_handler or NullEventHandler()
        self.pool = MatchPool(config=self.config, event_handler=self.event_handler)
        self.players: dict[str, PlayerSkillTracker] = {}
        # Trackers are unhashable pydantic models; map by object identity
        self._ids_by_ref: dict[int, str] = {}

    def register(self, player_id: str, history: list[int] | None = None) -> PlayerSkillTracker:
        """Create a tracker for a new player and add it to the pool.

        Args:
            player_id: Unique player identifier
            history: Optional scores to seed the window with, oldest first

        Returns:
            The new tracker

        Raises:
            ValueError: If the id is already registered
        """
        if player_id in self.players:
            raise ValueError(f"Player already registered: {player_id}")

        tracker = PlayerSkillTracker(
            history=list(history or []),
            history_size=self.config.history_size,
        )
        self.players[player_id] = tracker
        self._ids_by_ref[id(tracker)] = player_id
        self.pool.add_player(tracker)

        logger.info("Player registered", player_id=player_id, skill=tracker.calculate_skill())
        return tracker

    def get(self, player_id: str) -> PlayerSkillTracker:
        """Look up a tracker, raising KeyError for unknown ids."""
        try:
            return self.players[player_id]
        except KeyError:
            raise KeyError(f"Unknown player: {player_id}") from None

    def record_score(self, player_id: str, score: int) -> float:
        """Record a match score for a player and return their new skill."""
        tracker = self.get(player_id)
        tracker.record_score(score)
        skill = tracker.calculate_skill()

        logger.debug("Score recorded for player", player_id=player_id, score=score, skill=skill)
        self.event_handler.on_score_recorded(player_id=player_id, score=score, skill=skill)
        return skill

    def _player_id(self, tracker: PlayerSkillTracker) -> str:
        try:
            return self._ids_by_ref[id(tracker)]
        except KeyError:
            raise KeyError(
                "Pool holds a tracker that was not registered with this session; "
                "add players through register()"
            ) from None

    def skill(self, player_id: str) -> float:
        return self.get(player_id).calculate_skill()

    def find_match(self) -> list[str]:
        """Return the ids of the next match, lowest skill first."""
        match = self.pool.find_match()
        player_ids = [self._player_id(tracker) for tracker in match]
        logger.info("Match found", players=player_ids)
        return player_ids

    def standings(self) -> list[PlayerStanding]:
        """Snapshot every player, ordered by ascending skill."""
        return [
            PlayerStanding(
                player_id=self._player_id(tracker),
                skill=tracker.calculate_skill(),
                history=list(tracker.history),
                matches_recorded=tracker.matches_recorded,
            )
            for tracker in rank_by_skill(self.pool.candidates)
        ]

    def __len__(self) -> int:
        return len(self.players)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self.players
