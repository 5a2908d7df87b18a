"""Match pool that ranks registered players by skill."""

from skillmatch.events import EventHandler, NullEventHandler
from skillmatch.logging import get_logger
from skillmatch.matchmaking.models import MatchmakerConfig, PlayerSkillTracker
from skillmatch.matchmaking.selection import select_match

log = get_logger(__name__)


class MatchPool:
    """Pool of candidate players that produces skill-ordered matches.

    The pool holds references to trackers it does not own; the same tracker
    can sit in several pools, or in one pool more than once. Players are
    never removed. A pool is not thread-safe: callers that share it across
    threads must serialize ``add_player`` and ``find_match`` themselves.
    """

    def __init__(
        self,
        config: MatchmakerConfig | None = None,
        event_handler: EventHandler | None = None
    ):
        """Initialize an empty pool.

        Args:
            config: Matchmaking configuration (uses defaults if None)
            event_handler: Optional event handler (uses NullEventHandler if None)
        """
        self.config = config or MatchmakerConfig()
        self.event_handler = event_handler or NullEventHandler()
        self.candidates: list[PlayerSkillTracker] = []

    @property
    def match_size(self) -> int:
        return self.config.match_size

    def add_player(self, player: PlayerSkillTracker) -> None:
        """Register a player as a candidate for future matches.

        Raises:
            TypeError: If ``player`` is not a PlayerSkillTracker
        """
        if not isinstance(player, PlayerSkillTracker):
            raise TypeError(
                f"Expected PlayerSkillTracker, got {type(player).__name__}"
            )

        self.candidates.append(player)
        log.debug("Player added to pool", pool_size=len(self.candidates))
        self.event_handler.on_player_added(player=player, pool_size=len(self.candidates))

    def find_match(self) -> list[PlayerSkillTracker]:
        """Select the next match without modifying the pool.

        Returns:
            Up to ``match_size`` players sorted by ascending current skill
        """
        match = select_match(self.candidates, self.match_size)
        log.debug(
            "Match selected",
            pool_size=len(self.candidates),
            match_size=len(match),
            skills=[p.calculate_skill() for p in match],
        )
        self.event_handler.on_match_found(players=match)
        return match

    def __len__(self) -> int:
        return len(self.candidates)
