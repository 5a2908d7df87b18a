"""Event system for decoupling matchmaking from its host.

Core classes emit events through an ``EventHandler`` without knowing who
listens. A lobby service, a UI, or a scripting bridge can subscribe by
implementing the protocol.
"""

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from skillmatch.matchmaking.models import PlayerSkillTracker


class EventHandler(Protocol):
    """Protocol for handlers that receive matchmaking events."""

    def on_player_added(
        self,
        player: "PlayerSkillTracker",
        pool_size: int,
        **kwargs: Any
    ) -> None:
        """Called when a player joins a match pool.

        Args:
            player: The tracker that was added
            pool_size: Number of candidates after the addition
            **kwargs: Additional context
        """
        ...

    def on_score_recorded(
        self,
        player_id: str,
        score: int,
        skill: float,
        **kwargs: Any
    ) -> None:
        """Called when a session records a match score.

        Args:
            player_id: Identifier of the player
            score: The recorded score
            skill: Player's skill after recording
            **kwargs: Additional context
        """
        ...

    def on_match_found(
        self,
        players: list["PlayerSkillTracker"],
        **kwargs: Any
    ) -> None:
        """Called when a match request returns.

        Args:
            players: Selected players in ascending skill order (may be empty)
            **kwargs: Additional context
        """
        ...


class NullEventHandler:
    """Event handler that ignores every event."""

    def on_player_added(self, *args: Any, **kwargs: Any) -> None:
        pass

    def on_score_recorded(self, *args: Any, **kwargs: Any) -> None:
        pass

    def on_match_found(self, *args: Any, **kwargs: Any) -> None:
        pass
