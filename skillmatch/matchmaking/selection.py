"""Selection of match participants by skill."""

from skillmatch.matchmaking.models import PlayerSkillTracker


def rank_by_skill(candidates: list[PlayerSkillTracker]) -> list[PlayerSkillTracker]:
    """Return a new list of candidates sorted by ascending skill.

    Skill is read from each tracker at call time. The sort is stable, so
    players with equal skill keep their registration order.
    """
    return sorted(candidates, key=lambda p: p.calculate_skill())


def select_match(
    candidates: list[PlayerSkillTracker],
    match_size: int
) -> list[PlayerSkillTracker]:
    """Select the lowest-skilled players for the next match.

    Args:
        candidates: Registered players, in registration order
        match_size: Maximum number of players in a match

    Returns:
        Up to ``match_size`` players in ascending skill order; fewer when the
        pool is smaller, empty when it is empty
    """
    return rank_by_skill(candidates)[:match_size]
