"""Pure skill calculations over a score window."""


def mean_skill(scores: list[int]) -> float:
    """Calculate skill as the arithmetic mean of recent scores.

    Args:
        scores: Recent match scores, oldest first

    Returns:
        Mean score as a float, or 0.0 when no scores are recorded
    """
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def push_score(history: list[int], score: int, limit: int) -> bool:
    """Append a score and evict the oldest entries beyond ``limit``.

    Args:
        history: Score window, mutated in place
        score: New match score (any integer, negatives included)
        limit: Maximum window length

    Returns:
        True if at least one old score was evicted
    """
    history.append(score)
    overflow = len(history) - limit
    if overflow > 0:
        del history[:overflow]
        return True
    return False
