"""Unit tests for match pool selection."""

from typing import Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from skillmatch.matchmaking.models import MATCH_SIZE, MatchmakerConfig, PlayerSkillTracker
from skillmatch.matchmaking.pool import MatchPool
from skillmatch.matchmaking.selection import rank_by_skill, select_match

# Mark all tests in this module as unit tests
pytestmark = pytest.mark.unit


def make_player(skill: int) -> PlayerSkillTracker:
    """Factory to create a tracker whose skill equals ``skill``."""
    tracker = PlayerSkillTracker()
    tracker.record_score(skill)
    return tracker


def make_pool(*players: PlayerSkillTracker, **config: Any) -> MatchPool:
    pool = MatchPool(config=MatchmakerConfig(**config))
    for player in players:
        pool.add_player(player)
    return pool


class RecordingHandler:
    """Event handler that records calls for assertions."""

    def __init__(self):
        self.added: list[int] = []
        self.matches: list[list[PlayerSkillTracker]] = []

    def on_player_added(self, player, pool_size, **kwargs):
        self.added.append(pool_size)

    def on_score_recorded(self, player_id, score, skill, **kwargs):
        pass

    def on_match_found(self, players, **kwargs):
        self.matches.append(players)


class TestSelection:
    """Tests for rank_by_skill and select_match."""

    def test_rank_ascending(self):
        a, b, c = make_player(30), make_player(10), make_player(20)
        ranked = rank_by_skill([a, b, c])
        assert [p.calculate_skill() for p in ranked] == [10.0, 20.0, 30.0]

    def test_ties_keep_registration_order(self):
        """Equal skills keep their original order."""
        first, second, third = make_player(5), make_player(5), make_player(1)
        ranked = rank_by_skill([first, second, third])
        assert ranked[0] is third
        assert ranked[1] is first
        assert ranked[2] is second

    def test_select_slices_to_size(self):
        players = [make_player(s) for s in (4, 3, 2, 1)]
        match = select_match(players, 3)
        assert [p.calculate_skill() for p in match] == [1.0, 2.0, 3.0]


class TestAddPlayer:
    """Tests for MatchPool.add_player."""

    def test_appends_in_order(self):
        a, b = make_player(1), make_player(2)
        pool = make_pool(a, b)
        assert pool.candidates[0] is a
        assert pool.candidates[1] is b
        assert len(pool) == 2

    def test_duplicates_allowed(self):
        """The same tracker can be registered more than once."""
        a = make_player(1)
        pool = make_pool(a, a)
        assert len(pool) == 2
        match = pool.find_match()
        assert match[0] is a
        assert match[1] is a

    def test_rejects_none(self):
        pool = MatchPool()
        with pytest.raises(TypeError):
            pool.add_player(None)
        assert len(pool) == 0

    def test_rejects_non_tracker(self):
        with pytest.raises(TypeError, match="PlayerSkillTracker"):
            MatchPool().add_player("player-1")

    def test_tracker_shared_between_pools(self):
        """A tracker in two pools is the same object in both."""
        a = make_player(1)
        pool1, pool2 = make_pool(a), make_pool(a)
        a.record_score(99)
        assert pool1.find_match()[0].calculate_skill() == pool2.find_match()[0].calculate_skill()


class TestFindMatch:
    """Tests for MatchPool.find_match."""

    def test_default_match_size(self):
        assert MatchPool().match_size == MATCH_SIZE == 2

    def test_empty_pool(self):
        """An empty pool gives an empty match."""
        assert MatchPool().find_match() == []

    def test_single_player(self):
        """A pool of one returns that player."""
        player = make_player(5)
        match = make_pool(player).find_match()
        assert len(match) == 1
        assert match[0] is player
        assert match[0].calculate_skill() == pytest.approx(5.0)

    def test_picks_two_lowest_in_order(self):
        """Skills 30, 10, 20 give the 10 player then the 20 player."""
        p30, p10, p20 = make_player(30), make_player(10), make_player(20)
        match = make_pool(p30, p10, p20).find_match()
        assert len(match) == 2
        assert match[0] is p10
        assert match[1] is p20

    def test_pool_not_mutated(self):
        """Selecting a match leaves candidates in registration order."""
        p30, p10, p20 = make_player(30), make_player(10), make_player(20)
        pool = make_pool(p30, p10, p20)
        pool.find_match()
        assert len(pool.candidates) == 3
        assert all(a is b for a, b in zip(pool.candidates, [p30, p10, p20]))

    def test_equal_scores_are_distinct_players(self):
        """Trackers with identical scores compare equal but stay separate entries."""
        first, second = make_player(7), make_player(7)
        assert first == second
        assert first is not second

        match = make_pool(first, second).find_match()
        assert match[0] is first
        assert match[1] is second

    def test_consecutive_calls_equal(self):
        pool = make_pool(make_player(3), make_player(1), make_player(2))
        first = pool.find_match()
        second = pool.find_match()
        assert len(first) == len(second)
        assert all(a is b for a, b in zip(first, second))

    def test_skill_read_at_call_time(self):
        """Scores recorded after registration change the next match."""
        low, high = make_player(1), make_player(50)
        pool = make_pool(low, high, make_player(100), match_size=1)
        assert pool.find_match()[0] is low

        for _ in range(5):
            low.record_score(1000)
        assert pool.find_match()[0] is high

    def test_unscored_player_has_lowest_skill(self):
        """A new player (skill 0.0) sorts ahead of positive skills."""
        newcomer = PlayerSkillTracker()
        pool = make_pool(make_player(10), newcomer)
        assert pool.find_match()[0] is newcomer

    def test_configured_match_size(self):
        players = [make_player(s) for s in (5, 4, 3, 2, 1)]
        match = make_pool(*players, match_size=4).find_match()
        assert [p.calculate_skill() for p in match] == [1.0, 2.0, 3.0, 4.0]

    def test_invalid_match_size_rejected(self):
        with pytest.raises(ValidationError):
            MatchmakerConfig(match_size=0)

    @given(skills=st.lists(st.integers(min_value=-100, max_value=100), max_size=15))
    @settings(max_examples=100)
    def test_match_is_lowest_skills(self, skills):
        """Property test: match holds the smallest skills, ascending."""
        pool = make_pool(*(make_player(s) for s in skills))
        match = pool.find_match()
        assert len(match) == min(MATCH_SIZE, len(skills))
        assert [p.calculate_skill() for p in match] == sorted(float(s) for s in skills)[:MATCH_SIZE]


class TestEvents:
    """Tests for MatchPool event emission."""

    def test_events_emitted(self):
        handler = RecordingHandler()
        pool = MatchPool(event_handler=handler)
        a, b = make_player(2), make_player(1)
        pool.add_player(a)
        pool.add_player(b)
        match = pool.find_match()

        assert handler.added == [1, 2]
        assert len(handler.matches) == 1
        assert handler.matches[0] is match
