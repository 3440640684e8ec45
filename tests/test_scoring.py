"""Unit tests for leaderboard scoring."""

import pytest

from pickem.models import Participant
from pickem.scoring import (
    compute_leaderboard,
    has_scorable_results,
    pick_matches,
    score_breakdown,
    score_participant,
)


class TestHasScorableResults:
    """Tests for the leaderboard display gate."""

    def test_no_results(self):
        """Test empty result set hides the leaderboard."""
        assert has_scorable_results({}) is False

    def test_only_undecided_games(self):
        """Test weeks with only null outcomes don't count."""
        assert has_scorable_results({'1': [None, None], '2': []}) is False

    def test_one_decided_game(self):
        """Test a single decided game anywhere enables scoring."""
        assert has_scorable_results({'1': [None, None], '2': [None, 1]}) is True

    def test_home_win_counts(self):
        """Test outcome 0 (home win) is a defined result, not falsy."""
        assert has_scorable_results({'1': [0]}) is True


class TestPickMatches:
    """Tests for side/outcome comparison."""

    @pytest.mark.parametrize(
        'side,outcome,expected',
        [
            ('home', 0, True),
            ('away', 1, True),
            ('home', 1, False),
            ('away', 0, False),
            ('home', None, False),
            (None, 0, False),
        ],
    )
    def test_basic(self, side, outcome, expected):
        """Test home=0 and away=1 mapping."""
        assert pick_matches(side, outcome) is expected

    def test_invalid_side_never_matches(self):
        """Test unknown side values never match and never raise."""
        assert pick_matches('draw', 0) is False
        assert pick_matches('draw', 1) is False
        assert pick_matches('HOME', 0) is False
        assert pick_matches(0, 0) is False


class TestScoreParticipant:
    """Tests for counting correct picks."""

    def test_scenario_partial_picks(self):
        """Test 3 games, picks for first two, results [0, 1, 1] -> 2 correct."""
        picks = {'1': {0: 'home', 1: 'away'}}
        results = {'1': [0, 1, 1]}
        assert score_participant(picks, results) == 2

    def test_wrong_pick(self):
        """Test picking away when home won scores nothing."""
        picks = {'1': {0: 'away'}}
        results = {'1': [0, None, None]}
        assert score_participant(picks, results) == 0

    def test_undecided_games_skipped(self):
        """Test picks on undecided games don't count either way."""
        picks = {'1': {0: 'home', 1: 'home', 2: 'home'}}
        results = {'1': [0, None]}
        assert score_participant(picks, results) == 1

    def test_multiple_weeks(self):
        """Test correct picks are summed across weeks."""
        picks = {
            '1': {0: 'home', 1: 'home'},
            '2': {0: 'away', 1: 'away', 2: 'home'},
        }
        results = {'1': [0, 1], '2': [1, 1, 0]}
        assert score_participant(picks, results) == 4

    def test_weeks_without_results_ignored(self):
        """Test picks for weeks with no results score nothing."""
        picks = {'3': {0: 'home'}}
        results = {'1': [0]}
        assert score_participant(picks, results) == 0

    def test_pick_for_position_past_results(self):
        """Test out-of-range picks are simply not scorable."""
        picks = {'1': {0: 'home', 7: 'home'}}
        results = {'1': [0]}
        assert score_participant(picks, results) == 1

    def test_tiebreaker_not_used(self):
        """Test tiebreakers have no effect on scoring."""
        a = Participant(name='A', picks={'1': {0: 'home'}}, tiebreakers={'1': '10'})
        b = Participant(name='B', picks={'1': {0: 'home'}}, tiebreakers={'1': '99'})
        board = compute_leaderboard({'1': [0]}, [a, b])
        assert [e.correct for e in board] == [1, 1]
        assert [e.name for e in board] == ['A', 'B']

    def test_monotonic(self):
        """Test adding one correct pick raises the score by exactly 1."""
        results = {'1': [0, 1, 1]}
        picks = {'1': {0: 'home'}}
        before = score_participant(picks, results)
        picks['1'][2] = 'away'
        assert score_participant(picks, results) == before + 1

    def test_breakdown_per_week(self):
        """Test per-week correct counts."""
        picks = {'1': {0: 'home'}, '2': {0: 'home'}}
        results = {'1': [0], '2': [1], '3': [None]}
        assert score_breakdown(picks, results) == {'1': 1, '2': 0, '3': 0}


class TestLeaderboard:
    """Tests for ranking participants."""

    def test_hidden_without_results(self):
        """Test leaderboard is empty when no results are recorded."""
        local = Participant(name='Me', picks={'1': {0: 'home'}})
        assert compute_leaderboard({}, [local]) == []
        assert compute_leaderboard({'1': [None]}, [local]) == []

    def test_sorted_descending(self):
        """Test higher scores rank first."""
        results = {'1': [0, 1, 0]}
        low = Participant(name='Low', picks={'1': {0: 'away'}})
        high = Participant(name='High', picks={'1': {0: 'home', 1: 'away', 2: 'home'}})
        board = compute_leaderboard(results, [low, high])
        assert [(e.rank, e.name, e.correct) for e in board] == [
            (1, 'High', 3),
            (2, 'Low', 0),
        ]

    def test_ties_keep_roster_order(self):
        """Test tied participants keep roster order and take adjacent ranks."""
        results = {'1': [0, 0, 0]}
        all_home = {'1': {0: 'home', 1: 'home', 2: 'home'}}
        local = Participant(name='Zed', picks=all_home)
        sam = Participant(name='Sam', picks=dict(all_home))
        board = compute_leaderboard(results, [local, sam])
        assert [e.name for e in board] == ['Zed', 'Sam']
        assert [e.rank for e in board] == [1, 2]
        assert [e.correct for e in board] == [3, 3]

    def test_ties_behind_leader_keep_order(self):
        """Test stability holds for ties below the top spot."""
        results = {'1': [0, 0]}
        a = Participant(name='A', picks={'1': {0: 'home'}})
        b = Participant(name='B', picks={'1': {0: 'home', 1: 'home'}})
        c = Participant(name='C', picks={'1': {1: 'home'}})
        board = compute_leaderboard(results, [a, b, c])
        assert [e.name for e in board] == ['B', 'A', 'C']

    def test_other_participants_unaffected(self):
        """Test adding a correct pick for one player never lowers another's score."""
        results = {'1': [1, 1]}
        a = Participant(name='A', picks={'1': {0: 'away'}})
        b = Participant(name='B', picks={'1': {0: 'away', 1: 'away'}})
        before = {e.name: e.correct for e in compute_leaderboard(results, [a, b])}
        a.picks['1'][1] = 'away'
        after = {e.name: e.correct for e in compute_leaderboard(results, [a, b])}
        assert after['A'] == before['A'] + 1
        assert after['B'] == before['B']

    def test_duplicate_names_listed_separately(self):
        """Test participants sharing a name are separate entries."""
        results = {'1': [0]}
        first = Participant(name='Alex', picks={'1': {0: 'home'}})
        second = Participant(name='Alex', picks={'1': {0: 'away'}})
        board = compute_leaderboard(results, [first, second])
        assert [(e.name, e.correct) for e in board] == [('Alex', 1), ('Alex', 0)]
