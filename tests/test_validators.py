"""Unit tests for schedule alignment checks."""

from pickem.models import Matchup, Participant
from pickem.validators import (
    find_misaligned_picks,
    find_misaligned_results,
    validate_state,
    validate_tiebreaker,
)

SCHEDULE = {
    '1': [Matchup('Cowboys', 'Giants'), Matchup('Packers', 'Bears')],
    '2': [Matchup('Patriots', 'Jets')],
}


class TestResultsAlignment:
    """Tests for results vs schedule."""

    def test_aligned(self):
        """Test results that fit the schedule produce no warnings."""
        assert find_misaligned_results(SCHEDULE, {'1': [0, None], '2': [1]}) == []

    def test_too_many_results(self):
        """Test more outcomes than games is reported."""
        warnings = find_misaligned_results(SCHEDULE, {'2': [1, 0]})
        assert len(warnings) == 1
        assert 'Week 2 has 2 results but only 1 games scheduled' in warnings[0]

    def test_unknown_week(self):
        """Test results for an unscheduled week are reported."""
        warnings = find_misaligned_results(SCHEDULE, {'5': [0]})
        assert len(warnings) == 1
        assert 'not on the schedule' in warnings[0]

    def test_unknown_week_without_decisions(self):
        """Test an unscheduled week with only nulls is ignored."""
        assert find_misaligned_results(SCHEDULE, {'5': [None]}) == []


class TestPicksAlignment:
    """Tests for picks vs schedule."""

    def test_aligned(self):
        """Test valid picks produce no warnings."""
        participant = Participant(name='Me', picks={'1': {0: 'home', 1: 'away'}})
        assert find_misaligned_picks(SCHEDULE, participant) == []

    def test_position_past_end(self):
        """Test picks beyond the week's games are reported."""
        participant = Participant(name='Me', picks={'2': {0: 'home', 3: 'away'}})
        warnings = find_misaligned_picks(SCHEDULE, participant)
        assert len(warnings) == 1
        assert 'games 3' in warnings[0]

    def test_unknown_week(self):
        """Test picks for an unscheduled week are reported."""
        participant = Participant(name='Alex', picks={'9': {0: 'home'}})
        warnings = find_misaligned_picks(SCHEDULE, participant)
        assert len(warnings) == 1
        assert 'Alex' in warnings[0]

    def test_invalid_side(self):
        """Test side values other than home/away are reported."""
        participant = Participant(name='Alex', picks={'1': {0: 'draw'}})
        warnings = find_misaligned_picks(SCHEDULE, participant)
        assert len(warnings) == 1
        assert 'invalid sides' in warnings[0]


class TestTiebreakerValidation:
    """Tests for tiebreaker warnings."""

    def test_valid_values(self):
        """Test whole numbers and unset values are fine."""
        assert validate_tiebreaker('45') == []
        assert validate_tiebreaker('0') == []
        assert validate_tiebreaker('') == []
        assert validate_tiebreaker(None) == []

    def test_invalid_values(self):
        """Test negative and non-numeric values produce a warning."""
        assert len(validate_tiebreaker('-3')) == 1
        assert len(validate_tiebreaker('lots')) == 1
        assert len(validate_tiebreaker('4.5')) == 1


class TestValidateState:
    """Tests for the combined check."""

    def test_collects_all_warnings(self):
        """Test warnings from results, picks and tiebreakers are combined."""
        participants = [
            Participant(name='Me', picks={'1': {5: 'home'}}, tiebreakers={'1': 'x'}),
            Participant(name='Alex', picks={'7': {0: 'home'}}),
        ]
        warnings = validate_state(SCHEDULE, {'2': [0, 1]}, participants)
        assert len(warnings) == 4
