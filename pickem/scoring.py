"""Leaderboard scoring: correct picks against recorded results."""

from typing import Iterable, Mapping, Optional, Sequence

from .constants import SIDE_TO_OUTCOME
from .models import LeaderboardEntry, Participant


def has_scorable_results(results: Mapping[str, Sequence[Optional[int]]]) -> bool:
    """True if at least one game in any week has a recorded outcome.

    The leaderboard is hidden until this is true.
    """
    return any(
        any(outcome is not None for outcome in (outcomes or []))
        for outcomes in results.values()
    )


def pick_matches(side: object, outcome: Optional[int]) -> bool:
    """
    Whether a pick agrees with a recorded outcome.

    Scoring:
        - 'home' matches outcome 0, 'away' matches outcome 1
        - Undecided games (None) never match
        - Any other side value never matches
    """
    if outcome is None or not isinstance(side, str):
        return False
    return SIDE_TO_OUTCOME.get(side) == outcome


def score_breakdown(
    picks: Mapping[str, Mapping[int, str]],
    results: Mapping[str, Sequence[Optional[int]]],
) -> dict[str, int]:
    """
    Correct picks per week for one participant.

    Only weeks present in the results are considered; a week with results
    but no matching picks shows 0.

    Args:
        picks: Pick set (week -> position -> side)
        results: Result set (week -> positional outcomes)

    Returns:
        Dict mapping week id to correct count
    """
    breakdown = {}
    for week, outcomes in results.items():
        week_picks = picks.get(week) or {}
        correct = 0
        for position, outcome in enumerate(outcomes or []):
            if outcome is None:
                continue
            if pick_matches(week_picks.get(position), outcome):
                correct += 1
        breakdown[week] = correct
    return breakdown


def score_participant(
    picks: Mapping[str, Mapping[int, str]],
    results: Mapping[str, Sequence[Optional[int]]],
) -> int:
    """Total correct picks across every week with results."""
    return sum(score_breakdown(picks, results).values())


def compute_leaderboard(
    results: Mapping[str, Sequence[Optional[int]]],
    participants: Iterable[Participant],
) -> list[LeaderboardEntry]:
    """
    Rank participants by correct picks.

    Participants are scored in the order given (local user first, then
    imports in the order they were added). Equal scores are not broken:
    the sort is stable, so tied participants keep that order and take
    adjacent ranks.

    Returns:
        Ranked entries, or an empty list when no game has a result yet
    """
    if not has_scorable_results(results):
        return []

    scores = [(p.name, score_participant(p.picks, results)) for p in participants]
    ranked = sorted(scores, key=lambda s: s[1], reverse=True)
    return [
        LeaderboardEntry(rank=rank, name=name, correct=correct)
        for rank, (name, correct) in enumerate(ranked, 1)
    ]
