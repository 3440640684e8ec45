"""Diagnostics for picks and results that no longer line up with the schedule.

Games are addressed by position only, so a replaced schedule can leave
picks and results pointing at games that moved or no longer exist. These
checks report such cases; scoring does not try to compensate.
"""

from typing import Mapping, Optional, Sequence

from .constants import SIDES
from .models import Participant


def find_misaligned_results(
    schedule: Mapping[str, Sequence],
    results: Mapping[str, Sequence[Optional[int]]],
) -> list[str]:
    """
    Report results that don't correspond to a scheduled game.

    Checks:
    - Results recorded for a week that isn't on the schedule
    - More outcomes than games in the week

    Returns:
        List of warning messages (empty if aligned)
    """
    warnings = []

    for week, outcomes in results.items():
        games = schedule.get(week)
        if games is None:
            if any(o is not None for o in outcomes):
                warnings.append(f'Results recorded for week {week}, which is not on the schedule')
            continue
        if len(outcomes) > len(games):
            warnings.append(
                f'Week {week} has {len(outcomes)} results but only {len(games)} games scheduled'
            )

    return warnings


def find_misaligned_picks(
    schedule: Mapping[str, Sequence],
    participant: Participant,
) -> list[str]:
    """
    Report a participant's picks that can't refer to a scheduled game.

    Checks:
    - Picks for weeks not on the schedule
    - Picks for positions past the end of the week
    - Side values other than 'home' or 'away'

    Returns:
        List of warning messages (empty if aligned)
    """
    warnings = []

    for week, sides in participant.picks.items():
        games = schedule.get(week)
        if games is None:
            warnings.append(f'{participant.name} has picks for week {week}, which is not on the schedule')
        else:
            extra = sorted(pos for pos in sides if pos < 0 or pos >= len(games))
            if extra:
                positions = ', '.join(str(p) for p in extra)
                warnings.append(
                    f'{participant.name} has week {week} picks for games {positions} '
                    f'(only {len(games)} scheduled)'
                )

        invalid = sorted(pos for pos, side in sides.items() if side not in SIDES)
        if invalid:
            positions = ', '.join(str(p) for p in invalid)
            warnings.append(
                f'{participant.name} has invalid sides in week {week} for games {positions} '
                f'(never counted as correct)'
            )

    return warnings


def validate_tiebreaker(value: Optional[str]) -> list[str]:
    """
    Check that a tiebreaker looks like a non-negative whole number.

    Tiebreakers are stored as entered and never scored, so this only
    produces warnings. Empty means unset and is valid.
    """
    if not value:
        return []
    text = value.strip()
    if not text.isdigit():
        return [f'Tiebreaker {value!r} is not a non-negative whole number']
    return []


def validate_state(
    schedule: Mapping[str, Sequence],
    results: Mapping[str, Sequence[Optional[int]]],
    participants: Sequence[Participant],
) -> list[str]:
    """
    Run every alignment check for the current game state.

    Returns:
        List of warning messages for review; none of them block scoring
    """
    warnings = find_misaligned_results(schedule, results)
    for participant in participants:
        warnings.extend(find_misaligned_picks(schedule, participant))
        for week, value in participant.tiebreakers.items():
            warnings.extend(f'{participant.name} week {week}: {w}' for w in validate_tiebreaker(value))
    return warnings
