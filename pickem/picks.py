"""Local player's picks and weekly tiebreakers."""

import logging

logger = logging.getLogger('pickem.picks')


class PickStore:
    """
    Per-week, per-position side selections plus a tiebreaker per week.

    Picks are never bounds-checked against the schedule and never deleted
    one at a time; reset() clears everything. Persistence, leaderboard
    refresh and week locking are handled by PickemApp.
    """

    def __init__(
        self,
        picks: dict[str, dict[int, str]] | None = None,
        tiebreakers: dict[str, str] | None = None,
    ):
        self.picks: dict[str, dict[int, str]] = {
            str(week): {int(pos): side for pos, side in sides.items()}
            for week, sides in (picks or {}).items()
        }
        self.tiebreakers: dict[str, str] = {str(k): v for k, v in (tiebreakers or {}).items()}

    def set_pick(self, week: str, position: int, side: str) -> None:
        """Record a side for one game, overwriting any previous pick."""
        self.picks.setdefault(str(week), {})[int(position)] = side
        logger.debug(f'Pick week {week} game {position}: {side}')

    def get_pick(self, week: str, position: int) -> str | None:
        return self.picks.get(str(week), {}).get(int(position))

    def set_tiebreaker(self, week: str, value: str) -> None:
        """Store the raw tiebreaker text; no numeric validation."""
        self.tiebreakers[str(week)] = '' if value is None else str(value)

    def get_tiebreaker(self, week: str) -> str | None:
        """Tiebreaker text, or None when empty or unset."""
        value = self.tiebreakers.get(str(week))
        return value or None

    def reset(self) -> None:
        self.picks = {}
        self.tiebreakers = {}

    def to_document(self) -> dict[str, dict[str, str]]:
        return {
            week: {str(pos): side for pos, side in sorted(sides.items())}
            for week, sides in self.picks.items()
        }
