"""Season schedule: weeks of games addressed by position.

Games have no durable id of their own. Picks and results refer to a game by
its zero-based position in the week, so replacing the schedule can leave
existing picks or results pointing at a different game (or none at all).
Nothing here re-aligns them; see validators.find_misaligned_results.
"""

import json
import logging
from typing import Any

from .exceptions import ScheduleDocumentError
from .models import Matchup
from .schemas import ScheduleDocument
from .utils import validate_document, week_sort_key

logger = logging.getLogger('pickem.schedule')


def parse_schedule_document(document: str | dict) -> dict[str, list[Matchup]]:
    """Parse a schedule document into weekly matchups.

    Supports the JSON shape written by the admin editor:
        {"1": [{"home": "Cowboys", "away": "Giants"}, ...], "2": [...]}

    Args:
        document: Raw JSON text or an already-parsed mapping

    Returns:
        Dict mapping week id to ordered list of Matchup

    Raises:
        ScheduleDocumentError: If the text doesn't parse or the shape is wrong
    """
    try:
        data = json.loads(document) if isinstance(document, str) else document
    except json.JSONDecodeError as e:
        raise ScheduleDocumentError(str(e)) from e

    try:
        validated = validate_document(data, ScheduleDocument, root='weeks')
    except ValueError as e:
        raise ScheduleDocumentError(str(e)) from e

    return {
        week: [Matchup(home=m.home, away=m.away) for m in games]
        for week, games in validated.weeks.items()
    }


class ScheduleStore:
    """Holds the current schedule. Replaced wholesale, never merged."""

    def __init__(self, weeks: dict[str, list[Matchup]] | None = None):
        self._weeks: dict[str, list[Matchup]] = dict(weeks or {})

    def replace(self, document: str | dict) -> dict[str, list[Matchup]]:
        """
        Replace the whole schedule.

        The document is fully validated before anything changes; on error
        the current schedule is kept.

        Raises:
            ScheduleDocumentError: If the document is malformed
        """
        weeks = parse_schedule_document(document)
        self._weeks = weeks
        logger.info(f'Schedule replaced: {len(weeks)} weeks')
        return weeks

    def list_weeks(self) -> list[str]:
        """Week ids in display order."""
        return sorted(self._weeks, key=week_sort_key)

    def get_week(self, week: str) -> list[Matchup]:
        return list(self._weeks.get(str(week), []))

    def get_matchup(self, week: str, position: int) -> Matchup | None:
        games = self._weeks.get(str(week), [])
        if 0 <= position < len(games):
            return games[position]
        return None

    def to_document(self) -> dict[str, list[dict[str, Any]]]:
        return {
            week: [{'home': m.home, 'away': m.away} for m in games]
            for week, games in self._weeks.items()
        }

    def __len__(self) -> int:
        return len(self._weeks)

    list = list_weeks
