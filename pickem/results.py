"""Official game results entered by the administrator."""

import copy
import json
import logging
from typing import Optional

from .constants import OUTCOME_TO_SIDE
from .exceptions import ResultsDocumentError
from .schemas import ResultsDocument
from .utils import validate_document

logger = logging.getLogger('pickem.results')


def parse_results_document(document: str | dict) -> dict[str, list[Optional[int]]]:
    """
    Parse a results document.

    Expected shape: {"1": [0, 1, null], ...} where 0 means the home team won,
    1 the away team, and null that the game is undecided.

    Raises:
        ResultsDocumentError: If the text doesn't parse or the shape is wrong
    """
    try:
        data = json.loads(document) if isinstance(document, str) else document
    except json.JSONDecodeError as e:
        raise ResultsDocumentError(str(e)) from e

    try:
        return validate_document(data, ResultsDocument, root='weeks').weeks
    except ValueError as e:
        raise ResultsDocumentError(str(e)) from e


class ResultStore:
    """Outcome lists per week, positionally aligned with the schedule."""

    def __init__(self, results: dict[str, list[Optional[int]]] | None = None):
        self.results: dict[str, list[Optional[int]]] = {
            str(week): list(outcomes) for week, outcomes in (results or {}).items()
        }

    def replace(self, document: str | dict) -> dict[str, list[Optional[int]]]:
        """
        Replace the entire results document.

        Raises:
            ResultsDocumentError: If the document is malformed; current results are kept
        """
        results = parse_results_document(document)
        self.results = results
        logger.info(f'Results replaced: {len(results)} weeks')
        return results

    def replace_week(self, week: str, outcomes: list) -> list[Optional[int]]:
        """Replace one week's outcomes, validated like a full document."""
        parsed = parse_results_document({str(week): outcomes})
        self.results[str(week)] = parsed[str(week)]
        logger.info(f'Results replaced for week {week}')
        return self.results[str(week)]

    def outcome(self, week: str, position: int) -> Optional[int]:
        outcomes = self.results.get(str(week), [])
        if 0 <= position < len(outcomes):
            return outcomes[position]
        return None

    def winner_side(self, week: str, position: int) -> Optional[str]:
        """'home' or 'away' for a decided game, else None."""
        outcome = self.outcome(week, position)
        return OUTCOME_TO_SIDE.get(outcome) if outcome is not None else None

    def is_position_decided(self, week: str, position: int) -> bool:
        return self.outcome(week, position) is not None

    def is_week_locked(self, week: str) -> bool:
        """A week is read-only for picking once any of its games has a result."""
        return any(o is not None for o in self.results.get(str(week), []))

    def has_scorable_results(self) -> bool:
        return any(self.is_week_locked(week) for week in self.results)

    def to_document(self) -> dict[str, list[Optional[int]]]:
        return copy.deepcopy(self.results)
