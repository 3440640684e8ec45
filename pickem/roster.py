"""Local player plus picks imported from other players."""

import json
import logging
from typing import Any, Iterator

from .exceptions import ImportDocumentError
from .models import Participant
from .schemas import PicksExport
from .utils import validate_document

logger = logging.getLogger('pickem.roster')


def parse_import_document(document: str | dict[str, Any]) -> Participant:
    """
    Build an imported participant from an exported picks document.

    Only 'name' (non-empty) and 'picks' are required; 'tiebreakers' is
    optional. Picks are not checked against the schedule.

    Raises:
        ImportDocumentError: If the document is not JSON, lacks 'name' or
            'picks', or has the wrong shape
    """
    if isinstance(document, str):
        try:
            document = json.loads(document)
        except json.JSONDecodeError as e:
            raise ImportDocumentError(f'Invalid JSON: {e.msg} at position {e.pos}') from e

    if not isinstance(document, dict):
        raise ImportDocumentError('Import document must be a JSON object')

    missing = []
    if not document.get('name'):
        missing.append('name')
    if document.get('picks') is None:
        missing.append('picks')
    if missing:
        raise ImportDocumentError(f'Missing {" and ".join(missing)}')

    try:
        validated = validate_document(document, PicksExport)
    except ValueError as e:
        raise ImportDocumentError(str(e)) from e

    return Participant(
        name=validated.name,
        picks=validated.picks,
        tiebreakers=validated.tiebreakers,
    )


class Roster:
    """
    Everyone on the leaderboard.

    The local participant always comes first; imports follow in the order
    they were added. Imports live only for the session and duplicate names
    are kept as separate entries.
    """

    def __init__(self, local: Participant):
        self.local = local
        self._imported: list[Participant] = []

    @property
    def imported(self) -> list[Participant]:
        return list(self._imported)

    def import_participant(self, document: str | dict[str, Any]) -> Participant:
        """
        Append a participant from an import document.

        The roster is unchanged if the document is rejected.

        Raises:
            ImportDocumentError: If the document is malformed
        """
        participant = parse_import_document(document)
        self._imported.append(participant)
        logger.info(f'Imported picks for {participant.name}')
        return participant

    def participants(self) -> list[Participant]:
        return [self.local, *self._imported]

    def __iter__(self) -> Iterator[Participant]:
        return iter(self.participants())

    def __len__(self) -> int:
        return 1 + len(self._imported)
