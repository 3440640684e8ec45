"""Administrator access: passphrase gate and raw JSON editing."""

import json
import logging
from typing import Optional

from .app import PickemApp
from .config import get_admin_passphrase
from .exceptions import AccessDeniedError, ResultsDocumentError, ScheduleDocumentError
from .models import LeaderboardEntry

logger = logging.getLogger('pickem.admin')


class AdminSession:
    """
    Schedule and results editing for one app, behind a shared passphrase.

    Editing methods raise AccessDeniedError until unlock() succeeds.
    """

    def __init__(self, app: PickemApp, passphrase: Optional[str] = None):
        self.app = app
        self._passphrase = passphrase if passphrase is not None else get_admin_passphrase()
        self.unlocked = False

    def unlock(self, attempt: str) -> None:
        """
        Enter admin mode.

        Raises:
            AccessDeniedError: If the passphrase is wrong
        """
        if attempt != self._passphrase:
            logger.warning('Admin access denied')
            raise AccessDeniedError('Incorrect passphrase')
        self.unlocked = True

    def lock(self) -> None:
        self.unlocked = False

    def _require_unlocked(self) -> None:
        if not self.unlocked:
            raise AccessDeniedError('Incorrect passphrase')

    def schedule_text(self) -> str:
        """Current schedule as editable JSON."""
        self._require_unlocked()
        return json.dumps(self.app.schedule.to_document(), indent=2)

    def results_text(self) -> str:
        """Current results as editable JSON."""
        self._require_unlocked()
        return json.dumps(self.app.results.to_document(), indent=2)

    def save_schedule_text(self, text: str) -> list[LeaderboardEntry]:
        """
        Save an edited schedule. Resets the local player's picks and tiebreakers.

        Raises:
            AccessDeniedError: If not unlocked
            ScheduleDocumentError: With the parse detail; nothing changes
        """
        self._require_unlocked()
        try:
            return self.app.replace_schedule(text)
        except ScheduleDocumentError as e:
            logger.warning(f'Rejected schedule document: {e}')
            raise ScheduleDocumentError(f'Failed to parse schedule JSON: {e}') from e

    def save_results_text(self, text: str) -> list[LeaderboardEntry]:
        """
        Save edited results.

        Raises:
            AccessDeniedError: If not unlocked
            ResultsDocumentError: With the parse detail; nothing changes
        """
        self._require_unlocked()
        try:
            return self.app.replace_results(text)
        except ResultsDocumentError as e:
            logger.warning(f'Rejected results document: {e}')
            raise ResultsDocumentError(f'Failed to parse results JSON: {e}') from e
