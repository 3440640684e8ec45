"""Application state for one pick'em session.

PickemApp owns the schedule, the local player's picks, the results and the
roster. Every mutation is written through to storage and followed by a
leaderboard refresh delivered to subscribed listeners.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from .config import get_config
from .exceptions import WeekLockedError
from .models import LeaderboardEntry, Matchup, Participant
from .picks import PickStore
from .results import ResultStore, parse_results_document
from .roster import Roster
from .schedule import ScheduleStore, parse_schedule_document
from .schemas import PickemConfig
from .scoring import compute_leaderboard, score_breakdown
from .storage import JsonFileStore, PickemStorage
from .transfer import export_picks, read_import_file
from .validators import validate_state

logger = logging.getLogger('pickem.app')

LeaderboardListener = Callable[[list[LeaderboardEntry]], None]


class PickemApp:
    """State-owning service for the schedule, picks, results and roster."""

    def __init__(
        self,
        storage: PickemStorage,
        schedule: ScheduleStore,
        picks: PickStore,
        results: ResultStore,
        user_name: str,
    ):
        self.storage = storage
        self.schedule = schedule
        self.picks = picks
        self.results = results
        self.user_name = user_name
        self.roster = Roster(self._local_participant())
        self._listeners: list[LeaderboardListener] = []

    @classmethod
    def initialize(
        cls,
        storage: Optional[PickemStorage] = None,
        config: Optional[PickemConfig] = None,
        user_name: Optional[str] = None,
    ) -> 'PickemApp':
        """
        Load a session from storage.

        Unreadable stored documents fall back to defaults. On first run the
        user name comes from `user_name` or the configured default and is
        saved.

        Args:
            storage: Persistence adapter (default: files under config.data_dir)
            config: Settings (default: get_config())
            user_name: Name to use if none is stored yet
        """
        config = config or get_config()
        if storage is None:
            storage = PickemStorage(JsonFileStore(config.data_dir))

        schedule_weeks = storage.load_schedule()
        schedule = ScheduleStore(
            {
                week: [Matchup(home=m.home, away=m.away) for m in games]
                for week, games in schedule_weeks.items()
            }
        )
        picks = PickStore(storage.load_picks(), storage.load_tiebreakers())
        results = ResultStore(storage.load_results())

        name = storage.load_user_name()
        if not name:
            name = user_name or config.default_user_name
            storage.save_user_name(name)

        logger.debug(f'Initialized session for {name}: {len(schedule)} weeks')
        return cls(storage, schedule, picks, results, name)

    def _local_participant(self) -> Participant:
        # Shares the live pick dicts so the roster always sees current picks
        return Participant(
            name=self.user_name,
            picks=self.picks.picks,
            tiebreakers=self.picks.tiebreakers,
        )

    def _refresh_local(self) -> None:
        self.roster.local = self._local_participant()

    # Listeners

    def subscribe(self, listener: LeaderboardListener) -> None:
        """Call `listener` with the recomputed leaderboard after every change."""
        self._listeners.append(listener)

    def _changed(self) -> list[LeaderboardEntry]:
        board = self.leaderboard()
        for listener in self._listeners:
            listener(board)
        return board

    # Queries

    def weeks(self) -> list[str]:
        return self.schedule.list_weeks()

    def is_week_locked(self, week: str) -> bool:
        return self.results.is_week_locked(week)

    def leaderboard(self) -> list[LeaderboardEntry]:
        """Current ranking; empty while no game has a result."""
        return compute_leaderboard(self.results.results, self.roster.participants())

    def breakdown(self) -> list[tuple[str, dict[str, int]]]:
        """Per-week correct counts for each participant, in roster order."""
        return [
            (participant.name, score_breakdown(participant.picks, self.results.results))
            for participant in self.roster.participants()
        ]

    def warnings(self) -> list[str]:
        """Alignment problems between schedule, results and picks."""
        schedule_doc = {week: self.schedule.get_week(week) for week in self.weeks()}
        return validate_state(schedule_doc, self.results.results, self.roster.participants())

    # Player mutations

    def set_pick(self, week: str, position: int, side: str) -> list[LeaderboardEntry]:
        """
        Record the local player's pick.

        Raises:
            WeekLockedError: If the week already has a result
        """
        week = str(week)
        if self.results.is_week_locked(week):
            raise WeekLockedError(f'Week {week} has results; picks are locked')
        self.picks.set_pick(week, position, side)
        self._save_picks()
        return self._changed()

    def set_tiebreaker(self, week: str, value: str) -> list[LeaderboardEntry]:
        """
        Record the local player's tiebreaker for a week.

        Raises:
            WeekLockedError: If the week already has a result
        """
        week = str(week)
        if self.results.is_week_locked(week):
            raise WeekLockedError(f'Week {week} has results; tiebreaker is locked')
        self.picks.set_tiebreaker(week, value)
        self._save_picks()
        return self._changed()

    def _save_picks(self) -> None:
        self.storage.save_picks(self.picks.to_document(), dict(self.picks.tiebreakers))

    # Administrative mutations

    def replace_schedule(self, document: str | dict) -> list[LeaderboardEntry]:
        """
        Replace the schedule and reset the local player's picks and tiebreakers.

        Results and imported players are kept as they are.

        Raises:
            ScheduleDocumentError: If the document is malformed (nothing changes)
            OSError: If saving fails (the in-memory state is unchanged)
        """
        # Persist first; a failed write leaves memory untouched
        new_schedule = ScheduleStore(parse_schedule_document(document)).to_document()
        self.storage.save_schedule(new_schedule)
        self.storage.save_picks({}, {})

        self.schedule.replace(new_schedule)
        self.picks.reset()
        self._refresh_local()
        logger.info('Picks and tiebreakers reset for new schedule')
        return self._changed()

    def replace_results(self, document: str | dict) -> list[LeaderboardEntry]:
        """
        Replace the whole results document.

        Raises:
            ResultsDocumentError: If the document is malformed (nothing changes)
            OSError: If saving fails (the in-memory state is unchanged)
        """
        new_results = parse_results_document(document)
        self.storage.save_results(new_results)
        self.results.replace(new_results)
        return self._changed()

    # Sharing

    def import_participant(self, document: str | dict) -> Participant:
        """
        Add another player's exported picks to this session's leaderboard.

        Raises:
            ImportDocumentError: If 'name' or 'picks' is missing or malformed
        """
        participant = self.roster.import_participant(document)
        self._changed()
        return participant

    async def import_file(self, path: str | Path) -> Participant:
        """
        Read an exported picks file and import it.

        Raises:
            ImportReadError: If the file can't be read
            ImportDocumentError: If its contents are malformed
        """
        text = await read_import_file(path)
        return self.import_participant(text)

    def export_picks(self, output_dir: str | Path) -> Path:
        """Write the local player's picks file and return its path."""
        return export_picks(self.roster.local, output_dir)
