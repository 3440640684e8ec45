from .models import Matchup, Participant, LeaderboardEntry
from .exceptions import (
    PickemError,
    DocumentError,
    ScheduleDocumentError,
    ResultsDocumentError,
    ImportDocumentError,
    ImportReadError,
    AccessDeniedError,
    WeekLockedError,
)
from .schedule import ScheduleStore, parse_schedule_document
from .picks import PickStore
from .results import ResultStore, parse_results_document
from .roster import Roster, parse_import_document
from .scoring import (
    has_scorable_results,
    score_participant,
    score_breakdown,
    compute_leaderboard,
)
from .storage import PickemStorage, JsonFileStore, MemoryStore
from .transfer import (
    export_filename,
    build_export_document,
    export_picks,
    load_import_file,
    read_import_file,
)
from .app import PickemApp
from .admin import AdminSession

__all__ = [
    # Models
    'Matchup',
    'Participant',
    'LeaderboardEntry',
    # Errors
    'PickemError',
    'DocumentError',
    'ScheduleDocumentError',
    'ResultsDocumentError',
    'ImportDocumentError',
    'ImportReadError',
    'AccessDeniedError',
    'WeekLockedError',
    # Stores
    'ScheduleStore',
    'parse_schedule_document',
    'PickStore',
    'ResultStore',
    'parse_results_document',
    'Roster',
    'parse_import_document',
    # Scoring
    'has_scorable_results',
    'score_participant',
    'score_breakdown',
    'compute_leaderboard',
    # Persistence and sharing
    'PickemStorage',
    'JsonFileStore',
    'MemoryStore',
    'export_filename',
    'build_export_document',
    'export_picks',
    'load_import_file',
    'read_import_file',
    # Session
    'PickemApp',
    'AdminSession',
]
