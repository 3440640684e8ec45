"""Exception types surfaced to the player and the administrator."""


class PickemError(Exception):
    """Base class for all pick'em errors."""


class DocumentError(PickemError, ValueError):
    """An administrative JSON document failed to parse or had the wrong shape."""


class ScheduleDocumentError(DocumentError):
    """Schedule document rejected; the previous schedule is kept."""


class ResultsDocumentError(DocumentError):
    """Results document rejected; the previous results are kept."""


class ImportDocumentError(PickemError, ValueError):
    """Imported picks document is missing 'name' or 'picks' or is malformed."""


class ImportReadError(PickemError, OSError):
    """Import file could not be read."""


class AccessDeniedError(PickemError, PermissionError):
    """Wrong administrator passphrase."""


class WeekLockedError(PickemError, ValueError):
    """Picks for a decided game (or a week with results) are read-only."""
