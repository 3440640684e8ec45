"""Persistence of schedule, picks, tiebreakers, results and user name.

Each document is stored as JSON text under one key of a key-value medium.
Reads never fail: a missing, unreadable or malformed entry falls back to
the default for that store.
"""

import copy
import json
import logging
import re
from pathlib import Path
from typing import Any, Optional, Protocol

from .constants import DEFAULT_SCHEDULE, STORE_KEYS
from .schemas import PicksDocument, ResultsDocument, ScheduleDocument, TiebreakersDocument
from .utils import validate_document

logger = logging.getLogger('pickem.storage')


class KeyValueStore(Protocol):
    """Minimal durable key-value medium."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """In-process key-value store."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """Key-value store keeping one file per key inside a directory."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        safe_key = re.sub(r'[^A-Za-z0-9_.-]', '_', key)
        return self.directory / f'{safe_key}.json'

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding='utf-8')

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(value, encoding='utf-8')
        logger.debug(f'Wrote {key} to {path}')


class PickemStorage:
    """Typed load/save of every persisted pick'em document."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _read(self, key: str) -> Any:
        try:
            raw = self.store.get(STORE_KEYS[key])
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f'Could not read {key}: {e}')
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.debug(f'Stored {key} is not valid JSON ({e.msg}); using default')
            return None

    def _load(self, key: str, schema, default: Any) -> Any:
        data = self._read(key)
        if data is None:
            return default
        try:
            return validate_document(data, schema, root='weeks').weeks
        except ValueError as e:
            logger.debug(f'Stored {key} has the wrong shape; using default: {e}')
            return default

    def _write(self, key: str, data: Any) -> None:
        self.store.set(STORE_KEYS[key], json.dumps(data))

    def load_schedule(self) -> dict[str, list]:
        default = validate_document(copy.deepcopy(DEFAULT_SCHEDULE), ScheduleDocument, root='weeks').weeks
        return self._load('schedule', ScheduleDocument, default)

    def load_picks(self) -> dict[str, dict[int, str]]:
        return self._load('picks', PicksDocument, {})

    def load_tiebreakers(self) -> dict[str, str]:
        return self._load('tiebreakers', TiebreakersDocument, {})

    def load_results(self) -> dict[str, list]:
        return self._load('results', ResultsDocument, {})

    def load_user_name(self) -> str:
        try:
            return self.store.get(STORE_KEYS['user_name']) or ''
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f'Could not read user name: {e}')
            return ''

    def save_schedule(self, document: dict) -> None:
        self._write('schedule', document)

    def save_picks(self, picks: dict, tiebreakers: dict) -> None:
        """Picks and tiebreakers are always written together."""
        self._write('picks', picks)
        self._write('tiebreakers', tiebreakers)

    def save_results(self, document: dict) -> None:
        self._write('results', document)

    def save_user_name(self, name: str) -> None:
        self.store.set(STORE_KEYS['user_name'], name)
