"""Portable picks files for sharing with other players.

Exported files have the shape {"name": ..., "picks": ..., "tiebreakers": ...}
and are named after the player, e.g. "Jane_Doe_picks.json".
"""

import asyncio
import logging
import re
from pathlib import Path
from typing import Any

from .constants import EXPORT_SUFFIX
from .exceptions import ImportReadError
from .models import Participant
from .utils import save_json

logger = logging.getLogger('pickem.transfer')


def export_filename(name: str) -> str:
    """
    File name for a player's exported picks.

    Whitespace runs become underscores, and so do path separators so the
    file always lands in the export directory.
    """
    return re.sub(r'[\s/\\]+', '_', name) + EXPORT_SUFFIX


def build_export_document(participant: Participant) -> dict[str, Any]:
    """JSON-ready export of a participant's picks and tiebreakers."""
    return {
        'name': participant.name,
        'picks': {
            week: {str(pos): side for pos, side in sorted(sides.items())}
            for week, sides in participant.picks.items()
        },
        'tiebreakers': dict(participant.tiebreakers),
    }


def export_picks(participant: Participant, output_dir: str | Path) -> Path:
    """
    Write a participant's picks file.

    Args:
        participant: Player whose picks are exported
        output_dir: Directory to write into (created if needed)

    Returns:
        Path of the written file
    """
    path = Path(output_dir) / export_filename(participant.name)
    save_json(path, build_export_document(participant))
    logger.info(f'Exported picks for {participant.name} to {path}')
    return path


def load_import_file(path: str | Path) -> str:
    """
    Read an import file's text.

    Raises:
        ImportReadError: If the file can't be read
    """
    path = Path(path)
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f'Failed to read import file {path}: {e}')
        raise ImportReadError(f'Failed to read {path}: {e}') from e


async def read_import_file(path: str | Path) -> str:
    """
    Read an import file without blocking the caller's event loop.

    One read per import; it completes with the file text or raises
    ImportReadError. There is no cancellation.
    """
    return await asyncio.to_thread(load_import_file, path)
