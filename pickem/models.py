"""Data models for the pick'em game."""

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class Matchup:
    """A scheduled game, addressed by its position within the week."""
    home: str
    away: str

    def team(self, side: str) -> str:
        """Team name for 'home' or 'away'."""
        return self.home if side == 'home' else self.away


@dataclass
class Participant:
    """A player on the leaderboard: the local user or an imported snapshot."""
    name: str
    picks: Dict[str, Dict[int, str]] = field(default_factory=dict)
    # picks[week][position] = 'home' | 'away'
    tiebreakers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class LeaderboardEntry:
    """One ranked leaderboard row. Rank is positional, ties are not shared."""
    rank: int
    name: str
    correct: int
