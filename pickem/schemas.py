"""Pydantic schemas for JSON document validation."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_ADMIN_PASSPHRASE, DEFAULT_USER_NAME


def _week_keys_to_str(v: Any) -> Any:
    """JSON week keys are strings; accept ints from Python callers."""
    if isinstance(v, dict):
        return {str(k): val for k, val in v.items()}
    return v


def _tiebreakers_to_text(v: Any) -> Any:
    """Tiebreakers are stored as text; JSON numbers keep their text form and null means unset."""
    v = _week_keys_to_str(v)
    if not isinstance(v, dict):
        return v
    normalized = {}
    for week, value in v.items():
        if value is None:
            normalized[week] = ''
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            normalized[week] = str(value)
        else:
            normalized[week] = value
    return normalized


class MatchupSchema(BaseModel):
    """Single game in a week's schedule."""

    home: str
    away: str

    class Config:
        extra = 'ignore'


class ScheduleDocument(BaseModel):
    """Complete schedule document: week id -> ordered list of games."""

    weeks: dict[str, list[MatchupSchema]]

    @field_validator('weeks', mode='before')
    @classmethod
    def normalize_week_ids(cls, v):
        """Coerce week ids to strings."""
        return _week_keys_to_str(v)

    class Config:
        extra = 'forbid'


class PicksDocument(BaseModel):
    """Pick set: week id -> game position -> side."""

    weeks: dict[str, dict[int, str]]

    @field_validator('weeks', mode='before')
    @classmethod
    def normalize_week_ids(cls, v):
        """Coerce week ids to strings."""
        return _week_keys_to_str(v)

    class Config:
        extra = 'forbid'


class TiebreakersDocument(BaseModel):
    """Tiebreakers: week id -> raw text value."""

    weeks: dict[str, str]

    @field_validator('weeks', mode='before')
    @classmethod
    def normalize_values(cls, v):
        """Coerce week ids and values to text."""
        return _tiebreakers_to_text(v)

    class Config:
        extra = 'forbid'


class ResultsDocument(BaseModel):
    """Results: week id -> positional outcomes (0 home won, 1 away won, null undecided)."""

    weeks: dict[str, list[Literal[0, 1] | None]]

    @field_validator('weeks', mode='before')
    @classmethod
    def normalize_week_ids(cls, v):
        """Coerce week ids to strings; outcomes must be JSON integers, not booleans or text."""
        v = _week_keys_to_str(v)
        if isinstance(v, dict):
            for week, outcomes in v.items():
                if not isinstance(outcomes, list):
                    continue
                for outcome in outcomes:
                    if outcome is not None and (isinstance(outcome, bool) or not isinstance(outcome, int)):
                        raise ValueError(f'Week {week}: outcome {outcome!r} must be 0, 1 or null')
        return v

    class Config:
        extra = 'forbid'


class PicksExport(BaseModel):
    """Portable picks file written by export and read by import."""

    name: str = Field(..., min_length=1)
    picks: dict[str, dict[int, str]]
    tiebreakers: dict[str, str] = Field(default_factory=dict)

    @field_validator('picks', mode='before')
    @classmethod
    def normalize_week_ids(cls, v):
        """Coerce week ids to strings."""
        return _week_keys_to_str(v)

    @field_validator('tiebreakers', mode='before')
    @classmethod
    def normalize_tiebreakers(cls, v):
        """Missing or numeric tiebreakers become text."""
        if v is None:
            return {}
        return _tiebreakers_to_text(v)

    class Config:
        extra = 'ignore'


class PickemConfig(BaseModel):
    """Application configuration settings."""

    data_dir: str = Field(default='data', min_length=1)
    admin_passphrase: str = Field(default=DEFAULT_ADMIN_PASSPHRASE, min_length=1)
    default_user_name: str = Field(default=DEFAULT_USER_NAME, min_length=1)
    log_to_file: bool = False

    class Config:
        extra = 'forbid'
