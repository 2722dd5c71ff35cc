"""Turn raw request values into domain primitives or raise domain errors."""

from datetime import date, datetime

from pickup.domain import PlayerId, SessionId, SportId
from pickup.domain.errors import (
    InvalidIdentifierError,
    InvalidSessionDateError,
    InvalidSportNameError,
    InvalidVenueError,
)

MAX_TEXT_LENGTH = 255


def parse_sport_id(value: str | int) -> SportId:
    try:
        return SportId.from_string(value)
    except (TypeError, ValueError) as exc:
        raise InvalidIdentifierError("sport ID") from exc


def parse_session_id(value: str | int) -> SessionId:
    try:
        return SessionId.from_string(value)
    except (TypeError, ValueError) as exc:
        raise InvalidIdentifierError("session ID") from exc


def parse_player_id(value: str | int) -> PlayerId:
    try:
        return PlayerId.from_string(value)
    except (TypeError, ValueError) as exc:
        raise InvalidIdentifierError("player ID") from exc


def parse_session_date(value: str | date) -> date:
    """Accept a date or an ISO ``YYYY-MM-DD`` string. Past dates are allowed."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError) as exc:
        raise InvalidSessionDateError() from exc


def clean_sport_name(value: str) -> str:
    if not isinstance(value, str):
        raise InvalidSportNameError()
    name = value.strip()
    if not name or len(name) > MAX_TEXT_LENGTH:
        raise InvalidSportNameError()
    return name


def clean_venue(value: str) -> str:
    if not isinstance(value, str):
        raise InvalidVenueError()
    venue = value.strip()
    if len(venue) > MAX_TEXT_LENGTH:
        raise InvalidVenueError()
    return venue
