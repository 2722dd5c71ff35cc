"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in pickup/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime

from pickup.domain.value_objects import PlayerId, SessionId, SportId


@dataclass(frozen=True)
class Sport:
    """Domain representation of a Sport."""

    id: SportId
    name: str
    created_at: datetime


@dataclass(frozen=True)
class Session:
    """Domain representation of a scheduled Session."""

    id: SessionId
    sport_id: SportId
    creator_id: PlayerId
    date: date
    venue: str
    created_at: datetime


@dataclass(frozen=True)
class Membership:
    """A player's enrollment in a Session."""

    session_id: SessionId
    player_id: PlayerId
    joined_at: datetime


@dataclass(frozen=True)
class SessionView:
    """Session enriched with the names of its sport and creator."""

    session: Session
    sport_name: str
    creator_name: str

    @property
    def id(self) -> SessionId:
        return self.session.id


@dataclass(frozen=True)
class PlayerDashboard:
    """Sessions a player can still join, and the ones already joined."""

    available: tuple[SessionView, ...]
    joined: tuple[SessionView, ...]


@dataclass(frozen=True)
class SportPopularity:
    sport_name: str
    session_count: int


@dataclass(frozen=True)
class SessionReport:
    """All sessions plus how many sessions each sport has."""

    sessions: tuple[SessionView, ...]
    popularity: tuple[SportPopularity, ...]
