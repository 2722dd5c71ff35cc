"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
Every mutating method is atomic: it either completes its precondition check
and write as one unit or raises without changing anything.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date

from pickup.domain import (
    Membership,
    PlayerId,
    Session,
    SessionId,
    SessionView,
    Sport,
    SportId,
    SportPopularity,
)


class EntityStore(ABC):
    """Interface for sport, session and membership persistence."""

    # Sports

    @abstractmethod
    def list_sports(self) -> list[Sport]:
        """Return all sports ordered by name, then id."""
        ...

    @abstractmethod
    def add_sport(self, name: str) -> Sport:
        """Insert a sport. Names are not required to be unique."""
        ...

    @abstractmethod
    def delete_sport(self, sport_id: SportId) -> bool:
        """Delete a sport. Return False if it does not exist.

        Raises:
            SportInUseError: If any session references the sport.
        """
        ...

    # Sessions

    @abstractmethod
    def list_sessions(self) -> list[SessionView]:
        """Return every session, ordered by date then id."""
        ...

    @abstractmethod
    def add_session(
        self, sport_id: SportId, creator_id: PlayerId, on: date, venue: str
    ) -> Session:
        """Insert a session.

        Raises:
            SportNotFoundError: If the sport does not exist.
        """
        ...

    @abstractmethod
    def update_session(
        self,
        session_id: SessionId,
        creator_id: PlayerId,
        sport_id: SportId,
        on: date,
        venue: str,
    ) -> Session | None:
        """Overwrite sport, date and venue of a session owned by creator_id.

        Return None when no session matches both id and creator.

        Raises:
            SportNotFoundError: If the new sport does not exist.
        """
        ...

    @abstractmethod
    def delete_session(self, session_id: SessionId, creator_id: PlayerId) -> bool:
        """Delete a session owned by creator_id together with its memberships.

        Return False when no session matches both id and creator.
        """
        ...

    # Availability

    @abstractmethod
    def available_sessions(
        self, player_id: PlayerId, today: date
    ) -> Iterable[SessionView]:
        """Return sessions on or after today that the player neither created
        nor joined. Iterating again re-reads current state."""
        ...

    @abstractmethod
    def joined_sessions(self, player_id: PlayerId) -> Iterable[SessionView]:
        """Return every session the player has joined, past ones included."""
        ...

    # Memberships

    @abstractmethod
    def add_membership(self, session_id: SessionId, player_id: PlayerId) -> Membership:
        """Insert a membership.

        Raises:
            SessionNotFoundError: If the session does not exist.
            AlreadyJoinedError: If the player already joined the session.
        """
        ...

    @abstractmethod
    def remove_membership(self, session_id: SessionId, player_id: PlayerId) -> bool:
        """Delete a membership. Return False if it does not exist."""
        ...

    # Reports

    @abstractmethod
    def sport_popularity(self) -> list[SportPopularity]:
        """Return session counts per sport, busiest first."""
        ...
