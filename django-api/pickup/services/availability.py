"""Availability resolver: which sessions a player can join, and has joined."""

from collections.abc import Callable, Iterable
from datetime import date

from django.utils import timezone

from pickup.domain import PlayerDashboard, SessionView
from pickup.services.parsing import parse_player_id
from pickup.stores.interfaces import EntityStore

Clock = Callable[[], date]


class AvailabilityService:
    """Read-only queries over sessions from one player's point of view.

    Results are computed from current store state on every call and are never
    cached. "Today" comes from ``clock`` so tests can pin it.
    """

    def __init__(self, store: EntityStore, clock: Clock = timezone.localdate) -> None:
        self._store = store
        self._clock = clock

    def available_sessions_for(self, player_id: str | int) -> Iterable[SessionView]:
        """Return upcoming sessions the player did not create and has not joined.

        Raises:
            InvalidIdentifierError: If the player_id is not a positive integer.
        """
        return self._store.available_sessions(parse_player_id(player_id), self._clock())

    def joined_sessions_for(self, player_id: str | int) -> Iterable[SessionView]:
        """Return every session the player has joined, including past ones.

        Raises:
            InvalidIdentifierError: If the player_id is not a positive integer.
        """
        return self._store.joined_sessions(parse_player_id(player_id))

    def dashboard_for(self, player_id: str | int) -> PlayerDashboard:
        return PlayerDashboard(
            available=tuple(self.available_sessions_for(player_id)),
            joined=tuple(self.joined_sessions_for(player_id)),
        )
