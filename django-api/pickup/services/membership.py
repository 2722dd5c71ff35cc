"""Membership coordinator: joining and leaving sessions."""

import logging

from django.utils import timezone

from pickup.domain import PlayerDashboard
from pickup.domain.errors import AlreadyJoinedError, MembershipNotFoundError
from pickup.services.availability import AvailabilityService, Clock
from pickup.services.parsing import parse_player_id, parse_session_id
from pickup.stores.interfaces import EntityStore

logger = logging.getLogger(__name__)


class MembershipService:
    """Service for enrolling players in sessions.

    Joining is not restricted to sessions the player could see as available:
    own and past sessions are accepted. The availability rules only decide
    what is offered.
    """

    def __init__(self, store: EntityStore, clock: Clock = timezone.localdate) -> None:
        self._store = store
        self._availability = AvailabilityService(store, clock)

    def join_session(self, session_id: str | int, player_id: str | int) -> PlayerDashboard:
        """Join a session and return the player's refreshed dashboard.

        Raises:
            InvalidIdentifierError: If either ID is not a positive integer.
            SessionNotFoundError: If the session does not exist.
            AlreadyJoinedError: If the player already joined the session.
        """
        session = parse_session_id(session_id)
        player = parse_player_id(player_id)
        try:
            self._store.add_membership(session, player)
        except AlreadyJoinedError:
            logger.warning("Player %s already joined session %s", player, session)
            raise
        logger.info("Player %s joined session %s", player, session)
        return self._availability.dashboard_for(player.value)

    def leave_session(self, session_id: str | int, player_id: str | int) -> PlayerDashboard:
        """Leave a joined session and return the player's refreshed dashboard.

        Raises:
            InvalidIdentifierError: If either ID is not a positive integer.
            MembershipNotFoundError: If the player has not joined the session.
        """
        session = parse_session_id(session_id)
        player = parse_player_id(player_id)
        if not self._store.remove_membership(session, player):
            raise MembershipNotFoundError()
        logger.info("Player %s left session %s", player, session)
        return self._availability.dashboard_for(player.value)
