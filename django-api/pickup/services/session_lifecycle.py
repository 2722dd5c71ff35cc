"""Session lifecycle service: publishing, editing and removing sessions.

Edit and delete are keyed on both the session id and the requester, so a
requester who does not own the session gets the same SessionNotFoundError as
one asking for a session that does not exist.
"""

import logging
from datetime import date

from pickup.domain import Session, SessionView
from pickup.domain.errors import SessionNotFoundError
from pickup.services.parsing import (
    clean_venue,
    parse_player_id,
    parse_session_date,
    parse_session_id,
    parse_sport_id,
)
from pickup.stores.interfaces import EntityStore

logger = logging.getLogger(__name__)


class SessionLifecycleService:
    """Service for session create, edit and delete."""

    def __init__(self, store: EntityStore) -> None:
        self._store = store

    def list_sessions(self) -> list[SessionView]:
        """Return all sessions with their sport and creator names."""
        return self._store.list_sessions()

    def create_session(
        self,
        sport_id: str | int,
        creator_id: str | int,
        on: str | date,
        venue: str,
    ) -> Session:
        """Create a session. Past dates are accepted.

        Raises:
            InvalidIdentifierError: If an ID is not a positive integer.
            InvalidSessionDateError: If the date is not an ISO date.
            InvalidVenueError: If the venue is too long.
            SportNotFoundError: If the sport does not exist.
        """
        session = self._store.add_session(
            parse_sport_id(sport_id),
            parse_player_id(creator_id),
            parse_session_date(on),
            clean_venue(venue),
        )
        logger.info(
            "Player %s created session %s for sport %s",
            session.creator_id,
            session.id,
            session.sport_id,
        )
        return session

    def edit_session(
        self,
        session_id: str | int,
        requester_id: str | int,
        sport_id: str | int,
        on: str | date,
        venue: str,
    ) -> Session:
        """Overwrite sport, date and venue of a session the requester created.

        Raises:
            InvalidIdentifierError: If an ID is not a positive integer.
            InvalidSessionDateError: If the date is not an ISO date.
            InvalidVenueError: If the venue is too long.
            SportNotFoundError: If the new sport does not exist.
            SessionNotFoundError: If the session does not exist or the
                requester did not create it.
        """
        parsed_session = parse_session_id(session_id)
        requester = parse_player_id(requester_id)
        session = self._store.update_session(
            parsed_session,
            requester,
            parse_sport_id(sport_id),
            parse_session_date(on),
            clean_venue(venue),
        )
        if session is None:
            logger.warning(
                "Player %s cannot edit session %s", requester, parsed_session
            )
            raise SessionNotFoundError()
        logger.info("Player %s edited session %s", requester, parsed_session)
        return session

    def delete_session(self, session_id: str | int, requester_id: str | int) -> None:
        """Delete a session the requester created, with all its memberships.

        Raises:
            InvalidIdentifierError: If an ID is not a positive integer.
            SessionNotFoundError: If the session does not exist or the
                requester did not create it.
        """
        parsed_session = parse_session_id(session_id)
        requester = parse_player_id(requester_id)
        if not self._store.delete_session(parsed_session, requester):
            logger.warning(
                "Player %s cannot delete session %s", requester, parsed_session
            )
            raise SessionNotFoundError()
        logger.info("Player %s deleted session %s", requester, parsed_session)
