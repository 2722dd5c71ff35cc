"""Sport catalog service.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from pickup.domain import Sport
from pickup.domain.errors import SportInUseError, SportNotFoundError
from pickup.services.parsing import clean_sport_name, parse_sport_id
from pickup.stores.interfaces import EntityStore

logger = logging.getLogger(__name__)


class SportCatalogService:
    """Service for creating, listing and deleting sports."""

    def __init__(self, store: EntityStore) -> None:
        self._store = store

    def list_sports(self) -> list[Sport]:
        """Return all sports."""
        return self._store.list_sports()

    def create_sport(self, name: str) -> Sport:
        """Create a sport. Duplicate names are allowed.

        Raises:
            InvalidSportNameError: If the name is blank or too long.
        """
        sport = self._store.add_sport(clean_sport_name(name))
        logger.info("Created sport %s (%s)", sport.id, sport.name)
        return sport

    def delete_sport(self, sport_id: str | int) -> None:
        """Delete a sport that no session references.

        Raises:
            InvalidIdentifierError: If the sport_id is not a positive integer.
            SportNotFoundError: If the sport does not exist.
            SportInUseError: If sessions still reference the sport.
        """
        parsed = parse_sport_id(sport_id)
        try:
            deleted = self._store.delete_sport(parsed)
        except SportInUseError:
            logger.warning("Refused to delete sport %s: sessions reference it", parsed)
            raise
        if not deleted:
            raise SportNotFoundError()
        logger.info("Deleted sport %s", parsed)
