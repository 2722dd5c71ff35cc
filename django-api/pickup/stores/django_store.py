"""Django ORM implementation of the EntityStore."""

import functools
import logging
from collections.abc import Iterator
from datetime import date

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Count, ProtectedError, QuerySet

from pickup import models as orm
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
from pickup.domain.errors import (
    AlreadyJoinedError,
    SessionNotFoundError,
    SportInUseError,
    SportNotFoundError,
    StoreUnavailableError,
)
from pickup.stores.interfaces import EntityStore

logger = logging.getLogger(__name__)


def _translate_errors(method):
    """Surface unexpected database failures as StoreUnavailableError."""

    @functools.wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except DatabaseError as exc:
            logger.exception("Store operation %s failed", method.__name__)
            raise StoreUnavailableError() from exc

    return wrapper


def _to_sport(row: orm.Sport) -> Sport:
    return Sport(id=SportId(row.id), name=row.name, created_at=row.created_at)


def _to_session(row: orm.Session) -> Session:
    return Session(
        id=SessionId(row.id),
        sport_id=SportId(row.sport_id),
        creator_id=PlayerId(row.creator_id),
        date=row.date,
        venue=row.venue,
        created_at=row.created_at,
    )


def _to_session_view(row: orm.Session) -> SessionView:
    return SessionView(
        session=_to_session(row),
        sport_name=row.sport.name,
        creator_name=row.creator.get_username(),
    )


class _SessionViews:
    """Lazy, restartable sequence of session views.

    Each iteration runs the query again, so it reflects the state of the
    database at the time iteration starts.
    """

    def __init__(self, queryset: QuerySet) -> None:
        self._queryset = queryset

    def __iter__(self) -> Iterator[SessionView]:
        try:
            for row in self._queryset.iterator():
                yield _to_session_view(row)
        except DatabaseError as exc:
            logger.exception("Session query failed")
            raise StoreUnavailableError() from exc


def _session_views() -> QuerySet:
    return orm.Session.objects.select_related("sport", "creator").order_by("date", "id")


def _lock_sport(sport_id: SportId) -> orm.Sport | None:
    return orm.Sport.objects.select_for_update().filter(pk=sport_id.value).first()


class DjangoEntityStore(EntityStore):
    """PostgreSQL or SQLite backed entity store using Django ORM."""

    @_translate_errors
    def list_sports(self) -> list[Sport]:
        return [_to_sport(row) for row in orm.Sport.objects.order_by("name", "id")]

    @_translate_errors
    def add_sport(self, name: str) -> Sport:
        return _to_sport(orm.Sport.objects.create(name=name))

    @_translate_errors
    def delete_sport(self, sport_id: SportId) -> bool:
        with transaction.atomic():
            # Row lock serializes against add_session/update_session.
            row = _lock_sport(sport_id)
            if row is None:
                return False
            try:
                with transaction.atomic():
                    row.delete()
            except (ProtectedError, IntegrityError) as exc:
                raise SportInUseError() from exc
        return True

    @_translate_errors
    def list_sessions(self) -> list[SessionView]:
        return [_to_session_view(row) for row in _session_views()]

    @_translate_errors
    def add_session(
        self, sport_id: SportId, creator_id: PlayerId, on: date, venue: str
    ) -> Session:
        with transaction.atomic():
            if _lock_sport(sport_id) is None:
                raise SportNotFoundError()
            row = orm.Session.objects.create(
                sport_id=sport_id.value,
                creator_id=creator_id.value,
                date=on,
                venue=venue,
            )
        return _to_session(row)

    @_translate_errors
    def update_session(
        self,
        session_id: SessionId,
        creator_id: PlayerId,
        sport_id: SportId,
        on: date,
        venue: str,
    ) -> Session | None:
        with transaction.atomic():
            if _lock_sport(sport_id) is None:
                raise SportNotFoundError()
            updated = orm.Session.objects.filter(
                pk=session_id.value, creator_id=creator_id.value
            ).update(sport_id=sport_id.value, date=on, venue=venue)
            if not updated:
                return None
            row = orm.Session.objects.get(pk=session_id.value)
        return _to_session(row)

    @_translate_errors
    def delete_session(self, session_id: SessionId, creator_id: PlayerId) -> bool:
        with transaction.atomic():
            # Same row lock as add_membership, so the cascade sees every
            # committed membership.
            owned = (
                orm.Session.objects.select_for_update()
                .filter(pk=session_id.value, creator_id=creator_id.value)
                .values_list("pk", flat=True)
            )
            if not list(owned):
                return False
            orm.Session.objects.filter(pk=session_id.value).delete()
        return True

    def available_sessions(
        self, player_id: PlayerId, today: date
    ) -> _SessionViews:
        queryset = (
            _session_views()
            .filter(date__gte=today)
            .exclude(creator_id=player_id.value)
            .exclude(memberships__player_id=player_id.value)
        )
        return _SessionViews(queryset)

    def joined_sessions(self, player_id: PlayerId) -> _SessionViews:
        return _SessionViews(
            _session_views().filter(memberships__player_id=player_id.value)
        )

    @_translate_errors
    def add_membership(self, session_id: SessionId, player_id: PlayerId) -> Membership:
        try:
            with transaction.atomic():
                # Lock so a concurrent delete_session cannot strand the row.
                session = (
                    orm.Session.objects.select_for_update()
                    .filter(pk=session_id.value)
                    .first()
                )
                if session is None:
                    raise SessionNotFoundError()
                row = orm.Membership.objects.create(
                    session_id=session_id.value, player_id=player_id.value
                )
        except IntegrityError as exc:
            if orm.Membership.objects.filter(
                session_id=session_id.value, player_id=player_id.value
            ).exists():
                raise AlreadyJoinedError() from exc
            raise
        return Membership(
            session_id=SessionId(row.session_id),
            player_id=PlayerId(row.player_id),
            joined_at=row.joined_at,
        )

    @_translate_errors
    def remove_membership(self, session_id: SessionId, player_id: PlayerId) -> bool:
        with transaction.atomic():
            deleted, _ = orm.Membership.objects.filter(
                session_id=session_id.value, player_id=player_id.value
            ).delete()
        return deleted > 0

    @_translate_errors
    def sport_popularity(self) -> list[SportPopularity]:
        rows = (
            orm.Sport.objects.values("name")
            .annotate(session_count=Count("sessions"))
            .order_by("-session_count", "name")
        )
        return [
            SportPopularity(sport_name=row["name"], session_count=row["session_count"])
            for row in rows
        ]
