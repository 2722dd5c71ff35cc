"""Unit tests for services.

These test argument parsing, error mapping and orchestration against a mocked
store, so no database is needed.
Run with: pytest tests/test_services.py -v
"""

from datetime import date, datetime, timezone
from unittest.mock import create_autospec

import pytest

from pickup.domain import (
    Membership,
    PlayerDashboard,
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
    InvalidIdentifierError,
    InvalidSessionDateError,
    InvalidSportNameError,
    InvalidVenueError,
    MembershipNotFoundError,
    SessionNotFoundError,
    SportInUseError,
    SportNotFoundError,
)
from pickup.services import (
    AvailabilityService,
    MembershipService,
    ReportService,
    SessionLifecycleService,
    SportCatalogService,
)
from pickup.stores.interfaces import EntityStore

NOW = datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc)
TODAY = date(2026, 10, 18)


def fixed_clock() -> date:
    return TODAY


def make_session(session_id=10, creator_id=1, on=date(2026, 10, 19)) -> Session:
    return Session(
        id=SessionId(session_id),
        sport_id=SportId(1),
        creator_id=PlayerId(creator_id),
        date=on,
        venue="Court 1",
        created_at=NOW,
    )


def make_view(session_id=10) -> SessionView:
    return SessionView(
        session=make_session(session_id), sport_name="Tennis", creator_name="alice"
    )


@pytest.fixture
def store():
    return create_autospec(EntityStore, instance=True)


class TestSportCatalogService:
    """Tests for SportCatalogService."""

    def test_create_sport_strips_name(self, store):
        """Names are stored without surrounding whitespace."""
        store.add_sport.return_value = Sport(id=SportId(1), name="Tennis", created_at=NOW)

        sport = SportCatalogService(store).create_sport("  Tennis ")

        store.add_sport.assert_called_once_with("Tennis")
        assert sport.name == "Tennis"

    @pytest.mark.parametrize("name", ["", "   ", "x" * 256, None, 42])
    def test_create_sport_invalid_name_raises_error(self, store, name):
        """Blank, over-long or non-text names raise InvalidSportNameError."""
        with pytest.raises(InvalidSportNameError):
            SportCatalogService(store).create_sport(name)
        store.add_sport.assert_not_called()

    def test_delete_sport_invalid_id_raises_error(self, store):
        """delete_sport raises InvalidIdentifierError for a malformed ID."""
        with pytest.raises(InvalidIdentifierError):
            SportCatalogService(store).delete_sport("abc")
        store.delete_sport.assert_not_called()

    def test_delete_sport_not_found_raises_error(self, store):
        """delete_sport raises SportNotFoundError when the store deletes nothing."""
        store.delete_sport.return_value = False
        with pytest.raises(SportNotFoundError):
            SportCatalogService(store).delete_sport("5")

    def test_delete_sport_in_use_propagates(self, store):
        """SportInUseError from the store reaches the caller unchanged."""
        store.delete_sport.side_effect = SportInUseError()
        with pytest.raises(SportInUseError):
            SportCatalogService(store).delete_sport(1)

    def test_delete_sport_passes_parsed_id(self, store):
        store.delete_sport.return_value = True
        SportCatalogService(store).delete_sport("3")
        store.delete_sport.assert_called_once_with(SportId(3))


class TestAvailabilityService:
    """Tests for AvailabilityService."""

    def test_available_uses_clock(self, store):
        """The store is asked for sessions from the clock's today onwards."""
        store.available_sessions.return_value = [make_view()]

        result = AvailabilityService(store, clock=fixed_clock).available_sessions_for("2")

        store.available_sessions.assert_called_once_with(PlayerId(2), TODAY)
        assert [view.id for view in result] == [SessionId(10)]

    def test_available_invalid_player_raises_error(self, store):
        with pytest.raises(InvalidIdentifierError):
            AvailabilityService(store, clock=fixed_clock).available_sessions_for("me")

    def test_joined_passes_player(self, store):
        store.joined_sessions.return_value = []
        AvailabilityService(store, clock=fixed_clock).joined_sessions_for(4)
        store.joined_sessions.assert_called_once_with(PlayerId(4))

    def test_dashboard_materializes_both_sets(self, store):
        """dashboard_for returns tuples of available and joined sessions."""
        store.available_sessions.return_value = iter([make_view(10)])
        store.joined_sessions.return_value = iter([make_view(11)])

        dashboard = AvailabilityService(store, clock=fixed_clock).dashboard_for(2)

        assert dashboard == PlayerDashboard(
            available=(make_view(10),), joined=(make_view(11),)
        )


class TestMembershipService:
    """Tests for MembershipService."""

    def test_join_returns_refreshed_dashboard(self, store):
        """A successful join re-resolves availability for the player."""
        store.add_membership.return_value = Membership(
            session_id=SessionId(10), player_id=PlayerId(2), joined_at=NOW
        )
        store.available_sessions.return_value = []
        store.joined_sessions.return_value = [make_view(10)]

        dashboard = MembershipService(store, clock=fixed_clock).join_session("10", "2")

        store.add_membership.assert_called_once_with(SessionId(10), PlayerId(2))
        store.available_sessions.assert_called_once_with(PlayerId(2), TODAY)
        assert dashboard.available == ()
        assert dashboard.joined == (make_view(10),)

    def test_join_twice_raises_conflict(self, store):
        """AlreadyJoinedError from the store reaches the caller unchanged."""
        store.add_membership.side_effect = AlreadyJoinedError()
        with pytest.raises(AlreadyJoinedError):
            MembershipService(store, clock=fixed_clock).join_session(10, 2)
        store.available_sessions.assert_not_called()

    def test_join_missing_session_raises_error(self, store):
        store.add_membership.side_effect = SessionNotFoundError()
        with pytest.raises(SessionNotFoundError):
            MembershipService(store, clock=fixed_clock).join_session(10, 2)

    def test_join_invalid_session_id_raises_error(self, store):
        with pytest.raises(InvalidIdentifierError):
            MembershipService(store, clock=fixed_clock).join_session("ten", 2)
        store.add_membership.assert_not_called()

    def test_leave_not_joined_raises_error(self, store):
        """leave_session raises MembershipNotFoundError when nothing was removed."""
        store.remove_membership.return_value = False
        with pytest.raises(MembershipNotFoundError):
            MembershipService(store, clock=fixed_clock).leave_session(10, 2)

    def test_leave_returns_refreshed_dashboard(self, store):
        store.remove_membership.return_value = True
        store.available_sessions.return_value = [make_view(10)]
        store.joined_sessions.return_value = []

        dashboard = MembershipService(store, clock=fixed_clock).leave_session(10, 2)

        store.remove_membership.assert_called_once_with(SessionId(10), PlayerId(2))
        assert dashboard.available == (make_view(10),)


class TestSessionLifecycleService:
    """Tests for SessionLifecycleService."""

    def test_create_session_parses_arguments(self, store):
        """Raw request values are parsed before reaching the store."""
        store.add_session.return_value = make_session()

        SessionLifecycleService(store).create_session("1", 1, "2026-10-19", " Court 1 ")

        store.add_session.assert_called_once_with(
            SportId(1), PlayerId(1), date(2026, 10, 19), "Court 1"
        )

    def test_create_session_accepts_past_date(self, store):
        """Past dates are not rejected."""
        store.add_session.return_value = make_session(on=date(2020, 1, 1))
        SessionLifecycleService(store).create_session(1, 1, "2020-01-01", "Court 1")
        store.add_session.assert_called_once()

    def test_create_session_invalid_date_raises_error(self, store):
        with pytest.raises(InvalidSessionDateError):
            SessionLifecycleService(store).create_session(1, 1, "tomorrow", "Court 1")
        store.add_session.assert_not_called()

    def test_create_session_invalid_sport_id_raises_error(self, store):
        with pytest.raises(InvalidIdentifierError):
            SessionLifecycleService(store).create_session("x", 1, "2026-10-19", "Court")

    def test_create_session_long_venue_raises_error(self, store):
        with pytest.raises(InvalidVenueError):
            SessionLifecycleService(store).create_session(1, 1, "2026-10-19", "v" * 256)

    @pytest.mark.parametrize("venue", [None, 42])
    def test_create_session_non_text_venue_raises_error(self, store, venue):
        """A venue that is not text raises InvalidVenueError."""
        with pytest.raises(InvalidVenueError):
            SessionLifecycleService(store).create_session(1, 1, "2030-01-01", venue)
        store.add_session.assert_not_called()

    def test_edit_session_non_text_venue_raises_error(self, store):
        with pytest.raises(InvalidVenueError):
            SessionLifecycleService(store).edit_session(10, 1, 1, "2030-01-01", None)
        store.update_session.assert_not_called()

    def test_create_session_unknown_sport_propagates(self, store):
        store.add_session.side_effect = SportNotFoundError()
        with pytest.raises(SportNotFoundError):
            SessionLifecycleService(store).create_session(9, 1, "2026-10-19", "Court")

    def test_edit_session_not_owner_raises_not_found(self, store):
        """A non-owner edit looks exactly like a missing session."""
        store.update_session.return_value = None
        with pytest.raises(SessionNotFoundError):
            SessionLifecycleService(store).edit_session(10, 2, 1, "2026-10-20", "Court 2")

    def test_edit_session_returns_updated_session(self, store):
        updated = make_session(on=date(2026, 10, 20))
        store.update_session.return_value = updated

        result = SessionLifecycleService(store).edit_session(
            "10", "1", "1", "2026-10-20", "Court 1"
        )

        store.update_session.assert_called_once_with(
            SessionId(10), PlayerId(1), SportId(1), date(2026, 10, 20), "Court 1"
        )
        assert result is updated

    def test_delete_session_not_owner_raises_not_found(self, store):
        store.delete_session.return_value = False
        with pytest.raises(SessionNotFoundError):
            SessionLifecycleService(store).delete_session(10, 2)

    def test_delete_session_passes_requester(self, store):
        store.delete_session.return_value = True
        SessionLifecycleService(store).delete_session("10", "1")
        store.delete_session.assert_called_once_with(SessionId(10), PlayerId(1))


class TestReportService:
    """Tests for ReportService."""

    def test_session_report_combines_sessions_and_popularity(self, store):
        store.list_sessions.return_value = [make_view()]
        store.sport_popularity.return_value = [SportPopularity("Tennis", 1)]

        report = ReportService(store).session_report()

        assert report.sessions == (make_view(),)
        assert report.popularity == (SportPopularity("Tennis", 1),)
