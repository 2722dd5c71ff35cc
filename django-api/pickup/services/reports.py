"""Reporting service: session overview and sport popularity."""

from pickup.domain import SessionReport
from pickup.stores.interfaces import EntityStore


class ReportService:
    def __init__(self, store: EntityStore) -> None:
        self._store = store

    def session_report(self) -> SessionReport:
        return SessionReport(
            sessions=tuple(self._store.list_sessions()),
            popularity=tuple(self._store.sport_popularity()),
        )
