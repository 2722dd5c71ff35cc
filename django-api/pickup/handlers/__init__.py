from pickup.handlers.views import (
    MembershipView,
    PlayerDashboardView,
    ReportView,
    SessionDetailView,
    SessionListView,
    SportDetailView,
    SportListView,
)

__all__ = [
    "SportListView",
    "SportDetailView",
    "SessionListView",
    "SessionDetailView",
    "MembershipView",
    "PlayerDashboardView",
    "ReportView",
]
