from django.urls import path

from pickup.handlers import (
    MembershipView,
    PlayerDashboardView,
    ReportView,
    SessionDetailView,
    SessionListView,
    SportDetailView,
    SportListView,
)

urlpatterns = [
    path("sports", SportListView.as_view(), name="sport-list"),
    path("sports/<str:sport_id>", SportDetailView.as_view(), name="sport-detail"),
    path("sessions", SessionListView.as_view(), name="session-list"),
    path(
        "sessions/<str:session_id>",
        SessionDetailView.as_view(),
        name="session-detail",
    ),
    path(
        "sessions/<str:session_id>/membership",
        MembershipView.as_view(),
        name="session-membership",
    ),
    path("me/sessions", PlayerDashboardView.as_view(), name="player-dashboard"),
    path("reports", ReportView.as_view(), name="reports"),
]
