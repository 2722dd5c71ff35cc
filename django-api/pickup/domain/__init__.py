from pickup.domain.models import (
    Membership,
    PlayerDashboard,
    Session,
    SessionReport,
    SessionView,
    Sport,
    SportPopularity,
)
from pickup.domain.value_objects import PlayerId, SessionId, SportId

__all__ = [
    "Sport",
    "Session",
    "Membership",
    "SessionView",
    "PlayerDashboard",
    "SportPopularity",
    "SessionReport",
    "SportId",
    "SessionId",
    "PlayerId",
]
