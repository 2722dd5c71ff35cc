"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic

Domain errors propagate to handlers.errors.domain_exception_handler.
The authenticated user's primary key is the player/creator id.
"""

from rest_framework import status
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from pickup.handlers.serializers import (
    PlayerDashboardSerializer,
    SessionInputSerializer,
    SessionReportSerializer,
    SessionSerializer,
    SessionViewSerializer,
    SportInputSerializer,
    SportSerializer,
)
from pickup.services import (
    AvailabilityService,
    MembershipService,
    ReportService,
    SessionLifecycleService,
    SportCatalogService,
)
from pickup.stores.django_store import DjangoEntityStore
from pickup.stores.interfaces import EntityStore


def _store() -> EntityStore:
    return DjangoEntityStore()


class AdminWritesMixin:
    """Reads need a logged-in user, writes need a staff user."""

    write_methods = ("POST", "PUT", "PATCH", "DELETE")

    def get_permissions(self):
        if self.request.method in self.write_methods:
            return [IsAdminUser()]
        return [IsAuthenticated()]


class SportListView(AdminWritesMixin, APIView):
    """Handler for GET/POST /api/sports"""

    def get(self, request: Request) -> Response:
        sports = SportCatalogService(_store()).list_sports()
        return Response(SportSerializer(sports, many=True).data)

    def post(self, request: Request) -> Response:
        payload = SportInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        sport = SportCatalogService(_store()).create_sport(payload.validated_data["name"])
        return Response(SportSerializer(sport).data, status=status.HTTP_201_CREATED)


class SportDetailView(AdminWritesMixin, APIView):
    """Handler for DELETE /api/sports/{sport_id}"""

    def delete(self, request: Request, sport_id: str) -> Response:
        SportCatalogService(_store()).delete_sport(sport_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class SessionListView(AdminWritesMixin, APIView):
    """Handler for GET/POST /api/sessions"""

    def get(self, request: Request) -> Response:
        sessions = SessionLifecycleService(_store()).list_sessions()
        return Response(SessionViewSerializer(sessions, many=True).data)

    def post(self, request: Request) -> Response:
        payload = SessionInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        session = SessionLifecycleService(_store()).create_session(
            data["sport_id"], request.user.pk, data["date"], data["venue"]
        )
        return Response(SessionSerializer(session).data, status=status.HTTP_201_CREATED)


class SessionDetailView(APIView):
    """Handler for PUT/DELETE /api/sessions/{session_id}

    Only the session's creator may edit or delete it.
    """

    permission_classes = [IsAuthenticated]

    def put(self, request: Request, session_id: str) -> Response:
        payload = SessionInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        session = SessionLifecycleService(_store()).edit_session(
            session_id, request.user.pk, data["sport_id"], data["date"], data["venue"]
        )
        return Response(SessionSerializer(session).data)

    def delete(self, request: Request, session_id: str) -> Response:
        SessionLifecycleService(_store()).delete_session(session_id, request.user.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class MembershipView(APIView):
    """Handler for POST (join) and DELETE (leave) /api/sessions/{session_id}/membership"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, session_id: str) -> Response:
        dashboard = MembershipService(_store()).join_session(session_id, request.user.pk)
        return Response(
            PlayerDashboardSerializer(dashboard).data, status=status.HTTP_201_CREATED
        )

    def delete(self, request: Request, session_id: str) -> Response:
        dashboard = MembershipService(_store()).leave_session(session_id, request.user.pk)
        return Response(PlayerDashboardSerializer(dashboard).data)


class PlayerDashboardView(APIView):
    """Handler for GET /api/me/sessions"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        dashboard = AvailabilityService(_store()).dashboard_for(request.user.pk)
        return Response(PlayerDashboardSerializer(dashboard).data)


class ReportView(APIView):
    """Handler for GET /api/reports"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        report = ReportService(_store()).session_report()
        return Response(SessionReportSerializer(report).data)
