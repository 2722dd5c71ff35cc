from pickup.services.availability import AvailabilityService
from pickup.services.membership import MembershipService
from pickup.services.reports import ReportService
from pickup.services.session_lifecycle import SessionLifecycleService
from pickup.services.sport_catalog import SportCatalogService

__all__ = [
    "AvailabilityService",
    "MembershipService",
    "ReportService",
    "SessionLifecycleService",
    "SportCatalogService",
]
