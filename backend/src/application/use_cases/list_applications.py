"""Use cases for the administrator listings and dashboard counters."""

from domain.entities import VendorApplication
from domain.enums import ApplicationStatus, ApplicationTab
from domain.repositories import IApplicationRepository
from domain.value_objects import ApplicationStats, PENDING_STATUSES
from infrastructure.config import get_logger


def filter_by_tab(applications: list[VendorApplication], tab: ApplicationTab) -> list[VendorApplication]:
    """Keep the applications shown under a dashboard tab, preserving order."""
    if tab == ApplicationTab.ALL:
        return list(applications)
    if tab == ApplicationTab.PENDING:
        return [a for a in applications if a.status in PENDING_STATUSES]
    wanted = ApplicationStatus(tab.value)
    return [a for a in applications if a.status == wanted]


class ListApplicationsUseCase:
    """List applications for administrators, newest first."""

    def __init__(self, application_repository: IApplicationRepository):
        self.application_repo = application_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, tab: ApplicationTab = ApplicationTab.ALL) -> list[VendorApplication]:
        applications = await self.application_repo.list_all()
        filtered = filter_by_tab(applications, tab)
        self.logger.info(f"Listed {len(filtered)} of {len(applications)} applications (tab={tab.value})")
        return filtered

    async def approved_vendors(self) -> list[VendorApplication]:
        """Vendor directory: every approved application."""
        return await self.execute(ApplicationTab.APPROVED)


class GetDashboardStatsUseCase:
    """Recompute the dashboard counters from the current applications."""

    def __init__(self, application_repository: IApplicationRepository):
        self.application_repo = application_repository

    async def execute(self) -> ApplicationStats:
        applications = await self.application_repo.list_all()
        return ApplicationStats.from_applications(applications)
