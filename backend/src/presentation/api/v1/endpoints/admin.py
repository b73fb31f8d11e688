"""Administrator dashboard endpoints."""

from fastapi import APIRouter, Depends

from presentation.schemas import ApplicationResponse, StatsResponse
from presentation.api.v1.dependencies import (
    get_dashboard_stats_use_case,
    get_list_applications_use_case,
)
from application.use_cases import GetDashboardStatsUseCase, ListApplicationsUseCase

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    use_case: GetDashboardStatsUseCase = Depends(get_dashboard_stats_use_case),
) -> StatsResponse:
    """Dashboard counters, recomputed on every request."""
    stats = await use_case.execute()
    return StatsResponse(**stats.to_dict())


@router.get("/vendors", response_model=list[ApplicationResponse])
async def list_vendors(
    use_case: ListApplicationsUseCase = Depends(get_list_applications_use_case),
) -> list[ApplicationResponse]:
    """Vendor directory: approved applications, newest first."""
    vendors = await use_case.approved_vendors()
    return [ApplicationResponse.from_entity(v) for v in vendors]
