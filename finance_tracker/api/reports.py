from fastapi import APIRouter, Depends

from finance_tracker.clients.backend import FinanceApiClient, get_backend_client
from finance_tracker.schemas.report import AnalyticsResponse, DashboardResponse
from finance_tracker.services.reporting import load_analytics, load_dashboard
from finance_tracker.settings import Settings, get_settings

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    client: FinanceApiClient = Depends(get_backend_client),
    settings: Settings = Depends(get_settings),
) -> DashboardResponse:
    return await load_dashboard(client, settings.dashboard_recent_limit)


@router.get("/analytics", response_model=AnalyticsResponse)
async def analytics(client: FinanceApiClient = Depends(get_backend_client)) -> AnalyticsResponse:
    return await load_analytics(client)
