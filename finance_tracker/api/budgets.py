from fastapi import APIRouter, Depends, Path, status

from finance_tracker.api.dependencies import get_selected_month
from finance_tracker.clients.backend import FinanceApiClient, get_backend_client
from finance_tracker.models.enums import Month
from finance_tracker.schemas.budget import BudgetCreate, BudgetOverview, BudgetUpdate
from finance_tracker.schemas.common import RESOURCE_ID_PATTERN
from finance_tracker.services import budgets as budget_service

router = APIRouter(prefix="/api/budgets", tags=["budgets"])


@router.get("/overview", response_model=BudgetOverview)
async def budget_overview(
    month: Month = Depends(get_selected_month),
    client: FinanceApiClient = Depends(get_backend_client),
) -> BudgetOverview:
    return await budget_service.load_budget_overview(client, month)


@router.post("", response_model=BudgetOverview, status_code=status.HTTP_201_CREATED)
async def create_budget(
    payload: BudgetCreate,
    month: Month = Depends(get_selected_month),
    client: FinanceApiClient = Depends(get_backend_client),
) -> BudgetOverview:
    return await budget_service.create_budget(client, payload, month)


@router.put("/{budget_id}", response_model=BudgetOverview)
async def update_budget(
    payload: BudgetUpdate,
    budget_id: str = Path(pattern=RESOURCE_ID_PATTERN),
    month: Month = Depends(get_selected_month),
    client: FinanceApiClient = Depends(get_backend_client),
) -> BudgetOverview:
    return await budget_service.update_budget(client, budget_id, payload, month)


@router.delete("/{budget_id}", response_model=BudgetOverview)
async def delete_budget(
    budget_id: str = Path(pattern=RESOURCE_ID_PATTERN),
    month: Month = Depends(get_selected_month),
    client: FinanceApiClient = Depends(get_backend_client),
) -> BudgetOverview:
    return await budget_service.delete_budget(client, budget_id, month)
