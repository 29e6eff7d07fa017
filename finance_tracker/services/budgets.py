import asyncio
import logging

from finance_tracker.clients.backend import FinanceApiClient
from finance_tracker.models.enums import Month
from finance_tracker.schemas.budget import BudgetCreate, BudgetOverview, BudgetUpdate
from finance_tracker.services.reconciliation import reconcile

logger = logging.getLogger(__name__)


async def load_budget_overview(client: FinanceApiClient, month: Month) -> BudgetOverview:
    """Fetch budgets, category expenses and over-budget flags, then reconcile them.

    All three reads must succeed; the first failure propagates and nothing is
    reconciled.
    """
    budgets, expenses, over_budget_flags = await asyncio.gather(
        client.get_budgets(),
        client.get_category_expenses(action="fetch budget data"),
        client.get_over_budget_categories(),
    )

    comparisons, insights = reconcile(budgets, expenses, over_budget_flags, month)
    logger.info(
        "Reconciled %s budgets for %s: %s comparisons, %s insights",
        len(budgets),
        month.value,
        len(comparisons),
        len(insights),
    )
    return BudgetOverview(month=month, budgets=budgets, comparisons=comparisons, insights=insights)


async def create_budget(client: FinanceApiClient, payload: BudgetCreate, month: Month) -> BudgetOverview:
    await client.add_budget(payload)
    return await load_budget_overview(client, month)


async def update_budget(
    client: FinanceApiClient,
    budget_id: str,
    payload: BudgetUpdate,
    month: Month,
) -> BudgetOverview:
    await client.edit_budget(budget_id, payload)
    return await load_budget_overview(client, month)


async def delete_budget(client: FinanceApiClient, budget_id: str, month: Month) -> BudgetOverview:
    await client.delete_budget(budget_id)
    return await load_budget_overview(client, month)
