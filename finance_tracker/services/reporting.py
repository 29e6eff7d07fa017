from __future__ import annotations

import asyncio
from collections.abc import Sequence
from decimal import Decimal

from finance_tracker.clients.backend import FinanceApiClient
from finance_tracker.schemas.report import AnalyticsResponse, CategoryExpense, CategoryShare, DashboardResponse
from finance_tracker.schemas.transaction import TransactionRead
from finance_tracker.services.formatting import TENTH, WHOLE, round_half_up

HUNDRED = Decimal("100")


def category_shares(
    items: Sequence[CategoryExpense],
    total: Decimal,
    step: Decimal = TENTH,
) -> list[CategoryShare]:
    shares = []
    for item in items:
        share = round_half_up(item.total / total * HUNDRED, step) if total > 0 else Decimal("0")
        shares.append(CategoryShare(category=item.category, total=item.total, share=share))
    return shares


def summarize_dashboard(
    total_expense: Decimal,
    breakdown: Sequence[CategoryExpense],
    recent_transactions: list[TransactionRead],
) -> DashboardResponse:
    # The backend already orders the breakdown by total, so the first entry is the top one.
    top_category = breakdown[0] if breakdown else None
    return DashboardResponse(
        total_expense=total_expense,
        top_category=top_category,
        breakdown_by_category=category_shares(breakdown, total_expense),
        recent_transactions=recent_transactions,
    )


async def load_dashboard(client: FinanceApiClient, recent_limit: int) -> DashboardResponse:
    total_expense, breakdown, recent = await asyncio.gather(
        client.get_total_expense(),
        client.get_category_expenses(),
        client.get_recent_transactions(recent_limit),
    )
    return summarize_dashboard(total_expense, breakdown, recent)


async def load_analytics(client: FinanceApiClient) -> AnalyticsResponse:
    monthly, categories = await asyncio.gather(
        client.get_monthly_transactions(),
        client.get_category_expenses(),
    )
    categories_total = sum((item.total for item in categories), Decimal("0"))
    return AnalyticsResponse(
        monthly=monthly,
        categories=category_shares(categories, categories_total, step=WHOLE),
        has_data=bool(monthly or categories),
    )
