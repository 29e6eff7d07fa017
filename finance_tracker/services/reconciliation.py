"""Budget-vs-actual reconciliation and spending insights.

Everything here is pure: the inputs are already-fetched backend payloads and
nothing is read from or written to the network.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from finance_tracker.models.enums import BudgetStatus, Category, InsightType, Month
from finance_tracker.schemas.budget import BudgetEntry, ComparisonRecord, Insight, OverBudgetFlag
from finance_tracker.schemas.report import CategoryExpense
from finance_tracker.services.formatting import format_amount

WARNING_THRESHOLD = 80
OVER_THRESHOLD = 100

HUNDRED = Decimal("100")


def classify_status(percentage: int) -> BudgetStatus:
    if percentage > OVER_THRESHOLD:
        return BudgetStatus.OVER
    if percentage > WARNING_THRESHOLD:
        return BudgetStatus.WARNING
    return BudgetStatus.GOOD


def budget_percentage(actual: Decimal, budget: Decimal) -> int:
    if budget <= 0:
        return 0
    return int((actual / budget * HUNDRED).to_integral_value(rounding=ROUND_HALF_UP))


def find_actual(category: Category, expenses: Sequence[CategoryExpense]) -> Decimal:
    for expense in expenses:
        if expense.category == category.value:
            return expense.total
    return Decimal("0")


def build_comparisons(
    budgets: Sequence[BudgetEntry],
    expenses: Sequence[CategoryExpense],
    selected_month: Month,
) -> list[ComparisonRecord]:
    comparisons: list[ComparisonRecord] = []
    for budget in budgets:
        if budget.month != selected_month:
            continue

        actual = find_actual(budget.category, expenses)
        percentage = budget_percentage(actual, budget.total_budget)
        comparisons.append(
            ComparisonRecord(
                category=budget.category,
                budget=budget.total_budget,
                actual=actual,
                percentage=percentage,
                status=classify_status(percentage),
            )
        )
    return comparisons


def _categories(count: int) -> str:
    return "category" if count == 1 else "categories"


def generate_insights(
    comparisons: Sequence[ComparisonRecord],
    expenses: Sequence[CategoryExpense],
    over_budget_flags: Sequence[OverBudgetFlag],
) -> list[Insight]:
    insights: list[Insight] = []

    # Counted from the server flags, not from the comparisons: the two can cover different months.
    over_budget = [
        flag
        for flag in over_budget_flags
        if flag.total_spent > flag.budget_amount and flag.budget_amount > 0
    ]
    if over_budget:
        count = len(over_budget)
        insights.append(
            Insight(
                type=InsightType.WARNING,
                title="Over Budget Alert",
                description=f"You're over budget in {count} {_categories(count)} this month",
            )
        )

    good_count = sum(1 for item in comparisons if item.status == BudgetStatus.GOOD)
    if good_count > 0:
        insights.append(
            Insight(
                type=InsightType.SUCCESS,
                title="Great Job!",
                description=f"You're staying within budget for {good_count} {_categories(good_count)}",
            )
        )

    if expenses:
        # max() keeps the first entry on ties.
        highest = max(expenses, key=lambda item: item.total)
        insights.append(
            Insight(
                type=InsightType.INFO,
                title="Top Spending Category",
                description=f"{highest.category} accounts for {format_amount(highest.total)} of your expenses",
            )
        )

    return insights


def reconcile(
    budgets: Sequence[BudgetEntry],
    expenses: Sequence[CategoryExpense],
    over_budget_flags: Sequence[OverBudgetFlag],
    selected_month: Month,
) -> tuple[list[ComparisonRecord], list[Insight]]:
    comparisons = build_comparisons(budgets, expenses, selected_month)
    insights = generate_insights(comparisons, expenses, over_budget_flags)
    return comparisons, insights
