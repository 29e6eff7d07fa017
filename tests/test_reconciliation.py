from decimal import Decimal

import pytest

from finance_tracker.models.enums import BudgetStatus, Category, InsightType, Month
from finance_tracker.schemas.budget import BudgetEntry, ComparisonRecord, OverBudgetFlag
from finance_tracker.schemas.report import CategoryExpense
from finance_tracker.services.reconciliation import (
    budget_percentage,
    build_comparisons,
    classify_status,
    generate_insights,
    reconcile,
)


def _budget(category: Category, total: str, month: Month = Month.JUNE, budget_id: str = "b1") -> BudgetEntry:
    return BudgetEntry(id=budget_id, category=category, month=month, total_budget=Decimal(total))


def _expense(category: str, total: str) -> CategoryExpense:
    return CategoryExpense(category=category, total=Decimal(total))


def _flag(category: str, spent: str, budget: str) -> OverBudgetFlag:
    return OverBudgetFlag(category=category, total_spent=Decimal(spent), budget_amount=Decimal(budget))


def _comparison(status: BudgetStatus) -> ComparisonRecord:
    return ComparisonRecord(
        category=Category.FOOD,
        budget=Decimal("100"),
        actual=Decimal("0"),
        percentage=0,
        status=status,
    )


@pytest.mark.parametrize(
    ("percentage", "expected"),
    [
        (0, BudgetStatus.GOOD),
        (80, BudgetStatus.GOOD),
        (81, BudgetStatus.WARNING),
        (100, BudgetStatus.WARNING),
        (101, BudgetStatus.OVER),
    ],
)
def test_status_thresholds_are_strict(percentage: int, expected: BudgetStatus) -> None:
    assert classify_status(percentage) == expected


def test_over_budget_comparison() -> None:
    comparisons = build_comparisons(
        [_budget(Category.FOOD, "200")],
        [_expense("Food", "250")],
        Month.JUNE,
    )

    assert len(comparisons) == 1
    record = comparisons[0]
    assert record.category == Category.FOOD
    assert record.budget == Decimal("200")
    assert record.actual == Decimal("250")
    assert record.percentage == 125
    assert record.status == BudgetStatus.OVER
    assert record.progress == 100
    assert record.remaining == Decimal("-50")


def test_within_budget_comparison() -> None:
    comparisons = build_comparisons([_budget(Category.FOOD, "200")], [_expense("Food", "150")], Month.JUNE)

    assert comparisons[0].percentage == 75
    assert comparisons[0].status == BudgetStatus.GOOD


def test_warning_comparison() -> None:
    comparisons = build_comparisons([_budget(Category.FOOD, "100")], [_expense("Food", "90")], Month.JUNE)

    assert comparisons[0].percentage == 90
    assert comparisons[0].status == BudgetStatus.WARNING


def test_zero_budget_does_not_divide() -> None:
    comparisons = build_comparisons([_budget(Category.RENT, "0")], [_expense("Rent", "500")], Month.JUNE)

    assert comparisons[0].percentage == 0
    assert comparisons[0].status == BudgetStatus.GOOD


def test_missing_expense_counts_as_zero() -> None:
    comparisons = build_comparisons([_budget(Category.TRAVEL, "300")], [_expense("Food", "50")], Month.JUNE)

    assert comparisons[0].actual == Decimal("0")
    assert comparisons[0].percentage == 0


def test_percentage_rounds_half_up() -> None:
    assert budget_percentage(Decimal("1"), Decimal("8")) == 13
    assert budget_percentage(Decimal("2"), Decimal("3")) == 67


def test_only_selected_month_is_compared_in_input_order() -> None:
    budgets = [
        _budget(Category.RENT, "1000", budget_id="b1"),
        _budget(Category.FOOD, "200", month=Month.MAY, budget_id="b2"),
        _budget(Category.BILLS, "150", budget_id="b3"),
    ]

    comparisons = build_comparisons(budgets, [], Month.JUNE)

    assert [item.category for item in comparisons] == [Category.RENT, Category.BILLS]


def test_empty_inputs_reconcile_to_nothing() -> None:
    assert reconcile([], [], [], Month.JUNE) == ([], [])


def test_insights_in_fixed_order() -> None:
    comparisons, insights = reconcile(
        [_budget(Category.FOOD, "200", budget_id="b1"), _budget(Category.RENT, "1000", budget_id="b2")],
        [_expense("Food", "250"), _expense("Rent", "400")],
        [_flag("Food", "250", "200")],
        Month.JUNE,
    )

    assert [item.status for item in comparisons] == [BudgetStatus.OVER, BudgetStatus.GOOD]
    assert [insight.type for insight in insights] == [InsightType.WARNING, InsightType.SUCCESS, InsightType.INFO]
    assert insights[0].title == "Over Budget Alert"
    assert insights[0].description == "You're over budget in 1 category this month"
    assert insights[1].title == "Great Job!"
    assert insights[1].description == "You're staying within budget for 1 category"
    assert insights[2].title == "Top Spending Category"
    assert insights[2].description == "Rent accounts for $400.00 of your expenses"


def test_over_budget_insight_uses_server_flags_only() -> None:
    flags = [
        _flag("Food", "250", "200"),
        _flag("Bills", "90", "80"),
        _flag("Travel", "50", "0"),
        _flag("Rent", "100", "100"),
    ]

    insights = generate_insights([], [], flags)

    assert len(insights) == 1
    assert insights[0].type == InsightType.WARNING
    assert insights[0].description == "You're over budget in 2 categories this month"


def test_good_spending_insight_pluralizes() -> None:
    insights = generate_insights(
        [_comparison(BudgetStatus.GOOD), _comparison(BudgetStatus.GOOD), _comparison(BudgetStatus.OVER)],
        [],
        [],
    )

    assert [insight.type for insight in insights] == [InsightType.SUCCESS]
    assert insights[0].description == "You're staying within budget for 2 categories"


def test_top_category_tie_keeps_first_entry() -> None:
    insights = generate_insights([], [_expense("A", "100"), _expense("B", "100")], [])

    assert insights[0].description == "A accounts for $100.00 of your expenses"


def test_insights_fire_without_budgets_for_month() -> None:
    comparisons, insights = reconcile(
        [_budget(Category.FOOD, "200", month=Month.MAY)],
        [_expense("Shopping", "12.345")],
        [_flag("Food", "250", "200")],
        Month.JUNE,
    )

    assert comparisons == []
    assert [insight.type for insight in insights] == [InsightType.WARNING, InsightType.INFO]
    assert insights[1].description == "Shopping accounts for $12.35 of your expenses"


def test_huge_spend_against_tiny_budget_is_over() -> None:
    comparisons, insights = reconcile([_budget(Category.FOOD, "0.01")], [_expense("Food", "1e26")], [], Month.JUNE)

    assert comparisons[0].percentage == 10**30
    assert comparisons[0].status == BudgetStatus.OVER
    assert comparisons[0].progress == 100
    assert insights[-1].description == "Food accounts for $100000000000000000000000000.00 of your expenses"


def test_huge_top_category_is_formatted_in_full() -> None:
    comparisons, insights = reconcile([], [_expense("Food", "1e27")], [], Month.JUNE)

    assert comparisons == []
    assert insights[0].description == "Food accounts for $1000000000000000000000000000.00 of your expenses"
