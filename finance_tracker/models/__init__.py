from finance_tracker.models.enums import BudgetStatus, Category, InsightType, Month, TransactionType

__all__ = [
    "BudgetStatus",
    "Category",
    "InsightType",
    "Month",
    "TransactionType",
]
