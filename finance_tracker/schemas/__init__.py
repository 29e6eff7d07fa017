from finance_tracker.schemas.budget import (
    BudgetCreate,
    BudgetEntry,
    BudgetOverview,
    BudgetUpdate,
    ComparisonRecord,
    Insight,
    OverBudgetFlag,
)
from finance_tracker.schemas.report import (
    AnalyticsResponse,
    CategoryExpense,
    CategoryShare,
    DashboardResponse,
    MonthlyTotal,
    TotalExpense,
)
from finance_tracker.schemas.transaction import TransactionCreate, TransactionRead, TransactionUpdate

__all__ = [
    "AnalyticsResponse",
    "BudgetCreate",
    "BudgetEntry",
    "BudgetOverview",
    "BudgetUpdate",
    "CategoryExpense",
    "CategoryShare",
    "ComparisonRecord",
    "DashboardResponse",
    "Insight",
    "MonthlyTotal",
    "OverBudgetFlag",
    "TotalExpense",
    "TransactionCreate",
    "TransactionRead",
    "TransactionUpdate",
]
