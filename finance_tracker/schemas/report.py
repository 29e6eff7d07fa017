from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from finance_tracker.schemas.common import Amount
from finance_tracker.schemas.transaction import TransactionRead


class CategoryExpense(BaseModel):
    category: str
    total: Amount = Field(ge=0)


class CategoryShare(CategoryExpense):
    share: Amount


class MonthlyTotal(BaseModel):
    month: str
    total: Amount


class TotalExpense(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_expense: Amount = Decimal("0")


class DashboardResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_expense: Amount
    top_category: CategoryExpense | None
    breakdown_by_category: list[CategoryShare]
    recent_transactions: list[TransactionRead]


class AnalyticsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    monthly: list[MonthlyTotal]
    categories: list[CategoryShare]
    has_data: bool
