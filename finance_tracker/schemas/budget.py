from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from finance_tracker.models.enums import BudgetStatus, Category, InsightType, Month
from finance_tracker.schemas.common import Amount


class BudgetEntry(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    category: Category
    month: Month
    total_budget: Amount = Field(ge=0)


class BudgetCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_budget: Amount = Field(gt=0)
    category: Category
    month: Month


class BudgetUpdate(BudgetCreate):
    pass


class OverBudgetFlag(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    category: str
    total_spent: Amount
    budget_amount: Amount


class ComparisonRecord(BaseModel):
    category: Category
    budget: Amount
    actual: Amount
    percentage: int
    status: BudgetStatus

    @computed_field
    @property
    def progress(self) -> int:
        return min(self.percentage, 100)

    @computed_field
    @property
    def remaining(self) -> Amount:
        return self.budget - self.actual


class Insight(BaseModel):
    type: InsightType
    title: str
    description: str


class BudgetOverview(BaseModel):
    month: Month
    budgets: list[BudgetEntry]
    comparisons: list[ComparisonRecord]
    insights: list[Insight]

