import datetime as dt

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from finance_tracker.models.enums import Category, TransactionType
from finance_tracker.schemas.common import Amount


class TransactionRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    amount: Amount
    date: dt.datetime
    description: str
    category: Category
    type: TransactionType


class TransactionCreate(BaseModel):
    amount: Amount = Field(gt=0)
    date: dt.date
    description: str = Field(min_length=1, max_length=255)
    category: Category
    type: TransactionType = TransactionType.EXPENSE

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("Description must not be empty")
        return normalized


class TransactionUpdate(TransactionCreate):
    pass
