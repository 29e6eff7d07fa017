from enum import Enum


class Category(str, Enum):
    FOOD = "Food"
    RENT = "Rent"
    SHOPPING = "Shopping"
    TRAVEL = "Travel"
    BILLS = "Bills"
    OTHER = "Other"


class Month(str, Enum):
    JANUARY = "January"
    FEBRUARY = "February"
    MARCH = "March"
    APRIL = "April"
    MAY = "May"
    JUNE = "June"
    JULY = "July"
    AUGUST = "August"
    SEPTEMBER = "September"
    OCTOBER = "October"
    NOVEMBER = "November"
    DECEMBER = "December"

    @classmethod
    def from_number(cls, number: int) -> "Month":
        return list(cls)[number - 1]


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class BudgetStatus(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    OVER = "over"


class InsightType(str, Enum):
    WARNING = "warning"
    SUCCESS = "success"
    INFO = "info"
