"""Async client for the finance REST backend.

Every failure is reported as one of two errors: ``BackendUnavailableError`` when
the backend cannot be reached at all, and ``BackendError`` when it answered with
a non-2xx status (its ``error`` field is kept verbatim) or with a body that does
not match the expected shape.
"""

from __future__ import annotations

import logging
import re
from collections.abc import AsyncGenerator
from decimal import Decimal
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from finance_tracker.schemas.budget import BudgetCreate, BudgetEntry, BudgetUpdate, OverBudgetFlag
from finance_tracker.schemas.common import RESOURCE_ID_PATTERN
from finance_tracker.schemas.report import CategoryExpense, MonthlyTotal, TotalExpense
from finance_tracker.schemas.transaction import TransactionCreate, TransactionRead, TransactionUpdate
from finance_tracker.settings import Settings, get_settings

logger = logging.getLogger(__name__)

BUDGETS_ADAPTER = TypeAdapter(list[BudgetEntry])
EXPENSES_ADAPTER = TypeAdapter(list[CategoryExpense])
OVER_BUDGET_ADAPTER = TypeAdapter(list[OverBudgetFlag])
TRANSACTIONS_ADAPTER = TypeAdapter(list[TransactionRead])
MONTHLY_ADAPTER = TypeAdapter(list[MonthlyTotal])
TOTAL_EXPENSE_ADAPTER = TypeAdapter(TotalExpense)
TRANSACTION_ADAPTER = TypeAdapter(TransactionRead)

BAD_GATEWAY = 502


class BackendClientError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BackendUnavailableError(BackendClientError):
    pass


class BackendError(BackendClientError):
    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


def extract_error_message(response: httpx.Response, default: str) -> str:
    try:
        payload = response.json()
    except ValueError:
        return default

    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return default


def _path_id(value: str) -> str:
    if re.fullmatch(RESOURCE_ID_PATTERN, value) is None:
        raise ValueError(f"Invalid resource id: {value!r}")
    return value


def _body(payload: BaseModel) -> dict[str, Any]:
    return payload.model_dump(mode="json", by_alias=True)


class FinanceApiClient:
    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def _request(
        self,
        method: str,
        path: str,
        action: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        logger.debug("Backend request %s %s", method, path)
        try:
            response = await self._http.request(method, path, params=params, json=json)
        except httpx.TransportError as exc:
            logger.warning("Backend unreachable for %s %s: %s", method, path, exc)
            raise BackendUnavailableError(
                f"Failed to {action}. Please check if the server is running."
            ) from exc

        if not response.is_success:
            message = extract_error_message(response, f"Failed to {action}")
            logger.warning("Backend returned %s for %s %s: %s", response.status_code, method, path, message)
            raise BackendError(message, status_code=response.status_code)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as exc:
            raise BackendError(f"Failed to {action}", status_code=BAD_GATEWAY) from exc

    async def _fetch(
        self,
        path: str,
        adapter: TypeAdapter,
        action: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        payload = await self._request("GET", path, action, params=params)
        try:
            return adapter.validate_python(payload)
        except ValidationError as exc:
            logger.warning("Unexpected payload from %s: %s", path, exc)
            raise BackendError(f"Failed to {action}", status_code=BAD_GATEWAY) from exc

    async def get_budgets(self) -> list[BudgetEntry]:
        return await self._fetch("/api/budget/getBudgets", BUDGETS_ADAPTER, "fetch budget data")

    async def get_category_expenses(self, action: str = "fetch category expenses") -> list[CategoryExpense]:
        return await self._fetch("/api/transaction/categoryWiseExpense", EXPENSES_ADAPTER, action)

    async def get_over_budget_categories(self) -> list[OverBudgetFlag]:
        return await self._fetch(
            "/api/budget/overBudgetCategories",
            OVER_BUDGET_ADAPTER,
            "fetch budget data",
        )

    async def add_budget(self, payload: BudgetCreate) -> None:
        await self._request("POST", "/api/budget/addBudget", "add budget", json=_body(payload))

    async def edit_budget(self, budget_id: str, payload: BudgetUpdate) -> None:
        await self._request(
            "PUT",
            f"/api/budget/editBudget/{_path_id(budget_id)}",
            "update budget",
            json=_body(payload),
        )

    async def delete_budget(self, budget_id: str) -> None:
        await self._request("DELETE", f"/api/budget/deleteBudget/{_path_id(budget_id)}", "delete budget")

    async def get_recent_transactions(self, limit: int) -> list[TransactionRead]:
        return await self._fetch(
            "/api/transaction/recentTransactions",
            TRANSACTIONS_ADAPTER,
            "fetch transactions",
            params={"limit": limit},
        )

    async def get_total_expense(self) -> Decimal:
        result = await self._fetch("/api/transaction/totalExpense", TOTAL_EXPENSE_ADAPTER, "fetch dashboard data")
        return result.total_expense

    async def get_monthly_transactions(self) -> list[MonthlyTotal]:
        return await self._fetch(
            "/api/transaction/monthlyTransactions",
            MONTHLY_ADAPTER,
            "fetch analytics data",
        )

    async def add_transaction(self, payload: TransactionCreate) -> None:
        await self._request("POST", "/api/transaction/addTransaction", "add transaction", json=_body(payload))

    async def edit_transaction(self, transaction_id: str, payload: TransactionUpdate) -> TransactionRead:
        action = "update transaction"
        data = await self._request(
            "PUT",
            f"/api/transaction/editTransaction/{_path_id(transaction_id)}",
            action,
            json=_body(payload),
        )
        if not isinstance(data, dict) or "transaction" not in data:
            raise BackendError(f"Failed to {action}", status_code=BAD_GATEWAY)

        try:
            return TRANSACTION_ADAPTER.validate_python(data["transaction"])
        except ValidationError as exc:
            raise BackendError(f"Failed to {action}", status_code=BAD_GATEWAY) from exc

    async def delete_transaction(self, transaction_id: str) -> None:
        await self._request(
            "DELETE",
            f"/api/transaction/deleteTransaction/{_path_id(transaction_id)}",
            "delete transaction",
        )


def create_http_client(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=settings.request_timeout,
        transport=transport,
    )


async def get_backend_client() -> AsyncGenerator[FinanceApiClient, None]:
    async with create_http_client(get_settings()) as http:
        yield FinanceApiClient(http)
