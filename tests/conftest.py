import asyncio
from typing import Any

import httpx
import pytest

from finance_tracker.clients.backend import FinanceApiClient

BASE_URL = "http://backend.test"


class FakeBackend:
    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, Any, type[Exception] | None]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: Any = None,
        error: type[Exception] | None = None,
    ) -> None:
        self.routes[(method, path)] = (status_code, json, error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": "Route not found"})

        status_code, payload, error = route
        if error is not None:
            raise error("Connection refused", request=request)
        if payload is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=payload)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler), base_url=BASE_URL)

    def call(self, func):
        async def runner():
            async with self.http_client() as http:
                return await func(FinanceApiClient(http))

        return asyncio.run(runner())

    def paths(self) -> list[tuple[str, str]]:
        return [(request.method, request.url.path) for request in self.requests]


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def june_backend(backend: FakeBackend) -> FakeBackend:
    backend.add(
        "GET",
        "/api/budget/getBudgets",
        json=[
            {"_id": "b1", "category": "Food", "month": "June", "totalBudget": 200},
            {"_id": "b2", "category": "Rent", "month": "June", "totalBudget": 0},
            {"_id": "b3", "category": "Travel", "month": "May", "totalBudget": 300},
        ],
    )
    backend.add(
        "GET",
        "/api/transaction/categoryWiseExpense",
        json=[
            {"category": "Food", "total": 250},
            {"category": "Shopping", "total": 40.5},
        ],
    )
    backend.add(
        "GET",
        "/api/budget/overBudgetCategories",
        json=[
            {"category": "Food", "totalSpent": 250, "budgetAmount": 200},
            {"category": "Bills", "totalSpent": 10, "budgetAmount": 0},
        ],
    )
    return backend
