import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from finance_tracker.api.budgets import router as budgets_router
from finance_tracker.api.pages import router as pages_router
from finance_tracker.api.reports import router as reports_router
from finance_tracker.api.transactions import router as transactions_router
from finance_tracker.clients.backend import BackendError, BackendUnavailableError
from finance_tracker.settings import get_settings

settings = get_settings()
logging.basicConfig(level=settings.log_level)

app = FastAPI(title=settings.app_name, version="0.1.0")


@app.exception_handler(BackendUnavailableError)
async def backend_unavailable_handler(request: Request, exc: BackendUnavailableError) -> JSONResponse:
    return JSONResponse(status_code=503, content={"error": exc.message})


@app.exception_handler(BackendError)
async def backend_error_handler(request: Request, exc: BackendError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.get("/health", tags=["health"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(pages_router)
app.include_router(budgets_router)
app.include_router(reports_router)
app.include_router(transactions_router)


def run() -> None:
    uvicorn.run(app, host=settings.app_host, port=settings.app_port)
