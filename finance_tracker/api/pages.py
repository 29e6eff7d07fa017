from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from finance_tracker.api.dependencies import get_selected_month
from finance_tracker.clients.backend import BackendClientError, FinanceApiClient, get_backend_client
from finance_tracker.models.enums import Month
from finance_tracker.services.budgets import load_budget_overview
from finance_tracker.services.formatting import format_amount

router = APIRouter(tags=["pages"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
templates.env.filters["money"] = format_amount


@router.get("/", response_class=HTMLResponse)
async def budget_page(
    request: Request,
    month: Month = Depends(get_selected_month),
    client: FinanceApiClient = Depends(get_backend_client),
) -> HTMLResponse:
    context = {
        "month": month,
        "months": list(Month),
        "overview": None,
        "error": None,
    }
    try:
        context["overview"] = await load_budget_overview(client, month)
    except BackendClientError as exc:
        context["error"] = exc.message
    return templates.TemplateResponse(request, "budget.html", context)
