from fastapi import HTTPException, Query

from finance_tracker.models.enums import Month
from finance_tracker.services.month import resolve_month


def get_selected_month(
    month: str | None = Query(default=None, description="Month name (e.g. June) or YYYY-MM"),
) -> Month:
    try:
        return resolve_month(month)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
