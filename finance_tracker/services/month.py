import datetime as dt

from finance_tracker.models.enums import Month


def current_month(today: dt.date | None = None) -> Month:
    today = today or dt.date.today()
    return Month.from_number(today.month)


def resolve_month(month: str | None) -> Month:
    cleaned = (month or "").strip()
    if not cleaned:
        return current_month()

    for item in Month:
        if item.value.lower() == cleaned.lower():
            return item

    try:
        parsed = dt.datetime.strptime(cleaned, "%Y-%m")
    except ValueError as exc:
        raise ValueError("Month must be a month name or in YYYY-MM format") from exc
    return Month.from_number(parsed.month)
