from decimal import ROUND_HALF_UP, Decimal, localcontext

CENT = Decimal("0.01")
TENTH = Decimal("0.1")
WHOLE = Decimal("1")


def round_half_up(value: Decimal, step: Decimal = WHOLE) -> Decimal:
    with localcontext() as ctx:
        # quantize needs enough precision for every digit left of the step.
        ctx.prec = max(ctx.prec, value.adjusted() - step.as_tuple().exponent + 2)
        return value.quantize(step, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal, symbol: str = "$") -> str:
    """Format an amount with two decimals and no grouping, e.g. '$1234.50'."""
    return f"{symbol}{round_half_up(amount, CENT)}"
