from decimal import Decimal, ROUND_HALF_UP

TWOPLACES = Decimal("0.01")


def to_money(value) -> Decimal:
    d = Decimal(str(value))
    return d.quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def line_total(price, quantity) -> Decimal:
    """Exact unit price times quantity, rounded to cents once."""
    return to_money(Decimal(str(price)) * Decimal(quantity))
