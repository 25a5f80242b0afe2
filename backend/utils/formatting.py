CURRENCY_PLACES = 2
QUANTITY_PLACES = 1


def round_currency(amount: float) -> float:
    """Round a money figure for presentation. Only call once, on final values."""
    # `or 0.0` turns -0.0 into 0.0
    return round(float(amount or 0.0), CURRENCY_PLACES) or 0.0


def round_quantity(quantity: float) -> float:
    """Round litres/kg/bags for presentation."""
    return round(float(quantity or 0.0), QUANTITY_PLACES) or 0.0


def format_indian_currency(amount: float) -> str:
    if amount is None:
        return "₹ 0.00"
    amount = round_currency(amount)
    sign = "-" if amount < 0 else ""
    amount_str = f"{abs(amount):.2f}"
    integer_part, decimal_part = amount_str.split(".")

    if len(integer_part) <= 3:
        return f"₹ {sign}{integer_part}.{decimal_part}"

    last_three = integer_part[-3:]
    remaining = integer_part[:-3]

    formatted_remaining = ""
    while len(remaining) > 2:
        formatted_remaining = "," + remaining[-2:] + formatted_remaining
        remaining = remaining[:-2]

    formatted_remaining = remaining + formatted_remaining

    return f"₹ {sign}{formatted_remaining},{last_three}.{decimal_part}"
