from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

# Балансы в пределах цента считаются закрытыми.
EPSILON = Decimal("0.01")
ZERO = Decimal("0")
CENT = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    """
    Приведение суммы к Decimal. Всё, что не удалось распознать
    (None, пустая строка, NaN, бесконечность), считается нулём.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    else:
        text = str(value).strip()
        if not text:
            return ZERO
        try:
            result = Decimal(text)
        except InvalidOperation:
            return ZERO
    if not result.is_finite():
        return ZERO
    return result


def round_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal, currency: str) -> str:
    rounded = round_cents(value)
    sign = "-" if rounded < ZERO else ""
    return f"{sign}{currency}{abs(rounded):.2f}"
