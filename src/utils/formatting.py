import math
from decimal import ROUND_HALF_UP, Decimal


def format_decimal(value: float, min_fraction_digits: int = 2, max_fraction_digits: int | None = None) -> str:
    """Formata no padrão brasileiro: 1.234,5 (ponto no milhar, vírgula no decimal)."""
    if not math.isfinite(value):
        return ""
    if max_fraction_digits is None:
        max_fraction_digits = min_fraction_digits

    quantized = Decimal(repr(value)).quantize(Decimal(1).scaleb(-max_fraction_digits), rounding=ROUND_HALF_UP)
    valor_str = f"{quantized:,.{max_fraction_digits}f}"
    integer_part, _, fraction_part = valor_str.partition(".")
    integer_part = integer_part.replace(",", ".")

    fraction_part = fraction_part.rstrip("0").ljust(min_fraction_digits, "0")
    if not fraction_part:
        return integer_part
    return f"{integer_part},{fraction_part}"


def format_price_per_liter(value: float) -> str:
    return format_decimal(value, 2, 3)
