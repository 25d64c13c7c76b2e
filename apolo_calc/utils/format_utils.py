"""
Display helpers for projection values.

Not part of the numeric contract: engines never call these. Callers that
render dashboards use them to abbreviate large amounts the way the product
does (pt-BR number style, "mil"/"mi"/"bi" suffixes).
"""

from typing import Optional

CURRENCY_SYMBOL = "R$"


def _pt_br_number(value: float, min_decimals: int, max_decimals: int) -> str:
    text = f"{abs(value):,.{max_decimals}f}"
    if max_decimals > min_decimals:
        integer, _, fraction = text.partition(".")
        fraction = fraction.rstrip("0")
        fraction = fraction.ljust(min_decimals, "0")
        text = f"{integer}.{fraction}" if fraction else integer
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_value(
    value: Optional[float],
    currency: bool = True,
    thousand: str = "mil",
    million: str = "mi",
    billion: str = "bi",
    max_decimals: int = 2,
) -> str:
    """
    Abbreviate a value for display.

    Examples:
        >>> format_value(1_500_000)
        'R$ 1,5 mi'
        >>> format_value(2_345.6, currency=False)
        '2,35 mil'
        >>> format_value(None)
        '-'
    """
    if value is None:
        return "-"

    magnitude = abs(value)
    divisor = 1.0
    suffix = ""
    if magnitude >= 1_000_000_000.0:
        divisor, suffix = 1_000_000_000.0, f" {billion}"
    elif magnitude >= 1_000_000.0:
        divisor, suffix = 1_000_000.0, f" {million}"
    elif magnitude >= 1_000.0:
        divisor, suffix = 1_000.0, f" {thousand}"

    scaled = value / divisor
    sign = "-" if scaled < 0 else ""
    if currency:
        number = _pt_br_number(scaled, 1, 2)
        return f"{sign}{CURRENCY_SYMBOL} {number}{suffix}"
    number = _pt_br_number(scaled, 0, max_decimals)
    return f"{sign}{number}{suffix}"


def format_value_long(value: Optional[float]) -> str:
    """Same as format_value with spelled-out suffixes."""
    return format_value(value, True, "mil", "milhões", "bilhões", 2)


def format_currency(value: float) -> str:
    """
    Full pt-BR currency amount with cents.

    Examples:
        >>> format_currency(1234567.891)
        'R$ 1.234.567,89'
    """
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL} {_pt_br_number(value, 2, 2)}"
