"""Display formatting for amounts and chart labels.

Nothing here reads the process locale; callers pass currency and locale
explicitly.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

# locale -> (grouping separator, decimal separator, symbol followed by space)
LOCALES: dict[str, tuple[str, str, bool]] = {
    "id-ID": (".", ",", True),
    "en-US": (",", ".", False),
}

CURRENCY_SYMBOLS: dict[str, str] = {
    "IDR": "Rp",
    "USD": "$",
    "EUR": "€",
    "SGD": "S$",
    "MYR": "RM",
    "JPY": "¥",
}

MONTH_ABBR_ID = (
    "Jan", "Feb", "Mar", "Apr", "Mei", "Jun",
    "Jul", "Agu", "Sep", "Okt", "Nov", "Des",
)


def format_amount(amount: Decimal | int | float) -> str:
    """Plain decimal text: no grouping, no currency, no trailing zeros.

    ``Decimal("100.00")`` -> ``"100"``, ``Decimal("12.50")`` -> ``"12.5"``.
    """
    value = Decimal(str(amount)).normalize()
    if value == value.to_integral_value():
        value = value.quantize(Decimal(1))
    return format(value, "f")


def format_currency(
    amount: Decimal | int | float,
    currency: str = "IDR",
    locale: str = "id-ID",
    fraction_digits: int = 0,
) -> str:
    """``format_currency(Decimal("1500000"))`` -> ``"Rp 1.500.000"``."""
    if locale not in LOCALES:
        raise ValueError(f"Unsupported locale '{locale}'")
    if currency not in CURRENCY_SYMBOLS:
        raise ValueError(f"Unsupported currency '{currency}'")
    group_sep, decimal_sep, spaced = LOCALES[locale]

    quantum = Decimal(1).scaleb(-fraction_digits)
    value = Decimal(str(amount)).quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    text = f"{abs(value):,.{fraction_digits}f}"
    whole, _, fraction = text.partition(".")
    number = whole.replace(",", group_sep)
    if fraction:
        number = f"{number}{decimal_sep}{fraction}"

    symbol = CURRENCY_SYMBOLS[currency]
    separator = " " if spaced else ""
    return f"{sign}{symbol}{separator}{number}"


def month_label(d: date) -> str:
    return f"{MONTH_ABBR_ID[d.month - 1]} {d.year}"


def day_label(d: date) -> str:
    return f"{d.day} {MONTH_ABBR_ID[d.month - 1]}"
