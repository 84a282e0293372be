"""Indian Rupee formatting helpers for reports."""

import math
import re

RUPEE = "₹"


def _group_indian(integer_digits: str) -> str:
    """Group digits the Indian way: last three, then pairs (1,00,00,000)."""
    if len(integer_digits) <= 3:
        return integer_digits
    head, tail = integer_digits[:-3], integer_digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_indian_number(value: float | None, decimals: int = 0) -> str:
    """
    Format a number with Indian digit grouping.

    Example:
        >>> format_indian_number(12345678.5, 2)
        '1,23,45,678.50'
    """
    if value is None or math.isnan(value):
        return "N/A"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    text = f"{abs(value):.{decimals}f}"
    integer_digits, _, fraction = text.partition(".")
    grouped = _group_indian(integer_digits)
    if fraction:
        grouped = f"{grouped}.{fraction}"
    sign = "-" if value < 0 and float(text) != 0 else ""
    return f"{sign}{grouped}"


def format_compact_inr(value: float, show_symbol: bool = True) -> str:
    """
    Compact notation with Cr (crore), L (lakh) and K suffixes.

    Example:
        >>> format_compact_inr(1474000)
        '₹14.74L'
    """
    sign = "-" if value < 0 else ""
    symbol = RUPEE if show_symbol else ""
    amount = abs(value)

    if amount >= 10_000_000:
        return f"{sign}{symbol}{amount / 10_000_000:.2f}Cr"
    if amount >= 100_000:
        return f"{sign}{symbol}{amount / 100_000:.2f}L"
    if amount >= 1000:
        return f"{sign}{symbol}{amount / 1000:.2f}K"
    return f"{sign}{symbol}{amount:.2f}"


def format_inr(
    value: float | None,
    decimals: int = 2,
    show_symbol: bool = True,
    compact: bool = False,
) -> str:
    """
    Format a value as Indian Rupees.

    Args:
        value: Amount. None and NaN render as 'N/A', infinity as '∞'.
        decimals: Decimal places.
        show_symbol: Prefix with ₹.
        compact: Use Cr/L/K notation instead of full digits.

    Example:
        >>> format_inr(185000)
        '₹1,85,000.00'
    """
    if value is None or math.isnan(value):
        return "N/A"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    if compact:
        return format_compact_inr(value, show_symbol)

    formatted = format_indian_number(value, decimals)
    if not show_symbol:
        return formatted
    if formatted.startswith("-"):
        return f"-{RUPEE}{formatted[1:]}"
    return f"{RUPEE}{formatted}"


def parse_inr(text: str | None) -> float:
    """
    Parse a formatted rupee string back to a number.

    Returns 0.0 for empty or unparseable input.

    Example:
        >>> parse_inr("₹1,85,000.00")
        185000.0
    """
    if not text or not isinstance(text, str):
        return 0.0

    cleaned = re.sub(rf"[{RUPEE},\s]", "", text)
    try:
        return float(cleaned)
    except ValueError:
        return 0.0
