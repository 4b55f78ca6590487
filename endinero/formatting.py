"""Amount formatting with thousands separators and grouped decimals.

This module turns a float into a display string such as
"1.234.567,45" or "0,123 456 7". The integer part is grouped in
triples from the right, the decimal part in triples from the left, and
decimal digits are truncated (never rounded) to a budget that depends
on whether the amount is below one.
"""

import logging
from typing import Callable, List, Optional

from .models import FormatEvent
from .utils.floats import (
    DOUBLE,
    SINGLE,
    FloatWidth,
    fraction_digits,
    non_finite_literal,
    truncated_magnitude,
)

logger = logging.getLogger(__name__)

Observer = Callable[[FormatEvent], None]


def format_integer_part(
    amount: float,
    thousands_separator: str,
    width: FloatWidth = DOUBLE,
) -> str:
    """Format the truncated integer part of amount with separators.

    The sign comes from the original amount, so -0.0001 gives "-0"
    while -0.0 gives "0".

    Args:
        amount: Amount to format
        thousands_separator: Separator inserted between digit triples
        width: Float width bounding the integer range

    Returns:
        Grouped integer digits with an optional leading "-"

    Examples:
        >>> format_integer_part(1234567.0, ".")
        '1.234.567'
        >>> format_integer_part(-0.0001, ".")
        '-0'
    """
    literal = non_finite_literal(amount)
    if literal is not None:
        return literal

    digits = str(truncated_magnitude(amount, width))
    groups = []
    while len(digits) > 3:
        groups.append(digits[-3:])
        digits = digits[:-3]
    groups.append(digits)

    sign = "-" if amount < 0 else ""
    return sign + thousands_separator.join(reversed(groups))


def format_decimal_part(
    amount: float,
    total_decimals: int,
    decimal_group_separator: str,
    width: FloatWidth = DOUBLE,
) -> str:
    """Format up to total_decimals fractional digits of amount.

    Digits come from a fixed-width rendering at the width's safe
    precision, are grouped in triples from the left and truncated to
    the budget. Trailing zeros and separators are then trimmed, keeping
    at least one character.

    Args:
        amount: Amount to format
        total_decimals: Maximum number of digits to emit
        decimal_group_separator: Separator inserted between digit triples
        width: Float width that sets the digit source precision

    Returns:
        Grouped decimal digits, empty when total_decimals is 0

    Examples:
        >>> format_decimal_part(0.456789, 5, ".")
        '456.78'
        >>> format_decimal_part(0.1, 1, " ")
        '1'
    """
    if total_decimals <= 0 or non_finite_literal(amount) is not None:
        return ""

    pieces: List[str] = []
    for position, digit in enumerate(fraction_digits(amount, width)[:total_decimals]):
        if position and position % 3 == 0:
            pieces.append(decimal_group_separator)
        pieces.append(digit)

    while len(pieces) > 1 and pieces[-1] in ("0", decimal_group_separator):
        pieces.pop()

    return "".join(pieces)


def select_decimal_budget(
    amount: float,
    max_decimal_places: int,
    zero_comma_decimal_places: int,
) -> int:
    """Pick the decimal digit budget for amount.

    Examples:
        >>> select_decimal_budget(0.5, 2, 17)
        17
        >>> select_decimal_budget(-1.0, 2, 17)
        2
    """
    if abs(amount) < 1:
        return zero_comma_decimal_places
    return max_decimal_places


def endinero(
    amount: float,
    max_decimal_places: int,
    zero_comma_decimal_places: int,
    thousands_separator: str,
    radix_character: str,
    decimal_group_separator: str,
    width: FloatWidth = DOUBLE,
    *,
    observer: Optional[Observer] = None,
) -> str:
    """Format amount for display at the given float width.

    The amount is first narrowed to ``width``. NaN and infinities are
    returned as "NaN", "inf" and "-inf" without grouping.

    Args:
        amount: Amount to format
        max_decimal_places: Decimal digits kept when abs(amount) >= 1
        zero_comma_decimal_places: Decimal digits kept when abs(amount) < 1
        thousands_separator: Separator for integer digit triples
        radix_character: Character between integer and decimal parts
        decimal_group_separator: Separator for decimal digit triples
        width: Float width (DOUBLE or SINGLE)
        observer: Optional callable receiving a FormatEvent per call

    Returns:
        Formatted string like "1.234.567,45"
    """
    value = width.narrow(amount)
    logger.debug(f"Formatting {value!r} as {width.name}")

    literal = non_finite_literal(value)
    if literal is not None:
        total_decimals = 0
        result = literal
    else:
        total_decimals = select_decimal_budget(
            value, max_decimal_places, zero_comma_decimal_places
        )
        integer_part = format_integer_part(value, thousands_separator, width)
        decimal_part = format_decimal_part(
            value, total_decimals, decimal_group_separator, width
        )
        result = f"{integer_part}{radix_character}{decimal_part}"

    logger.debug(f"Formatted {value!r} -> {result!r}")

    if observer is not None:
        observer(
            FormatEvent(
                amount=value,
                precision=width.name,
                total_decimals=total_decimals,
                thousands_separator=thousands_separator,
                radix_character=radix_character,
                decimal_group_separator=decimal_group_separator,
                result=result,
            )
        )

    return result


def endinero_f64(
    amount: float,
    max_decimal_places: int,
    zero_comma_decimal_places: int,
    thousands_separator: str,
    radix_character: str,
    decimal_group_separator: str,
    *,
    observer: Optional[Observer] = None,
) -> str:
    """Format a double-precision amount.

    Examples:
        >>> endinero_f64(1234567.456789, 2, 4, ".", ",", " ")
        '1.234.567,45'
        >>> endinero_f64(0.123456, 2, 6, ".", ",", " ")
        '0,123 456'
    """
    return endinero(
        amount,
        max_decimal_places,
        zero_comma_decimal_places,
        thousands_separator,
        radix_character,
        decimal_group_separator,
        DOUBLE,
        observer=observer,
    )


def endinero_f32(
    amount: float,
    max_decimal_places: int,
    zero_comma_decimal_places: int,
    thousands_separator: str,
    radix_character: str,
    decimal_group_separator: str,
    *,
    observer: Optional[Observer] = None,
) -> str:
    """Format an amount as a single-precision value.

    Examples:
        >>> endinero_f32(1234.125, 2, 4, ",", ".", " ")
        '1,234.12'
    """
    return endinero(
        amount,
        max_decimal_places,
        zero_comma_decimal_places,
        thousands_separator,
        radix_character,
        decimal_group_separator,
        SINGLE,
        observer=observer,
    )
