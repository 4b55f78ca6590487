"""Built-in formatting styles and their convenience functions.

Spanish/European style: "1.234.567,45"
US style:               "1,234,567.45"

Both keep 2 decimals for amounts >= 1 and the full safe precision of
the float width (17 for double, 7 for single) for amounts below one.
"""

from typing import Dict, Optional

from .formatting import Observer, endinero, endinero_f32, endinero_f64
from .models import FormatStyle
from .utils.floats import WIDTHS


SPANISH_DOUBLE = FormatStyle(
    name="spanish_f64",
    thousands_separator=".",
    radix_character=",",
    decimal_group_separator=" ",
    max_decimal_places=2,
    zero_comma_decimal_places=17,
    precision="double",
)

SPANISH_SINGLE = FormatStyle(
    name="spanish_f32",
    thousands_separator=".",
    radix_character=",",
    decimal_group_separator=" ",
    max_decimal_places=2,
    zero_comma_decimal_places=7,
    precision="single",
)

US_DOUBLE = FormatStyle(
    name="us_f64",
    thousands_separator=",",
    radix_character=".",
    decimal_group_separator=" ",
    max_decimal_places=2,
    zero_comma_decimal_places=17,
    precision="double",
)

US_SINGLE = FormatStyle(
    name="us_f32",
    thousands_separator=",",
    radix_character=".",
    decimal_group_separator=" ",
    max_decimal_places=2,
    zero_comma_decimal_places=7,
    precision="single",
)

PRESETS: Dict[str, FormatStyle] = {
    style.name: style
    for style in (SPANISH_DOUBLE, SPANISH_SINGLE, US_DOUBLE, US_SINGLE)
}


def format_with_style(
    amount: float,
    style: FormatStyle,
    *,
    observer: Optional[Observer] = None,
) -> str:
    """Format amount using a FormatStyle.

    Args:
        amount: Amount to format
        style: Separators, precision policy and float width to apply
        observer: Optional callable receiving a FormatEvent

    Returns:
        Formatted string

    Examples:
        >>> format_with_style(1234.5, US_DOUBLE)
        '1,234.5'
    """
    return endinero(
        amount,
        style.max_decimal_places,
        style.zero_comma_decimal_places,
        style.thousands_separator,
        style.radix_character,
        style.decimal_group_separator,
        WIDTHS[style.precision],
        observer=observer,
    )


def dinero_f64(amount: float) -> str:
    """Format a double in Spanish style, e.g. "10.000.000,12"."""
    return endinero_f64(amount, 2, 17, ".", ",", " ")


def dinero_f32(amount: float) -> str:
    """Format a single in Spanish style, e.g. "0,123 456 7"."""
    return endinero_f32(amount, 2, 7, ".", ",", " ")


def money_f64(amount: float) -> str:
    """Format a double in US style, e.g. "1,234,567.5"."""
    return endinero_f64(amount, 2, 17, ",", ".", " ")


def money_f32(amount: float) -> str:
    """Format a single in US style."""
    return endinero_f32(amount, 2, 7, ",", ".", " ")
