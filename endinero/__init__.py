"""endinero: locale-flavored amount formatting.

    >>> from endinero import dinero_f64, money_f64
    >>> dinero_f64(1234567.456)
    '1.234.567,45'
    >>> money_f64(0.123456789)
    '0.123 456 789'
"""

import logging

from .formatting import endinero, endinero_f32, endinero_f64
from .models import FormatEvent, FormatStyle
from .presets import (
    PRESETS,
    SPANISH_DOUBLE,
    SPANISH_SINGLE,
    US_DOUBLE,
    US_SINGLE,
    dinero_f32,
    dinero_f64,
    format_with_style,
    money_f32,
    money_f64,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "endinero",
    "endinero_f64",
    "endinero_f32",
    "dinero_f64",
    "dinero_f32",
    "money_f64",
    "money_f32",
    "format_with_style",
    "FormatStyle",
    "FormatEvent",
    "PRESETS",
    "SPANISH_DOUBLE",
    "SPANISH_SINGLE",
    "US_DOUBLE",
    "US_SINGLE",
]
