"""Floating-point helpers for the amount formatter.

This module knows the two supported float widths (double and single),
how to narrow a Python float to single precision, and how to pull a
stable integer magnitude and fractional digit sequence out of a value.
"""

import math
import struct
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FloatWidth:
    """Description of a supported floating-point width.

    Attributes:
        name: Width name ("double" or "single")
        safe_digits: Fractional digits rendered without accumulating noise
        int_max: Largest integer magnitude kept when truncating
    """

    name: str
    safe_digits: int
    int_max: int

    def narrow(self, value: float) -> float:
        """Round value to this width."""
        if self.name == "single":
            return to_single(value)
        return float(value)


DOUBLE = FloatWidth(name="double", safe_digits=17, int_max=2**63 - 1)
SINGLE = FloatWidth(name="single", safe_digits=7, int_max=2**31 - 1)

WIDTHS = {width.name: width for width in (DOUBLE, SINGLE)}


def to_single(value: float) -> float:
    """Round a float to the nearest IEEE 754 single-precision value.

    Finite values beyond the single-precision range become a signed
    infinity, like a float cast in a compiled language.

    Args:
        value: Value to narrow

    Returns:
        Narrowed value, still as a Python float

    Examples:
        >>> to_single(10.111)
        10.111000061035156
        >>> to_single(1e39)
        inf
    """
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def non_finite_literal(value: float) -> Optional[str]:
    """Return the display literal for NaN and infinities, else None.

    Examples:
        >>> non_finite_literal(float("-inf"))
        '-inf'
        >>> non_finite_literal(1.5) is None
        True
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"
    return None


def truncated_magnitude(value: float, width: FloatWidth = DOUBLE) -> int:
    """Truncate abs(value) to an integer, saturating at the width's range.

    Args:
        value: Finite amount
        width: Float width that bounds the integer range

    Returns:
        Non-negative integer magnitude
    """
    return min(math.trunc(abs(value)), width.int_max)


def fraction_digits(value: float, width: FloatWidth = DOUBLE) -> str:
    """Return the fractional digits of abs(value) at the width's safe precision.

    The value is rendered with a fixed number of decimals and sliced
    after the point, so digit positions never shift with the value.
    Rounding at the last safe digit comes from the rendering itself.

    Args:
        value: Finite amount
        width: Float width that sets the number of digits

    Returns:
        Exactly ``width.safe_digits`` digit characters

    Examples:
        >>> fraction_digits(0.1)
        '10000000000000001'
        >>> fraction_digits(to_single(10.111), SINGLE)
        '1110001'
    """
    rendered = f"{abs(value):.{width.safe_digits}f}"
    return rendered.partition(".")[2]
