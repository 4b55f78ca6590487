"""Data models for amount formatting.

This module contains dataclasses describing a formatting style and the
event record handed to formatting observers.
"""

from dataclasses import dataclass

from .utils.floats import WIDTHS


@dataclass(frozen=True)
class FormatStyle:
    """Named separator set plus precision policy.

    Attributes:
        name: Style name (e.g., "spanish_f64")
        thousands_separator: Character between integer digit triples
        radix_character: Character between integer and decimal parts
        decimal_group_separator: Character between decimal digit triples
        max_decimal_places: Decimal digits kept when abs(amount) >= 1
        zero_comma_decimal_places: Decimal digits kept when abs(amount) < 1
        precision: Float width, "double" or "single"
    """

    name: str
    thousands_separator: str
    radix_character: str
    decimal_group_separator: str
    max_decimal_places: int
    zero_comma_decimal_places: int
    precision: str = "double"

    def __post_init__(self) -> None:
        """Validate style after initialization."""
        self._validate_separators()
        self._validate_decimal_places()
        self._validate_precision()

    def _validate_separators(self) -> None:
        """Validate that every separator is a single character."""
        separators = {
            "thousands_separator": self.thousands_separator,
            "radix_character": self.radix_character,
            "decimal_group_separator": self.decimal_group_separator,
        }
        for field_name, value in separators.items():
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(
                    f"Style '{self.name}': {field_name} must be a single "
                    f"character, got {value!r}"
                )

    def _validate_decimal_places(self) -> None:
        """Validate that decimal places are non-negative integers."""
        places = {
            "max_decimal_places": self.max_decimal_places,
            "zero_comma_decimal_places": self.zero_comma_decimal_places,
        }
        for field_name, value in places.items():
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(
                    f"Style '{self.name}': {field_name} must be a "
                    f"non-negative integer, got {value!r}"
                )

    def _validate_precision(self) -> None:
        """Validate that precision names a supported float width."""
        if self.precision not in WIDTHS:
            raise ValueError(
                f"Style '{self.name}': precision must be one of "
                f"{sorted(WIDTHS)}, got '{self.precision}'"
            )


@dataclass(frozen=True)
class FormatEvent:
    """Record of one completed formatting call.

    Attributes:
        amount: Amount after narrowing to the float width
        precision: Float width name
        total_decimals: Decimal digit budget selected for the amount
        thousands_separator: Thousands separator used
        radix_character: Radix character used
        decimal_group_separator: Decimal group separator used
        result: Formatted string returned to the caller
    """

    amount: float
    precision: str
    total_decimals: int
    thousands_separator: str
    radix_character: str
    decimal_group_separator: str
    result: str
