"""Configuration management for the endinero formatter.

This module loads logging settings and custom formatting styles from a
YAML file. Styles not defined in the file fall back to the built-in
presets (spanish_f64, spanish_f32, us_f64, us_f32).
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .formatting import Observer
from .logger import setup_logger
from .models import FormatStyle
from .presets import PRESETS, US_DOUBLE, format_with_style


# ============================================================================
# Configuration Dataclasses
# ============================================================================


@dataclass
class GeneralConfig:
    """General application configuration."""

    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate_log_level()
        self.log_level = self.log_level.upper()

    def _validate_log_level(self) -> None:
        """Validate that log level is one of the allowed values."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if not isinstance(self.log_level, str) or self.log_level.upper() not in valid_levels:
            raise ValueError(
                f"Log level must be one of {valid_levels}, got '{self.log_level}'"
            )


@dataclass
class Config:
    """Main configuration container."""

    general: GeneralConfig = field(default_factory=GeneralConfig)
    styles: Dict[str, FormatStyle] = field(default_factory=dict)

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """Load configuration from a YAML file.

        Args:
            config_path: Path to config YAML file. If None, uses default locations.

        Returns:
            Loaded and validated Config object

        Raises:
            FileNotFoundError: If config file not found
            ValueError: If configuration is invalid
        """
        path = _find_config_file(config_path)
        data = _load_yaml_file(path)

        return cls(
            general=_parse_general_config(data),
            styles=_parse_styles(data),
        )

    def setup_logging(self) -> logging.Logger:
        """Configure logging from the general section."""
        return setup_logger(
            level=self.general.log_level,
            log_file=self.general.log_file,
        )

    def style(self, name: str) -> FormatStyle:
        """Return a configured style, falling back to the built-in presets.

        Raises:
            ValueError: If no style has that name
        """
        if name in self.styles:
            return self.styles[name]
        if name in PRESETS:
            return PRESETS[name]
        raise ValueError(
            f"Unknown format style '{name}'. "
            f"Available: {sorted(set(self.styles) | set(PRESETS))}"
        )

    def format(
        self,
        amount: float,
        style_name: str,
        *,
        observer: Optional[Observer] = None,
    ) -> str:
        """Format amount with the named style."""
        return format_with_style(amount, self.style(style_name), observer=observer)


# ============================================================================
# Private Helper Functions (Config Loading)
# ============================================================================


def _find_config_file(config_path: Optional[str]) -> str:
    """Find configuration file from given path or default locations.

    Args:
        config_path: Optional path to config file

    Returns:
        Path to config file

    Raises:
        FileNotFoundError: If config file not found in any location
    """
    if config_path is not None:
        if Path(config_path).exists():
            return config_path
        raise FileNotFoundError(f"Config file not found: {config_path}")

    env_path = os.getenv("ENDINERO_CONFIG_PATH")
    if env_path and Path(env_path).exists():
        return env_path

    default_paths = ["endinero.yaml", "config/endinero.yaml"]
    for path in default_paths:
        if Path(path).exists():
            return path

    raise FileNotFoundError(
        "Config file not found. Tried: ENDINERO_CONFIG_PATH env var, "
        "endinero.yaml, config/endinero.yaml"
    )


def _load_yaml_file(path: str) -> Dict[str, Any]:
    """Load and parse YAML configuration file.

    Raises:
        ValueError: If file is empty or not a mapping
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        raise ValueError(f"Config file is empty: {path}")
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    return data


# ============================================================================
# Private Helper Functions (Config Parsing)
# ============================================================================


def _parse_general_config(data: Dict[str, Any]) -> GeneralConfig:
    """Parse general configuration section."""
    general_data = data.get("general") or {}

    return GeneralConfig(
        log_level=general_data.get("log_level", "INFO"),
        log_file=general_data.get("log_file"),
    )


def _parse_styles(data: Dict[str, Any]) -> Dict[str, FormatStyle]:
    """Parse the styles section into FormatStyle objects keyed by name.

    Args:
        data: Full configuration dictionary

    Returns:
        Mapping of style name to FormatStyle

    Raises:
        ValueError: If the section or one of its styles is malformed
    """
    styles_data = data.get("styles") or {}
    if not isinstance(styles_data, dict):
        raise ValueError("'styles' section must be a mapping of style names")

    styles = {}
    for name, style_data in styles_data.items():
        styles[str(name)] = _parse_style(str(name), style_data or {})

    return styles


def _parse_style(name: str, style_data: Dict[str, Any]) -> FormatStyle:
    """Parse a single style, defaulting omitted keys to the US double preset."""
    if not isinstance(style_data, dict):
        raise ValueError(f"Style '{name}' must be a mapping")

    return FormatStyle(
        name=name,
        thousands_separator=style_data.get(
            "thousands_separator", US_DOUBLE.thousands_separator
        ),
        radix_character=style_data.get(
            "radix_character", US_DOUBLE.radix_character
        ),
        decimal_group_separator=style_data.get(
            "decimal_group_separator", US_DOUBLE.decimal_group_separator
        ),
        max_decimal_places=style_data.get(
            "max_decimal_places", US_DOUBLE.max_decimal_places
        ),
        zero_comma_decimal_places=style_data.get(
            "zero_comma_decimal_places", US_DOUBLE.zero_comma_decimal_places
        ),
        precision=style_data.get("precision", US_DOUBLE.precision),
    )
