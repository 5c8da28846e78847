"""Mapper configuration loaded from environment variables.

All configuration values have sensible defaults.  Azure Functions app
settings (or ``local.settings.json`` for local dev) are the source of
truth.

``from_env()`` raises ``ConfigValidationError`` if any value is out of
its valid range, so bad configuration is caught at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from map_point_mapper.core.constants import (
    DEFAULT_MAX_INPUT_CHARS,
    DEFAULT_REGION_PADDING_PCT,
)
from map_point_mapper.core.exceptions import MapperError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


class ConfigValidationError(MapperError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class MapperConfig:
    """Immutable mapper configuration.

    Attributes:
        longitude_first: Default order preference for callers that do not
            send one. Only consulted for input that is not geometry-tagged.
        region_padding_pct: Fraction of the region span added on each side
            when framing parsed lines (0 disables padding).
        max_input_chars: Largest input text the HTTP entry point accepts.
    """

    longitude_first: bool = False
    region_padding_pct: float = DEFAULT_REGION_PADDING_PCT
    max_input_chars: int = DEFAULT_MAX_INPUT_CHARS

    @classmethod
    def from_env(cls) -> MapperConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or a boolean
                flag is not recognised.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``MAPPER_MAX_INPUT_CHARS=abc``).
        """
        config = cls(
            longitude_first=_env_bool("MAPPER_LONGITUDE_FIRST", default=False),
            region_padding_pct=float(
                os.getenv("MAPPER_REGION_PADDING_PCT", str(DEFAULT_REGION_PADDING_PCT))
            ),
            max_input_chars=int(os.getenv("MAPPER_MAX_INPUT_CHARS", str(DEFAULT_MAX_INPUT_CHARS))),
        )
        _validate(config)
        return config


def _env_bool(key: str, *, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be a boolean (true/false, yes/no, 1/0, on/off)")


def _validate(config: MapperConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not 0.0 <= config.region_padding_pct <= 1.0:
        raise ConfigValidationError(
            "MAPPER_REGION_PADDING_PCT",
            config.region_padding_pct,
            "must be between 0 and 1 (fraction of span)",
        )

    if config.max_input_chars <= 0:
        raise ConfigValidationError(
            "MAPPER_MAX_INPUT_CHARS",
            config.max_input_chars,
            "must be > 0 (characters)",
        )
