# -*- coding: utf-8 -*-
"""
RU: Конфигурация генератора штрихкодов (значения по умолчанию запроса).
EN: Barcode generator configuration (request defaults).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Mapping

from src.model.enums import (
    DEFAULT_BARCODE_HEIGHT,
    DEFAULT_BARCODE_WIDTH,
    DEFAULT_OUTPUT_FORMAT,
    OutputFormat,
    validate_dimensions,
)


@dataclass(frozen=True)
class BarcodeConfig:
    """
    Defaults applied to requests that omit optional fields.

    Attributes:
        default_width: Width in pixels used when a request sends 0.
        default_height: Height in pixels used when a request sends 0.
        default_format: Output format used when the wire payload omits it.

    Examples:
        >>> BarcodeConfig().default_width
        300

        >>> BarcodeConfig.from_mapping({"barcode_default_height": 200}).default_height
        200
    """

    default_width: int = DEFAULT_BARCODE_WIDTH
    default_height: int = DEFAULT_BARCODE_HEIGHT
    default_format: OutputFormat = DEFAULT_OUTPUT_FORMAT

    def __post_init__(self) -> None:
        """Validate parameters."""
        if not validate_dimensions(self.default_width, self.default_height):
            raise ValueError(
                f"default dimensions {self.default_width}x{self.default_height} "
                f"are outside the accepted range"
            )
        if not isinstance(self.default_format, OutputFormat):
            object.__setattr__(self, "default_format", OutputFormat(self.default_format))

    @staticmethod
    def from_mapping(values: Mapping[str, Any]) -> "BarcodeConfig":
        """
        Create configuration from a loaded config dict (see ``src.load_config``).

        Only the ``barcode_*`` keys are read; missing keys keep their defaults.
        """
        return BarcodeConfig(
            default_width=int(values.get(_WIDTH_KEY, DEFAULT_BARCODE_WIDTH)),
            default_height=int(values.get(_HEIGHT_KEY, DEFAULT_BARCODE_HEIGHT)),
            default_format=OutputFormat(
                values.get(_FORMAT_KEY, DEFAULT_OUTPUT_FORMAT.value)
            ),
        )


_WIDTH_KEY: Final[str] = "barcode_default_width"
_HEIGHT_KEY: Final[str] = "barcode_default_height"
_FORMAT_KEY: Final[str] = "barcode_default_format"


__all__ = [
    "BarcodeConfig",
]
