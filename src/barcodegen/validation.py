"""
RU: Проверка запросов генерации штрихкода: значения по умолчанию, таблица
правил по символогиям, контрольные цифры, разбор JSON-запроса.

EN: Request validation for barcode generation.

- ``apply_defaults`` fills zero width/height from ``BarcodeConfig``.
- ``validate`` enforces the symbology table and the dimension bounds.
- ``encoder_payload`` turns validated data into the encoder input
  (check digit appended for short forms, UPC-A promoted to EAN-13).
- ``parse_request`` decodes a JSON-style mapping into a ``GenerateRequest``.

Adding a symbology means adding a ``SymbologyRule`` to ``SYMBOLOGY_RULES``.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Final, FrozenSet, Mapping, Optional

from src.barcodegen.checksum import (
    ean13_check_digit,
    upca_check_digit,
    verify_ean13,
    verify_upca,
)
from src.barcodegen.config import BarcodeConfig
from src.barcodegen.exceptions import (
    InvalidDataError,
    InvalidFormatError,
    InvalidTypeError,
)
from src.model.barcodegen import GenerateRequest
from src.model.enums import (
    MAX_BARCODE_HEIGHT,
    MAX_BARCODE_WIDTH,
    MIN_BARCODE_HEIGHT,
    MIN_BARCODE_WIDTH,
    OutputFormat,
    Symbology,
)

logger = logging.getLogger(__name__)

__all__ = [
    "SymbologyRule",
    "SYMBOLOGY_RULES",
    "COSMETIC_FIELDS",
    "apply_defaults",
    "validate",
    "encoder_payload",
    "parse_request",
    "coerce_symbology",
    "coerce_format",
]

MAX_CODE128_LENGTH: Final[int] = 500


@dataclass(frozen=True)
class SymbologyRule:
    """
    Validation and encoding rule of one symbology.

    Attributes:
        lengths: Accepted data lengths; empty means any length in
            ``1..max_length``.
        digits_only: Restrict data to ASCII digits.
        max_length: Upper bound for free-length symbologies.
        full_length: Length at which the data carries its own check digit.
        check_digit: Computes the check digit of the short form.
        verify: Verifies the full form, raising ``ChecksumMismatchError``.
        ean_prefix: Prepended to the full code before encoding.
    """

    label: str
    lengths: FrozenSet[int] = frozenset()
    digits_only: bool = False
    max_length: Optional[int] = None
    full_length: Optional[int] = None
    check_digit: Optional[Callable[[str], int]] = None
    verify: Optional[Callable[[str], None]] = None
    ean_prefix: str = ""

    def check_data(self, data: str) -> None:
        if self.digits_only and not (data.isascii() and data.isdigit()):
            raise InvalidDataError(f"{self.label} data must be numeric")
        if self.lengths and len(data) not in self.lengths:
            accepted = " or ".join(str(n) for n in sorted(self.lengths))
            raise InvalidDataError(f"{self.label} data must be {accepted} digits")
        if self.max_length is not None and len(data) > self.max_length:
            raise InvalidDataError(
                f"{self.label} data exceeds maximum length of {self.max_length} characters"
            )
        if not self.digits_only:
            try:
                data.encode("utf-8")
            except UnicodeEncodeError as e:
                raise InvalidDataError(
                    f"{self.label} data must be valid UTF-8"
                ) from e
        if self.verify is not None and len(data) == self.full_length:
            self.verify(data)

    def payload(self, data: str) -> str:
        full = data
        if self.check_digit is not None and self.full_length is not None:
            if len(data) == self.full_length - 1:
                full = f"{data}{self.check_digit(data)}"
        return f"{self.ean_prefix}{full}"


SYMBOLOGY_RULES: Final[Dict[Symbology, SymbologyRule]] = {
    Symbology.UPC_A: SymbologyRule(
        label="UPC-A",
        lengths=frozenset({11, 12}),
        digits_only=True,
        full_length=12,
        check_digit=upca_check_digit,
        verify=verify_upca,
        ean_prefix="0",
    ),
    Symbology.EAN_13: SymbologyRule(
        label="EAN-13",
        lengths=frozenset({12, 13}),
        digits_only=True,
        full_length=13,
        check_digit=ean13_check_digit,
        verify=verify_ean13,
    ),
    Symbology.CODE_128: SymbologyRule(
        label="Code128",
        max_length=MAX_CODE128_LENGTH,
    ),
}

# Accepted by the request schema, not wired into any renderer.
COSMETIC_FIELDS: Final[FrozenSet[str]] = frozenset(
    {
        "background_color",
        "foreground_color",
        "text_color",
        "text_position",
        "font_size",
        "padding",
    }
)


def coerce_symbology(value: Any) -> Symbology:
    """Return ``value`` as a Symbology or raise ``InvalidTypeError``."""
    if isinstance(value, Symbology):
        return value
    try:
        return Symbology(value)
    except ValueError:
        raise InvalidTypeError(value) from None


def coerce_format(value: Any) -> OutputFormat:
    """Return ``value`` as an OutputFormat or raise ``InvalidFormatError``."""
    if isinstance(value, OutputFormat):
        return value
    try:
        return OutputFormat(value)
    except ValueError:
        raise InvalidFormatError(value) from None


def apply_defaults(
    req: GenerateRequest, config: Optional[BarcodeConfig] = None
) -> GenerateRequest:
    """Return a copy of ``req`` with zero width/height replaced by defaults."""
    cfg = config or BarcodeConfig()
    changes: Dict[str, Any] = {}
    if req.width == 0:
        changes["width"] = cfg.default_width
    if req.height == 0:
        changes["height"] = cfg.default_height
    if not changes:
        return req
    return dataclasses.replace(req, **changes)


def validate(req: GenerateRequest) -> None:
    """
    Validate a (defaulted) request. Pure check, never mutates ``req``.

    Raises:
        InvalidTypeError: unsupported symbology.
        InvalidFormatError: unsupported output format.
        InvalidDataError: data length/charset or dimension violation.
        ChecksumMismatchError: supplied check digit is wrong.
    """
    symbology = coerce_symbology(req.symbology)
    coerce_format(req.format)

    if not isinstance(req.data, str) or req.data == "":
        raise InvalidDataError("data is required")

    SYMBOLOGY_RULES[symbology].check_data(req.data)

    _check_dimension("width", req.width, MIN_BARCODE_WIDTH, MAX_BARCODE_WIDTH)
    _check_dimension("height", req.height, MIN_BARCODE_HEIGHT, MAX_BARCODE_HEIGHT)


def _check_dimension(name: str, value: Any, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise InvalidDataError(
            f"{name} must be between {low} and {high}", context={name: value}
        )


def encoder_payload(req: GenerateRequest) -> str:
    """Data handed to the symbology encoder for an already validated request."""
    return SYMBOLOGY_RULES[coerce_symbology(req.symbology)].payload(req.data)


def parse_request(
    payload: Mapping[str, Any], config: Optional[BarcodeConfig] = None
) -> GenerateRequest:
    """
    Decode a JSON-style mapping into a GenerateRequest.

    Missing or empty ``format`` falls back to the configured default; missing
    width/height stay 0 so that ``apply_defaults`` fills them.

    Raises:
        InvalidTypeError, InvalidFormatError, InvalidDataError
    """
    if not isinstance(payload, Mapping):
        raise InvalidDataError("request body must be a JSON object")

    cfg = config or BarcodeConfig()
    symbology = coerce_symbology(payload.get("type"))
    raw_format = payload.get("format") or cfg.default_format
    output_format = coerce_format(raw_format)

    data = payload.get("data", "")
    if not isinstance(data, str):
        raise InvalidDataError("data must be a string")

    width = _int_field(payload, "width")
    height = _int_field(payload, "height")

    include_text = payload.get("include_text", False)
    if not isinstance(include_text, bool):
        raise InvalidDataError("include_text must be a boolean")

    ignored = sorted(COSMETIC_FIELDS.intersection(payload))
    if ignored:
        logger.debug("Ignoring cosmetic barcode fields: %s", ", ".join(ignored))

    return GenerateRequest(
        data=data,
        symbology=symbology,
        format=output_format,
        width=width,
        height=height,
        include_text=include_text,
    )


def _int_field(payload: Mapping[str, Any], name: str) -> int:
    value = payload.get(name, 0)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDataError(f"{name} must be an integer", context={name: value})
    return value
