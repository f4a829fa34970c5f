"""
Типизированные исключения генератора штрихкодов.

EN: Typed exception hierarchy for barcode generation. Every failure raised by
the generation pipeline derives from ``BarcodeGenError`` so callers can catch
one type, while the HTTP boundary can still tell client input errors from
internal render failures via ``client_error``.

Иерархия:
    BarcodeGenError (базовое)
    ├── BarcodeValidationError (ошибки входных данных, HTTP 400)
    │   ├── InvalidTypeError
    │   ├── InvalidFormatError
    │   ├── InvalidDataError
    │   └── ChecksumMismatchError
    └── BarcodeRenderError (внутренние ошибки, HTTP 500)

Example:
    >>> try:
    ...     service.generate(request)
    ... except BarcodeValidationError as e:
    ...     logger.warning("Rejected: %s", e)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "BarcodeGenError",
    "BarcodeValidationError",
    "InvalidTypeError",
    "InvalidFormatError",
    "InvalidDataError",
    "ChecksumMismatchError",
    "BarcodeRenderError",
]


class BarcodeGenError(Exception):
    """
    Базовое исключение для всех ошибок генерации штрихкодов.

    Attributes:
        message: Человекочитаемое сообщение об ошибке.
        context: Дополнительный контекст для отладки (опционально).
        client_error: True, если ошибка вызвана входными данными клиента.
    """

    client_error: bool = False

    def __init__(
        self,
        message: str,
        *,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = dict(context) if context else {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


# ==============================================================================
# INPUT VALIDATION ERRORS
# ==============================================================================


class BarcodeValidationError(BarcodeGenError):
    """Deterministic, caller-input-driven error. Never retried."""

    client_error = True


class InvalidTypeError(BarcodeValidationError):
    """Unsupported symbology."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            "invalid barcode type: must be UPC-A, EAN-13, or Code128",
            context={"type": value},
        )


class InvalidFormatError(BarcodeValidationError):
    """Unsupported output format."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            "invalid format: must be png or svg",
            context={"format": value},
        )


class InvalidDataError(BarcodeValidationError):
    """Length/charset violation, out-of-range dimension, or encoder rejection."""

    def __init__(
        self, detail: str, *, context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            f"invalid data for the specified barcode type: {detail}",
            context=context,
        )
        self.detail = detail


class ChecksumMismatchError(BarcodeValidationError):
    """
    Supplied check digit disagrees with the computed value.

    Attributes:
        expected: Check digit computed from the significant digits.
        actual: Check digit supplied by the caller.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"checksum digit does not match computed value: "
            f"expected check digit {expected}, got {actual}",
            context={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


# ==============================================================================
# INTERNAL ERRORS
# ==============================================================================


class BarcodeRenderError(BarcodeGenError):
    """Unexpected internal failure while rasterizing or encoding output."""

    client_error = False
