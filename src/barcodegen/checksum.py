"""
RU: Контрольные цифры UPC-A и EAN-13 (взвешенный модуль 10).
EN: UPC-A and EAN-13 check digits (weighted modulo 10).

Positions are 0-indexed from the left. UPC-A weights even positions by 3,
EAN-13 weights odd positions by 3; both reduce with ``(10 - sum % 10) % 10``.
"""

from __future__ import annotations

from typing import Final, Tuple

from src.barcodegen.exceptions import ChecksumMismatchError

__all__ = [
    "UPCA_SIGNIFICANT_DIGITS",
    "EAN13_SIGNIFICANT_DIGITS",
    "upca_check_digit",
    "ean13_check_digit",
    "verify_upca",
    "verify_ean13",
]

UPCA_SIGNIFICANT_DIGITS: Final[int] = 11
EAN13_SIGNIFICANT_DIGITS: Final[int] = 12

_UPCA_WEIGHTS: Final[Tuple[int, int]] = (3, 1)
_EAN13_WEIGHTS: Final[Tuple[int, int]] = (1, 3)


def _weighted_mod10(digits: str, weights: Tuple[int, int]) -> int:
    total = sum(int(d) * weights[i % 2] for i, d in enumerate(digits))
    return (10 - total % 10) % 10


def _require_digits(digits: str, count: int) -> None:
    if len(digits) != count or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"expected exactly {count} ASCII digits, got {digits!r}")


def upca_check_digit(digits: str) -> int:
    """Compute the UPC-A check digit of 11 significant digits."""
    _require_digits(digits, UPCA_SIGNIFICANT_DIGITS)
    return _weighted_mod10(digits, _UPCA_WEIGHTS)


def ean13_check_digit(digits: str) -> int:
    """Compute the EAN-13 check digit of 12 significant digits."""
    _require_digits(digits, EAN13_SIGNIFICANT_DIGITS)
    return _weighted_mod10(digits, _EAN13_WEIGHTS)


def verify_upca(code: str) -> None:
    """
    Verify a full 12-digit UPC-A code.

    Raises:
        ChecksumMismatchError: digit[11] differs from the computed value.
    """
    _require_digits(code, UPCA_SIGNIFICANT_DIGITS + 1)
    expected = upca_check_digit(code[:UPCA_SIGNIFICANT_DIGITS])
    actual = int(code[UPCA_SIGNIFICANT_DIGITS])
    if expected != actual:
        raise ChecksumMismatchError(expected, actual)


def verify_ean13(code: str) -> None:
    """
    Verify a full 13-digit EAN-13 code.

    Raises:
        ChecksumMismatchError: digit[12] differs from the computed value.
    """
    _require_digits(code, EAN13_SIGNIFICANT_DIGITS + 1)
    expected = ean13_check_digit(code[:EAN13_SIGNIFICANT_DIGITS])
    actual = int(code[EAN13_SIGNIFICANT_DIGITS])
    if expected != actual:
        raise ChecksumMismatchError(expected, actual)
