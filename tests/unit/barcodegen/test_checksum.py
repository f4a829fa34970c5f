import pytest

from src.barcodegen.checksum import (
    ean13_check_digit,
    upca_check_digit,
    verify_ean13,
    verify_upca,
)
from src.barcodegen.exceptions import BarcodeValidationError, ChecksumMismatchError


def _upca_reference(digits: str) -> int:
    total = sum(int(d) * (3 if i % 2 == 0 else 1) for i, d in enumerate(digits[:11]))
    return (10 - total % 10) % 10


def _ean13_reference(digits: str) -> int:
    total = sum(int(d) * (1 if i % 2 == 0 else 3) for i, d in enumerate(digits[:12]))
    return (10 - total % 10) % 10


class TestCheckDigits:
    @pytest.mark.parametrize(
        "code",
        ["036000291452", "012345678905", "042100005264", "000000000000"],
    )
    def test_upca_known_codes(self, code: str) -> None:
        assert upca_check_digit(code[:11]) == int(code[11])
        verify_upca(code)

    @pytest.mark.parametrize(
        "code",
        ["4006381333931", "5901234123457", "0036000291452", "9780141007571"],
    )
    def test_ean13_known_codes(self, code: str) -> None:
        assert ean13_check_digit(code[:12]) == int(code[12])
        verify_ean13(code)

    def test_upca_check_digit_zero_case(self) -> None:
        # sum is a multiple of 10 -> (10 - 0) % 10 == 0
        assert upca_check_digit("00000000000") == 0

    @pytest.mark.parametrize(
        "prefix",
        ["03600029145", "12345678901", "98765432109", "55555555555"],
    )
    def test_upca_matches_reference_formula(self, prefix: str) -> None:
        assert upca_check_digit(prefix) == _upca_reference(prefix)

    @pytest.mark.parametrize(
        "prefix",
        ["400638133393", "123456789012", "987654321098", "000000000001"],
    )
    def test_ean13_matches_reference_formula(self, prefix: str) -> None:
        assert ean13_check_digit(prefix) == _ean13_reference(prefix)


class TestVerification:
    @pytest.mark.parametrize("prefix", ["03600029145", "01234567890"])
    def test_upca_exactly_one_check_digit_passes(self, prefix: str) -> None:
        accepted = []
        for last in "0123456789":
            try:
                verify_upca(prefix + last)
            except ChecksumMismatchError:
                continue
            accepted.append(int(last))
        assert accepted == [_upca_reference(prefix)]

    @pytest.mark.parametrize("prefix", ["400638133393", "003600029145"])
    def test_ean13_exactly_one_check_digit_passes(self, prefix: str) -> None:
        accepted = []
        for last in "0123456789":
            try:
                verify_ean13(prefix + last)
            except ChecksumMismatchError:
                continue
            accepted.append(int(last))
        assert accepted == [_ean13_reference(prefix)]

    def test_mismatch_carries_expected_and_actual(self) -> None:
        with pytest.raises(ChecksumMismatchError) as exc_info:
            verify_upca("036000291453")
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3
        assert "expected check digit 2, got 3" in str(exc_info.value)

    def test_mismatch_is_client_error(self) -> None:
        with pytest.raises(BarcodeValidationError) as exc_info:
            verify_ean13("4006381333932")
        assert exc_info.value.client_error is True


@pytest.mark.parametrize(
    "func,bad",
    [
        (upca_check_digit, "1234567890"),
        (upca_check_digit, "1234567890A"),
        (ean13_check_digit, "1234567890123"),
        (verify_upca, "03600029145"),
        (verify_ean13, "400638133393"),
    ],
)
def test_wrong_shape_is_programming_error(func, bad: str) -> None:
    with pytest.raises(ValueError, match="ASCII digits"):
        func(bad)
