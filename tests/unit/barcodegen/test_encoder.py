import re
from unittest.mock import Mock, patch

import pytest

from src.barcodegen.encoder import PyBarcodeEncoder, SymbologyEncoder
from src.barcodegen.exceptions import InvalidDataError
from src.barcodegen.pattern import BarPattern
from src.model.enums import Symbology


class TestBarPattern:
    def test_from_modules(self) -> None:
        pattern = BarPattern.from_modules("1101")
        assert pattern.width == 4
        assert pattern.height == 1
        assert list(pattern) == [True, True, False, True]
        assert pattern.is_black(0) and not pattern.is_black(2)
        assert pattern[3] is True
        assert pattern.to_modules() == "1101"

    def test_rejects_unknown_symbols(self) -> None:
        with pytest.raises(ValueError, match="Unexpected module symbols"):
            BarPattern.from_modules("10G01")

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValueError, match="at least one module"):
            BarPattern.from_modules("")

    def test_is_immutable(self) -> None:
        pattern = BarPattern.from_modules("10")
        with pytest.raises(AttributeError):
            pattern.cells = (False,)  # type: ignore[misc]


class TestPyBarcodeEncoder:
    @pytest.fixture
    def encoder(self) -> PyBarcodeEncoder:
        return PyBarcodeEncoder()

    def test_satisfies_protocol(self, encoder: PyBarcodeEncoder) -> None:
        assert isinstance(encoder, SymbologyEncoder)

    def test_ean13_pattern_shape(self, encoder: PyBarcodeEncoder) -> None:
        pattern = encoder.encode(Symbology.EAN_13, "4006381333931")
        modules = pattern.to_modules()
        assert pattern.width == 95
        assert modules.startswith("101")
        assert modules.endswith("101")
        assert modules[45:50] == "01010"
        # 12 encoded digits with two bars each, plus three guards with two bars each
        assert len(re.findall("1+", modules)) == 30

    def test_upca_shares_ean13_encoding(self, encoder: PyBarcodeEncoder) -> None:
        upc = encoder.encode(Symbology.UPC_A, "0036000291452")
        ean = encoder.encode(Symbology.EAN_13, "0036000291452")
        assert upc == ean

    def test_short_ean13_gets_same_pattern(self, encoder: PyBarcodeEncoder) -> None:
        assert encoder.encode(Symbology.EAN_13, "400638133393") == encoder.encode(
            Symbology.EAN_13, "4006381333931"
        )

    def test_code128_ends_with_bar(self, encoder: PyBarcodeEncoder) -> None:
        pattern = encoder.encode(Symbology.CODE_128, "Hello, World!")
        assert pattern.is_black(0)
        assert pattern.is_black(pattern.width - 1)

    def test_code128_rejects_unsupported_character(
        self, encoder: PyBarcodeEncoder
    ) -> None:
        with pytest.raises(InvalidDataError) as exc_info:
            encoder.encode(Symbology.CODE_128, "price €")
        assert exc_info.value.__cause__ is not None


@patch("src.barcodegen.encoder.pybarcode.get_barcode_class")
def test_library_error_becomes_invalid_data(mock_get_barcode_class: Mock) -> None:
    mock_barcode_class = Mock()
    mock_barcode_class.side_effect = ValueError("EAN code can only contain numbers")
    mock_get_barcode_class.return_value = mock_barcode_class

    with pytest.raises(InvalidDataError, match="only contain numbers") as exc_info:
        PyBarcodeEncoder().encode(Symbology.EAN_13, "4006381333931")
    assert isinstance(exc_info.value.__cause__, ValueError)
    mock_get_barcode_class.assert_called_once_with("ean13")
