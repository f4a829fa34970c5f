import pytest

from src.barcodegen.config import BarcodeConfig
from src.model.enums import OutputFormat


class TestBarcodeConfig:
    def test_defaults(self) -> None:
        cfg = BarcodeConfig()
        assert (cfg.default_width, cfg.default_height) == (300, 150)
        assert cfg.default_format is OutputFormat.PNG

    def test_format_string_is_coerced(self) -> None:
        cfg = BarcodeConfig(default_format="svg")  # type: ignore[arg-type]
        assert cfg.default_format is OutputFormat.SVG

    @pytest.mark.parametrize("width,height", [(49, 150), (300, 2000), (0, 0)])
    def test_rejects_out_of_range_defaults(self, width: int, height: int) -> None:
        with pytest.raises(ValueError, match="outside the accepted range"):
            BarcodeConfig(default_width=width, default_height=height)

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(ValueError):
            BarcodeConfig(default_format="gif")  # type: ignore[arg-type]

    def test_from_mapping(self) -> None:
        cfg = BarcodeConfig.from_mapping(
            {
                "log_level": "DEBUG",
                "barcode_default_width": 400,
                "barcode_default_height": 120,
                "barcode_default_format": "svg",
            }
        )
        assert cfg == BarcodeConfig(400, 120, OutputFormat.SVG)

    def test_from_mapping_missing_keys(self) -> None:
        assert BarcodeConfig.from_mapping({}) == BarcodeConfig()
