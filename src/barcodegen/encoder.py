from __future__ import annotations

import logging
from typing import Dict, Protocol, runtime_checkable

import barcode as pybarcode
from barcode.errors import BarcodeError

from src.barcodegen.exceptions import InvalidDataError
from src.barcodegen.pattern import BarPattern
from src.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = [
    "SymbologyEncoder",
    "PyBarcodeEncoder",
]


@runtime_checkable
class SymbologyEncoder(Protocol):
    """Capability turning validated data into an abstract bar pattern."""

    def encode(self, symbology: Symbology, data: str) -> BarPattern:
        """
        Raises:
            InvalidDataError: the symbology cannot represent ``data``.
        """
        ...


class PyBarcodeEncoder:
    """
    SymbologyEncoder backed by python-barcode.

    UPC-A is encoded through the EAN-13 class: callers hand over the promoted
    13-digit form (leading ``0``), since both share one encoding family.
    """

    _pybarcode_support: Dict[Symbology, str] = {
        Symbology.UPC_A: "ean13",
        Symbology.EAN_13: "ean13",
        Symbology.CODE_128: "code128",
    }

    def encode(self, symbology: Symbology, data: str) -> BarPattern:
        barcode_name = self._pybarcode_support.get(symbology)
        if barcode_name is None:
            raise InvalidDataError(
                f"no encoder registered for {symbology!r}",
                context={"type": symbology},
            )
        try:
            bclass = pybarcode.get_barcode_class(barcode_name)
            modules = bclass(data).build()
        # Code128 raises KeyError or RuntimeError for characters outside its code sets.
        except (BarcodeError, KeyError, RuntimeError, ValueError) as e:
            logger.warning(
                "Encoder rejected data for %s: %r", symbology.value, e
            )
            raise InvalidDataError(str(e) or type(e).__name__) from e
        logger.debug(
            "Encoded %s into %d module row(s)", symbology.value, len(modules)
        )
        return BarPattern.from_modules(modules[0])
