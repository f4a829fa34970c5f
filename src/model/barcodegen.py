# RU: Домейн-модель запроса генерации штрихкода и результата рендеринга.
# EN: Domain model for a barcode generation request and its rendered result.

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Union

from .enums import DEFAULT_OUTPUT_FORMAT, OutputFormat, Symbology

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerateRequest:
    """
    Transient barcode generation request.

    Zero ``width``/``height`` means "not supplied"; defaults are filled in by
    ``src.barcodegen.validation.apply_defaults``, which returns a new request
    instead of mutating this one.

    Examples:
        req = GenerateRequest(data="036000291452", symbology=Symbology.UPC_A)
        wire = req.to_dict()
        # {"data": "036000291452", "type": "UPC-A", "format": "png", ...}
    """

    data: str
    symbology: Symbology
    format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    width: int = 0
    height: int = 0
    include_text: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the JSON field names of the HTTP schema."""
        return {
            "data": self.data,
            "type": _wire_value(self.symbology),
            "format": _wire_value(self.format),
            "width": self.width,
            "height": self.height,
            "include_text": self.include_text,
        }

    def __str__(self) -> str:
        text = str(self.data)
        datashow: str = text[:16] + ("..." if len(text) > 16 else "")
        return (
            f"GenerateRequest({_wire_value(self.symbology)}, data={datashow}, "
            f"{_wire_value(self.format)} {self.width}x{self.height})"
        )


@dataclass(frozen=True)
class RenderedImage:
    """Encoded image bytes plus their MIME type. Unpacks as ``(content, content_type)``."""

    content: bytes
    content_type: str

    def __iter__(self) -> Iterator[Union[bytes, str]]:
        yield self.content
        yield self.content_type


def _wire_value(value: Any) -> Any:
    return value.value if isinstance(value, (Symbology, OutputFormat)) else value
