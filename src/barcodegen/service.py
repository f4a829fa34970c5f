"""
RU: Фасад генерации штрихкодов: проверка -> кодирование -> рендеринг.
EN: Barcode generation facade: validate -> encode -> render.

Every call is a pure function of its request. Collaborators (encoder, font)
are read-only and shared across threads without locking; nothing is cached.
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from src.barcodegen.config import BarcodeConfig
from src.barcodegen.encoder import PyBarcodeEncoder, SymbologyEncoder
from src.barcodegen.exceptions import (
    BarcodeGenError,
    BarcodeRenderError,
    BarcodeValidationError,
    InvalidDataError,
)
from src.barcodegen.pattern import BarPattern
from src.barcodegen.raster import RasterRenderer
from src.barcodegen.validation import (
    apply_defaults,
    coerce_format,
    coerce_symbology,
    encoder_payload,
    parse_request,
    validate,
)
from src.barcodegen.vector import VectorRenderer
from src.model.barcodegen import GenerateRequest, RenderedImage
from src.model.enums import OutputFormat

logger = logging.getLogger(__name__)

__all__ = [
    "BarcodeService",
]


class BarcodeService:
    """
    Orchestrates barcode generation for one request at a time.

    Args:
        encoder: Symbology capability; defaults to ``PyBarcodeEncoder``.
        raster: PNG renderer; defaults to ``RasterRenderer``.
        vector: SVG renderer; defaults to ``VectorRenderer``.
        config: Request defaults; defaults to ``BarcodeConfig()``.

    Examples:
        >>> svc = BarcodeService()
        >>> img = svc.generate(GenerateRequest(data="0036000291452", symbology=Symbology.EAN_13))
        >>> img.content_type
        'image/png'
    """

    def __init__(
        self,
        encoder: Optional[SymbologyEncoder] = None,
        raster: Optional[RasterRenderer] = None,
        vector: Optional[VectorRenderer] = None,
        config: Optional[BarcodeConfig] = None,
    ) -> None:
        self.encoder: SymbologyEncoder = encoder if encoder is not None else PyBarcodeEncoder()
        self.raster = raster if raster is not None else RasterRenderer()
        self.vector = vector if vector is not None else VectorRenderer()
        self.config = config if config is not None else BarcodeConfig()

    def generate(self, req: GenerateRequest) -> RenderedImage:
        """
        Validate, encode and render ``req``.

        Returns:
            RenderedImage with PNG or SVG bytes and the matching MIME type.

        Raises:
            BarcodeValidationError: input rejected (type, format, data, checksum).
            BarcodeRenderError: unexpected internal failure while rendering.
        """
        req = apply_defaults(req, self.config)
        try:
            validate(req)
            symbology = coerce_symbology(req.symbology)
            output_format = coerce_format(req.format)
            pattern = self.encoder.encode(symbology, encoder_payload(req))
            _check_fits(pattern, req.width)
        except BarcodeValidationError as e:
            logger.warning("Barcode request rejected (%s): %s", req, e)
            raise

        renderer = self.raster if output_format is OutputFormat.PNG else self.vector
        try:
            content = renderer.render(
                pattern, req.width, req.height, req.include_text, req.data
            )
        except BarcodeGenError:
            logger.exception("Barcode rendering failed for %s", req)
            raise
        except Exception as e:
            logger.exception("Barcode rendering failed for %s", req)
            raise BarcodeRenderError(
                f"Barcode image generation failed: {symbology.value}"
            ) from e

        logger.info(
            "Barcode generated: %s, %s %dx%d, %d bytes",
            symbology.value,
            output_format.value,
            req.width,
            req.height,
            len(content),
        )
        return RenderedImage(content=content, content_type=output_format.content_type)

    def generate_from_dict(self, payload: Mapping[str, Any]) -> RenderedImage:
        """Decode a JSON-style request body and generate it."""
        try:
            req = parse_request(payload, self.config)
        except BarcodeValidationError as e:
            logger.warning("Barcode request body rejected: %s", e)
            raise
        return self.generate(req)

    async def generate_async(self, req: GenerateRequest) -> RenderedImage:
        """
        Async wrapper for ``generate`` (runs in the default thread pool).

        Cancelling the awaiting task does not interrupt a render already in
        progress; its result is discarded, so partial output is never returned.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.generate, req)

    def batch_generate(
        self, requests: Sequence[GenerateRequest], parallel: bool = False
    ) -> List[Tuple[GenerateRequest, RenderedImage]]:
        """
        Generate several barcodes, optionally on a thread pool.

        Returns:
            List of (request, RenderedImage) tuples in input order.

        Raises:
            BarcodeGenError: the first failing request aborts the batch.
        """

        def gen(item: GenerateRequest) -> Tuple[GenerateRequest, RenderedImage]:
            return item, self.generate(item)

        if parallel:
            with ThreadPoolExecutor() as pool:
                result = list(pool.map(gen, requests))
        else:
            result = [gen(r) for r in requests]
        logger.info("Batch barcode generation complete: %d items", len(result))
        return result


def _check_fits(pattern: BarPattern, width: int) -> None:
    """Every module needs at least one pixel (or user unit) of width."""
    if width < pattern.width:
        raise InvalidDataError(
            f"width {width} is too small for {pattern.width} modules",
            context={"width": width, "modules": pattern.width},
        )
