# src/image_enhancer/modules/enhancement/infrastructure/adapters.py
"""
Adaptadores de Infraestructura para Mejora de Imágenes.

Arquitectura: Infrastructure Layer
Responsabilidad: Implementaciones en memoria (Fakes) de los puertos del dominio.
Útiles para tests unitarios, demos y ejecuciones offline (`simulate` en la CLI).
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Optional

from image_enhancer.modules.enhancement.domain.exceptions import (
    ImageLoadError,
    SuperResolutionError,
)
from image_enhancer.modules.enhancement.domain.ports.image_loader import (
    ImageInput,
    LoadedImageData,
)
from image_enhancer.modules.enhancement.domain.ports.super_resolution import (
    SuperResolutionResult,
)

logger = logging.getLogger(__name__)

DEFAULT_LOADED_IMAGE = LoadedImageData(
    data=b"fake-image-data",
    width=800,
    height=600,
    format="jpeg",
    size_bytes=50_000,
)


class FakeImageLoader:
    """
    Implementación simulada (Fake) del cargador de imágenes.

    Comportamiento:
    - Si se inyecta `error`, siempre falla con ImageLoadError(error).
    - Si la entrada es texto/ruta y contiene "missing" o "error", falla.
    - Por defecto, retorna `loaded` (800x600 jpeg de 50000 bytes).
    """

    def __init__(
        self,
        loaded: Optional[LoadedImageData] = None,
        error: Optional[str] = None,
    ):
        self._loaded = loaded if loaded is not None else DEFAULT_LOADED_IMAGE
        self._error = error
        self.received_inputs: list[ImageInput] = []

    async def load_image(self, image_input: ImageInput) -> LoadedImageData:
        self.received_inputs.append(image_input)

        if self._error is not None:
            raise ImageLoadError(self._error)

        if isinstance(image_input, (str, Path)):
            name = str(image_input).lower()
            if "missing" in name:
                raise ImageLoadError(f"Image not found: {image_input}")
            if "error" in name:
                raise ImageLoadError(f"Simulated read failure for: {image_input}")

        logger.debug(
            f"Fake load: {self._loaded.width}x{self._loaded.height} "
            f"{self._loaded.format}"
        )
        return self._loaded


class FakeSuperResolution:
    """
    Implementación simulada del motor de super-resolución.

    Repite los bytes de entrada ceil(factor) veces como resultado "mejorado".
    Si se inyecta `error`, siempre falla con SuperResolutionError(error).
    """

    def __init__(self, error: Optional[str] = None, processing_time_ms: float = 0.0):
        self._error = error
        self._processing_time_ms = processing_time_ms
        self.received_factors: list[float] = []

    async def enhance_image(
        self, image_data: bytes, upscale_factor: float
    ) -> SuperResolutionResult:
        self.received_factors.append(upscale_factor)

        if self._error is not None:
            raise SuperResolutionError(self._error)

        return SuperResolutionResult(
            enhanced_image_data=image_data * math.ceil(upscale_factor),
            processing_time_ms=self._processing_time_ms,
        )
