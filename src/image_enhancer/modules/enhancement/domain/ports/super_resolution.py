# src/image_enhancer/modules/enhancement/domain/ports/super_resolution.py
"""
Puerto para el Procesador de Super-Resolución.

Arquitectura: Domain Port (Interface)
Responsabilidad: Definir el contrato para la mejora de imágenes por IA.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SuperResolutionResult:
    """Bytes mejorados y el tiempo que reporta el procesador."""

    enhanced_image_data: bytes
    processing_time_ms: float


class SuperResolutionPort(Protocol):
    """
    Contrato abstracto para motores de super-resolución.

    Implementaciones esperadas:
    - Cliente de inferencia local o en la nube (Infraestructura, externo)
    - FakeSuperResolution (Testing)
    """

    async def enhance_image(
        self, image_data: bytes, upscale_factor: float
    ) -> SuperResolutionResult:
        """
        Mejora la imagen.

        Args:
            image_data: Bytes crudos de la imagen fuente.
            upscale_factor: Ya validado dentro de (1, 4].

        Raises:
            Exception: Definida por la implementación (fallo de inferencia).
        """
        ...
