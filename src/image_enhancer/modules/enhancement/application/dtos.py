# src/image_enhancer/modules/enhancement/application/dtos.py
"""
DTOs del caso de uso de mejora.

Arquitectura: Application Layer
Responsabilidad: Definir la forma de la petición y de la respuesta estructurada.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from image_enhancer.modules.enhancement.domain.entities import Image, ProcessingJob
from image_enhancer.modules.enhancement.domain.ports.image_loader import ImageInput
from image_enhancer.modules.enhancement.domain.value_objects import ImageDimensions


@dataclass(frozen=True)
class EnhanceImageRequest:
    """Entrada opaca más el factor de escalado (None = factor por defecto)."""

    image_input: ImageInput
    upscale_factor: Optional[float] = None


@dataclass(frozen=True)
class EnhanceImageResponse:
    """
    Resultado estructurado de EnhanceImageUseCase.execute.

    En éxito todos los campos están poblados. En fallo: success=False,
    error_message, processing_time_ms y, si llegaron a construirse,
    original_image y/o job para diagnóstico.
    """

    success: bool
    processing_time_ms: float
    enhanced_image_data: Optional[bytes] = None
    original_image: Optional[Image] = None
    job: Optional[ProcessingJob] = None
    enhanced_dimensions: Optional[ImageDimensions] = None
    error_message: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Snapshot JSON-ready; los bytes mejorados se reportan por longitud."""
        return {
            "success": self.success,
            "processing_time_ms": self.processing_time_ms,
            "enhanced_image_bytes": (
                len(self.enhanced_image_data)
                if self.enhanced_image_data is not None
                else None
            ),
            "original_image": (
                self.original_image.to_dict() if self.original_image else None
            ),
            "job": self.job.to_dict() if self.job else None,
            "enhanced_dimensions": (
                str(self.enhanced_dimensions) if self.enhanced_dimensions else None
            ),
            "error_message": self.error_message,
        }
