# src/image_enhancer/modules/enhancement/application/use_cases.py
"""
Casos de Uso para la Mejora de Imágenes.

Arquitectura: Application Layer
Responsabilidad: Orquestar carga, super-resolución y seguimiento del job,
delegando la I/O en los puertos.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from image_enhancer.modules.enhancement.application.dtos import (
    EnhanceImageRequest,
    EnhanceImageResponse,
)
from image_enhancer.modules.enhancement.domain.entities import Image, ProcessingJob
from image_enhancer.modules.enhancement.domain.ports.image_loader import (
    ImageLoaderPort,
)
from image_enhancer.modules.enhancement.domain.ports.super_resolution import (
    SuperResolutionPort,
)
from image_enhancer.modules.enhancement.domain.validation import (
    DEFAULT_UPSCALE_FACTOR,
    validate_dimensions,
    validate_file_size,
    validate_format,
    validate_upscale_factor,
)
from image_enhancer.modules.enhancement.domain.value_objects import JobStatus
from image_enhancer.modules.enhancement.infrastructure.observability import (
    ObservabilityService,
)

# Logger específico para la capa de aplicación
logger = logging.getLogger("image_enhancer.app")


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 3)


class EnhanceImageUseCase:
    """
    Caso de Uso: Mejorar una imagen mediante super-resolución.

    Colaboradores:
    - image_loader: ImageLoaderPort (Puerto)
    - super_resolution: SuperResolutionPort (Puerto)

    Es la única frontera de recuperación: cualquier error de los pasos 1-6
    se convierte en una respuesta con success=False. No hay reintentos.
    """

    def __init__(
        self, image_loader: ImageLoaderPort, super_resolution: SuperResolutionPort
    ):
        # Inyección de Dependencias (DIP)
        self._image_loader = image_loader
        self._super_resolution = super_resolution

    @ObservabilityService.measure_latency(operation_name="enhance_image_use_case")
    async def execute(self, request: EnhanceImageRequest) -> EnhanceImageResponse:
        start = time.perf_counter()

        upscale_factor = (
            request.upscale_factor
            if request.upscale_factor is not None
            else DEFAULT_UPSCALE_FACTOR
        )

        original_image: Optional[Image] = None
        job: Optional[ProcessingJob] = None

        try:
            # 1. Validación temprana (Fail Fast): un factor inválido nunca dispara I/O
            validate_upscale_factor(upscale_factor)

            # 2. Delegación al cargador
            loaded = await self._image_loader.load_image(request.image_input)

            # 3. Defensa en profundidad contra un cargador defectuoso
            validate_dimensions(loaded.width, loaded.height)
            validate_file_size(loaded.size_bytes)
            validate_format(loaded.format)

            # 4. Entidades
            original_image = Image.create_new(
                loaded.width, loaded.height, loaded.format, loaded.size_bytes
            )
            job = ProcessingJob.create_new(original_image)
            job.start_processing()
            logger.info(
                f"[START] Job {job.job_id} | {original_image.dimensions} "
                f"{original_image.format} x{upscale_factor}"
            )

            # 5. Super-resolución
            result = await self._super_resolution.enhance_image(
                loaded.data, upscale_factor
            )

            # 6. Dimensiones resultantes
            enhanced_dimensions = original_image.get_upscaled_dimensions(
                upscale_factor
            )

            # 7. Cierre exitoso del job
            total_ms = _elapsed_ms(start)
            job.complete_successfully(enhanced_dimensions, total_ms)
            logger.info(
                f"[DONE] Job {job.job_id} -> {enhanced_dimensions} en {total_ms}ms"
            )

            return EnhanceImageResponse(
                success=True,
                processing_time_ms=total_ms,
                enhanced_image_data=result.enhanced_image_data,
                original_image=original_image,
                job=job,
                enhanced_dimensions=enhanced_dimensions,
            )

        except Exception as e:
            total_ms = _elapsed_ms(start)
            error_message = str(e)

            if job is not None and job.status is JobStatus.IN_PROGRESS:
                job.fail(error_message)

            logger.warning(
                f"[FAIL] {type(e).__name__}: {error_message} "
                f"(job={job.job_id if job else None})"
            )

            return EnhanceImageResponse(
                success=False,
                processing_time_ms=total_ms,
                original_image=original_image,
                job=job,
                error_message=error_message,
            )
