# src/image_enhancer/modules/enhancement/domain/entities.py
"""
Entidades del dominio de Mejora de Imágenes.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Modelar la imagen fuente (inmutable) y el ciclo de vida
mutable de un trabajo de super-resolución.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from image_enhancer.core.numeric import round_half_away_from_zero

# === Imports del Mismo Módulo ===
from .exceptions import InvalidTransitionError
from .validation import (
    UPSCALE_LIMIT_PX,
    validate_dimensions,
    validate_file_size,
    validate_format,
    validate_upscale_factor,
)
from .value_objects import ImageDimensions, JobStatus

# === Guía de Organización ===
# ✅ IDENTIDAD: Las entidades se comparan por ID, no por atributos.
# ✅ ESTADO: Mutan de forma controlada a través de métodos (no setters directos).
# 🔒 datetime es inmutable: los accesores de timestamps nunca exponen estado mutable.


@dataclass(frozen=True, eq=False)
class Image:
    """
    Metadatos validados de una imagen fuente.

    Nunca existe en estado inválido: __post_init__ valida dimensiones,
    formato y tamaño (en ese orden) y la construcción falla de forma atómica.
    El formato conserva su capitalización original; la normalización solo
    se usa para comparar.
    """

    image_id: str
    width: int
    height: int
    format: str
    size_in_bytes: float
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        validate_dimensions(self.width, self.height)
        validate_format(self.format)
        validate_file_size(self.size_in_bytes)
        object.__setattr__(self, "width", int(self.width))
        object.__setattr__(self, "height", int(self.height))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self.image_id == other.image_id

    def __hash__(self) -> int:
        return hash(self.image_id)

    @classmethod
    def create_new(
        cls, width: int, height: int, image_format: str, size_in_bytes: float
    ) -> Image:
        """Factory method con identificador fresco."""
        return cls(
            image_id=f"img-{uuid.uuid4().hex}",
            width=width,
            height=height,
            format=image_format,
            size_in_bytes=size_in_bytes,
        )

    # --- Métricas derivadas (no almacenadas) ---

    @property
    def dimensions(self) -> ImageDimensions:
        return ImageDimensions(self.width, self.height)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def megapixels(self) -> float:
        return (self.width * self.height) / 1_000_000

    @property
    def is_low_resolution(self) -> bool:
        """Menos de 1 megapíxel."""
        return self.megapixels < 1

    def can_be_upscaled(self) -> bool:
        """Ambos ejes deben estar estrictamente por debajo de 4000px."""
        return self.width < UPSCALE_LIMIT_PX and self.height < UPSCALE_LIMIT_PX

    def get_upscaled_dimensions(self, factor: float) -> ImageDimensions:
        """
        Calcula las dimensiones resultantes de escalar por `factor`.

        No consulta can_be_upscaled(): el caller decide si le importa la
        elegibilidad. El resultado sigue sujeto a la validación de
        ImageDimensions (máximo 10000px).

        Raises:
            InvalidUpscaleFactorError: Si el factor no está en (1, 4].
            InvalidDimensionsError: Si el resultado excede 10000px.
        """
        validate_upscale_factor(factor)

        return ImageDimensions(
            round_half_away_from_zero(self.width * factor),
            round_half_away_from_zero(self.height * factor),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "image_id": self.image_id,
            "width": self.width,
            "height": self.height,
            "format": self.format,
            "size_in_bytes": self.size_in_bytes,
            "megapixels": self.megapixels,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(eq=False)
class ProcessingJob:
    """
    Agregado Raíz (Root Aggregate) que representa una mejora en curso.

    Máquina de estados: PENDING -> IN_PROGRESS -> COMPLETED | FAILED.
    Invariantes:
    - enhanced_dimensions y processing_time_ms existen sii status == COMPLETED
    - error_message existe sii status == FAILED
    - completed_at existe sii el estado es terminal
    """

    job_id: str
    source_image: Image
    created_at: datetime = field(default_factory=datetime.now)

    # Estado Mutable (Protegido por lógica de negocio)
    _status: JobStatus = field(default=JobStatus.PENDING, init=False)
    _enhanced_dimensions: ImageDimensions | None = field(default=None, init=False)
    _processing_time_ms: float | None = field(default=None, init=False)
    _error_message: str | None = field(default=None, init=False)
    _completed_at: datetime | None = field(default=None, init=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProcessingJob):
            return NotImplemented
        return self.job_id == other.job_id

    def __hash__(self) -> int:
        return hash(self.job_id)

    @classmethod
    def create_new(cls, source_image: Image) -> ProcessingJob:
        """Factory method para iniciar un trabajo limpio."""
        return cls(job_id=f"job-{uuid.uuid4().hex}", source_image=source_image)

    # --- Lectura ---

    @property
    def status(self) -> JobStatus:
        return self._status

    @property
    def enhanced_dimensions(self) -> ImageDimensions | None:
        return self._enhanced_dimensions

    @property
    def processing_time_ms(self) -> float | None:
        return self._processing_time_ms

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def completed_at(self) -> datetime | None:
        return self._completed_at

    @property
    def is_completed(self) -> bool:
        return self._status is JobStatus.COMPLETED

    @property
    def has_failed(self) -> bool:
        return self._status is JobStatus.FAILED

    # --- Transiciones ---

    def start_processing(self) -> None:
        """Transición PENDING -> IN_PROGRESS."""
        if self._status is not JobStatus.PENDING:
            raise InvalidTransitionError(
                "Job can only be started from PENDING status",
                current_status=self._status,
                operation="start_processing",
            )

        self._status = JobStatus.IN_PROGRESS

    def complete_successfully(
        self, enhanced_dimensions: ImageDimensions, processing_time_ms: float
    ) -> None:
        """Transición IN_PROGRESS -> COMPLETED, registrando resultados."""
        if self._status is not JobStatus.IN_PROGRESS:
            raise InvalidTransitionError(
                "Job must be IN_PROGRESS to complete",
                current_status=self._status,
                operation="complete_successfully",
            )

        self._status = JobStatus.COMPLETED
        self._enhanced_dimensions = enhanced_dimensions
        self._processing_time_ms = processing_time_ms
        self._completed_at = datetime.now()

    def fail(self, error_message: str) -> None:
        """Transición IN_PROGRESS -> FAILED."""
        if self._status is not JobStatus.IN_PROGRESS:
            raise InvalidTransitionError(
                "Job must be IN_PROGRESS to fail",
                current_status=self._status,
                operation="fail",
            )

        self._status = JobStatus.FAILED
        self._error_message = error_message
        self._completed_at = datetime.now()

    def to_dict(self) -> dict[str, Any]:
        """Snapshot serializable (Entity -> DTO)."""
        return {
            "job_id": self.job_id,
            "source_image_id": self.source_image.image_id,
            "status": self._status.value,
            "enhanced_dimensions": (
                str(self._enhanced_dimensions) if self._enhanced_dimensions else None
            ),
            "processing_time_ms": self._processing_time_ms,
            "error_message": self._error_message,
            "created_at": self.created_at.isoformat(),
            "completed_at": (
                self._completed_at.isoformat() if self._completed_at else None
            ),
        }
