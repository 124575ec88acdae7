# src/image_enhancer/modules/enhancement/domain/value_objects.py
"""
Value Objects para el Bounded Context de Mejora de Imágenes.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Definir inmutables para dimensiones y estados de procesamiento.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from image_enhancer.modules.enhancement.domain.exceptions import (
    InvalidDimensionsError,
)
from image_enhancer.modules.enhancement.domain.validation import validate_dimensions

# === Guía de Organización ===
# ✅ PUREZA: Solo tipos nativos y lógica de validación pura.
# 🔒 Inmutabilidad: frozen=True.

_DIMENSIONS_PATTERN = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")


@dataclass(frozen=True)
class ImageDimensions:
    """
    Par ancho/alto en píxeles, comparado por valor.

    Invariantes:
    1. 0 < width, height <= 10000
    2. width y height son enteros
    """

    width: int
    height: int

    def __post_init__(self):
        """Validación de invariantes al instanciar."""
        validate_dimensions(self.width, self.height)
        # 1920.0 es válido; se guarda como 1920.
        object.__setattr__(self, "width", int(self.width))
        object.__setattr__(self, "height", int(self.height))

    @classmethod
    def from_string(cls, text: str) -> ImageDimensions:
        """Parsea la representación canónica "WIDTHxHEIGHT"."""
        match = _DIMENSIONS_PATTERN.match(text or "")
        if match is None:
            raise InvalidDimensionsError(f"Invalid dimensions string: {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class JobStatus(Enum):
    """
    Estados posibles del ciclo de vida de un ProcessingJob.

    PENDING -> IN_PROGRESS -> COMPLETED | FAILED
    """

    PENDING = "PENDING"  # Creado, aún no tocado
    IN_PROGRESS = "IN_PROGRESS"  # Super-resolución en curso
    COMPLETED = "COMPLETED"  # Finalizado exitosamente
    FAILED = "FAILED"  # Falló; el error queda registrado en el job

    def is_terminal(self) -> bool:
        """Indica si el estado es final y no admite más transiciones."""
        return self in (JobStatus.COMPLETED, JobStatus.FAILED)
