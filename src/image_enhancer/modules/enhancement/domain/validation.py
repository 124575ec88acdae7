# src/image_enhancer/modules/enhancement/domain/validation.py
"""
Reglas de validación para metadatos de imagen.

Arquitectura: Domain Layer
Responsabilidad: Funciones puras que aplican las reglas de negocio sobre
dimensiones, formato, tamaño de archivo y factor de escalado.

Cada función falla en la PRIMERA regla violada; el orden de los chequeos
determina el mensaje cuando un valor viola varias reglas a la vez.
"""

from __future__ import annotations

from typing import Any

from image_enhancer.core.numeric import is_finite_number, is_integral, is_number
from image_enhancer.modules.enhancement.domain.exceptions import (
    InvalidDimensionsError,
    InvalidFileSizeError,
    InvalidFormatError,
    InvalidUpscaleFactorError,
)

# === Constantes de Negocio ===
SUPPORTED_FORMATS: tuple[str, ...] = ("jpeg", "jpg", "png", "webp", "bmp")
MAX_DIMENSION_PX = 10_000
MAX_FILE_SIZE_BYTES = 50 * 1024 * 1024  # 50MB
MIN_UPSCALE_FACTOR = 1
MAX_UPSCALE_FACTOR = 4
DEFAULT_UPSCALE_FACTOR = 2
UPSCALE_LIMIT_PX = 4000  # A partir de aquí (en cualquier eje) no se escala


def _is_non_positive(value: Any) -> bool:
    # Valores no numéricos no son "<= 0"; los rechaza el chequeo siguiente.
    return is_number(value) and value <= 0


def validate_dimensions(width: Any, height: Any) -> None:
    """
    Valida ancho y alto en píxeles.

    Orden: positividad -> integralidad -> máximo (10000px).

    Raises:
        InvalidDimensionsError: Si alguna regla se viola.
    """
    if _is_non_positive(width) or _is_non_positive(height):
        raise InvalidDimensionsError("Image dimensions must be positive numbers")

    if not is_integral(width) or not is_integral(height):
        raise InvalidDimensionsError("Image dimensions must be integers")

    if width > MAX_DIMENSION_PX or height > MAX_DIMENSION_PX:
        raise InvalidDimensionsError(
            f"Image dimensions exceed maximum allowed size ({MAX_DIMENSION_PX}px)"
        )


def validate_format(image_format: Any) -> None:
    """
    Valida el formato contra la lista soportada (insensible a mayúsculas).

    El mensaje de error repite el valor original, sin normalizar.
    """
    if not image_format or not isinstance(image_format, str):
        raise InvalidFormatError("Image format must be a non-empty string")

    if image_format.lower() not in SUPPORTED_FORMATS:
        raise InvalidFormatError(
            f"Unsupported image format: {image_format}. "
            f"Supported: {', '.join(SUPPORTED_FORMATS)}"
        )


def validate_file_size(size_in_bytes: Any) -> None:
    """Valida 0 < size <= 50MB (límite superior inclusivo)."""
    # `not > 0` también rechaza NaN.
    if not is_number(size_in_bytes) or not size_in_bytes > 0:
        raise InvalidFileSizeError("File size must be positive")

    if size_in_bytes > MAX_FILE_SIZE_BYTES:
        raise InvalidFileSizeError(
            f"File size exceeds maximum allowed "
            f"({MAX_FILE_SIZE_BYTES // 1024 // 1024}MB)"
        )


def validate_upscale_factor(factor: Any) -> None:
    """
    Valida 1 < factor <= 4.

    NaN e infinitos se rechazan antes de comparar rangos.
    """
    if not is_finite_number(factor):
        raise InvalidUpscaleFactorError("Upscale factor must be a finite number")

    if factor <= MIN_UPSCALE_FACTOR:
        raise InvalidUpscaleFactorError(
            f"Upscale factor must be greater than {MIN_UPSCALE_FACTOR}"
        )

    if factor > MAX_UPSCALE_FACTOR:
        raise InvalidUpscaleFactorError(
            f"Upscale factor cannot exceed {MAX_UPSCALE_FACTOR}x "
            "for performance reasons"
        )
