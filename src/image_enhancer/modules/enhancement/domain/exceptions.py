# src/image_enhancer/modules/enhancement/domain/exceptions.py
"""
Excepciones del dominio de Mejora de Imágenes.

Arquitectura: Domain Layer
Responsabilidad: Definir errores semánticos independientes de la infraestructura.
"""

from __future__ import annotations


class EnhancementError(Exception):
    """Clase base para errores en el módulo de mejora de imágenes."""

    pass


# === Validación de Metadatos ===


class ImageValidationError(EnhancementError, ValueError):
    """Un metadato de imagen viola una regla de negocio."""

    pass


class InvalidDimensionsError(ImageValidationError):
    """Ancho o alto no positivos, no enteros o por encima del máximo."""

    pass


class InvalidFormatError(ImageValidationError):
    """Formato vacío, no textual o no soportado."""

    pass


class InvalidFileSizeError(ImageValidationError):
    """Tamaño de archivo fuera del rango (0, 50MB]."""

    pass


class InvalidUpscaleFactorError(ImageValidationError):
    """Factor de escalado no finito o fuera del rango (1, 4]."""

    pass


# === Máquina de Estados ===


class InvalidTransitionError(EnhancementError):
    """Se intentó una transición no permitida desde el estado actual del job."""

    def __init__(self, message: str, current_status: object, operation: str):
        super().__init__(message)
        self.current_status = current_status
        self.operation = operation


# === Colaboradores Externos (Puertos) ===


class ExternalServiceError(EnhancementError):
    """Fallo opaco reportado por un adaptador de puerto."""

    pass


class ImageLoadError(ExternalServiceError):
    """El cargador no pudo resolver la entrada (no existe, ilegible, corrupta)."""

    pass


class SuperResolutionError(ExternalServiceError):
    """El procesador de super-resolución falló (ej: OOM, modelo corrupto)."""

    pass
