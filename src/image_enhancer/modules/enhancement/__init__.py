# src/image_enhancer/modules/enhancement/__init__.py
"""
Módulo de Mejora de Imágenes (super-resolución).
"""

from __future__ import annotations

# Application
from .application.dtos import EnhanceImageRequest, EnhanceImageResponse
from .application.use_cases import EnhanceImageUseCase

# Domain
from .domain.entities import Image, ProcessingJob
from .domain.exceptions import (
    EnhancementError,
    ExternalServiceError,
    ImageLoadError,
    ImageValidationError,
    InvalidDimensionsError,
    InvalidFileSizeError,
    InvalidFormatError,
    InvalidTransitionError,
    InvalidUpscaleFactorError,
    SuperResolutionError,
)
from .domain.ports.image_loader import ImageLoaderPort, LoadedImageData
from .domain.ports.super_resolution import SuperResolutionPort, SuperResolutionResult
from .domain.value_objects import ImageDimensions, JobStatus

# Infrastructure
from .infrastructure.adapters import FakeImageLoader, FakeSuperResolution

__all__ = [
    "EnhanceImageRequest",
    "EnhanceImageResponse",
    "EnhanceImageUseCase",
    "Image",
    "ProcessingJob",
    "ImageDimensions",
    "JobStatus",
    "ImageLoaderPort",
    "LoadedImageData",
    "SuperResolutionPort",
    "SuperResolutionResult",
    "EnhancementError",
    "ImageValidationError",
    "InvalidDimensionsError",
    "InvalidFormatError",
    "InvalidFileSizeError",
    "InvalidUpscaleFactorError",
    "InvalidTransitionError",
    "ExternalServiceError",
    "ImageLoadError",
    "SuperResolutionError",
    "FakeImageLoader",
    "FakeSuperResolution",
]
