# src/image_enhancer/modules/enhancement/domain/ports/image_loader.py
"""
Puerto para la carga de imágenes.

Arquitectura: Domain Port (Interface)
Responsabilidad: Definir el contrato para resolver una entrada opaca
(ruta, URL o bytes) en bytes crudos más sus metadatos.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Protocol, Union

# Entrada opaca: el adaptador decide cómo interpretarla.
ImageInput = Union[bytes, str, Path, BinaryIO]


@dataclass(frozen=True)
class LoadedImageData:
    """Bytes crudos de la imagen y los metadatos que declara el cargador."""

    data: bytes
    width: int
    height: int
    format: str
    size_bytes: int


class ImageLoaderPort(Protocol):
    """
    Contrato abstracto para cargadores de imágenes.

    Implementaciones esperadas:
    - Adaptador de sistema de archivos / HTTP (Infraestructura, externo)
    - FakeImageLoader (Testing)
    """

    async def load_image(self, image_input: ImageInput) -> LoadedImageData:
        """
        Resuelve la entrada en datos de imagen cargados.

        Raises:
            Exception: Definida por la implementación (no existe, ilegible,
                corrupta). El caso de uso la trata como opaca.
        """
        ...
