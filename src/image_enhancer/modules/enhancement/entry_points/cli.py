# src/image_enhancer/modules/enhancement/entry_points/cli.py
"""
Interfaz de Línea de Comandos (CLI) para el Módulo de Mejora.

Arquitectura: Interface Adapter
Responsabilidad: Traducir comandos de terminal a operaciones del dominio y
casos de uso. `simulate` usa los adaptadores Fake: no hay I/O real.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

from image_enhancer.modules.enhancement.application.dtos import EnhanceImageRequest
from image_enhancer.modules.enhancement.application.use_cases import (
    EnhanceImageUseCase,
)
from image_enhancer.modules.enhancement.domain.entities import Image
from image_enhancer.modules.enhancement.domain.exceptions import ImageValidationError
from image_enhancer.modules.enhancement.domain.ports.image_loader import (
    LoadedImageData,
)
from image_enhancer.modules.enhancement.domain.validation import (
    DEFAULT_UPSCALE_FACTOR,
)
from image_enhancer.modules.enhancement.infrastructure.adapters import (
    FakeImageLoader,
    FakeSuperResolution,
)
from image_enhancer.modules.enhancement.infrastructure.observability import (
    configure_logging,
)


def _add_metadata_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, required=True, help="Ancho en píxeles")
    parser.add_argument("--height", type=int, required=True, help="Alto en píxeles")
    parser.add_argument(
        "--format", dest="image_format", required=True, help="jpeg|jpg|png|webp|bmp"
    )
    parser.add_argument("--size", type=int, required=True, help="Tamaño en bytes")
    parser.add_argument(
        "--factor",
        type=float,
        default=DEFAULT_UPSCALE_FACTOR,
        help="Factor de escalado en (1, 4]",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-enhancer", description="Mejora de imágenes por super-resolución"
    )
    parser.add_argument(
        "--log-level", default=None, help="Nivel de logging (default: env o INFO)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validar metadatos y calcular dimensiones escaladas"
    )
    _add_metadata_arguments(inspect_parser)

    simulate_parser = subparsers.add_parser(
        "simulate", help="Ejecutar el caso de uso completo con adaptadores Fake"
    )
    _add_metadata_arguments(simulate_parser)
    simulate_parser.add_argument(
        "--fail-enhance",
        action="store_true",
        help="Forzar un fallo del motor de super-resolución",
    )
    return parser


def _run_inspect(args: argparse.Namespace) -> int:
    try:
        image = Image.create_new(args.width, args.height, args.image_format, args.size)
        upscaled = image.get_upscaled_dimensions(args.factor)
    except ImageValidationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(f"📐 Dimensiones:      {image.dimensions}")
    print(f"🖼️  Formato:          {image.format}")
    print(f"📏 Aspect ratio:     {image.aspect_ratio:.4f}")
    print(f"🔢 Megapíxeles:      {image.megapixels:.4f}")
    print(f"🔍 Baja resolución:  {'sí' if image.is_low_resolution else 'no'}")
    print(f"⬆️  Escalable:        {'sí' if image.can_be_upscaled() else 'no'}")
    print(f"🎯 x{args.factor:g} ->          {upscaled}")
    return 0


def _run_simulate(args: argparse.Namespace) -> int:
    loader = FakeImageLoader(
        loaded=LoadedImageData(
            data=b"\x00" * 1024,
            width=args.width,
            height=args.height,
            format=args.image_format,
            size_bytes=args.size,
        )
    )
    engine = FakeSuperResolution(
        error="Simulated super-resolution failure" if args.fail_enhance else None
    )
    use_case = EnhanceImageUseCase(loader, engine)

    response = asyncio.run(
        use_case.execute(
            EnhanceImageRequest(image_input="simulated", upscale_factor=args.factor)
        )
    )
    print(json.dumps(response.to_dict(), indent=2))
    return 0 if response.success else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "inspect":
        return _run_inspect(args)
    return _run_simulate(args)


if __name__ == "__main__":
    sys.exit(main())
