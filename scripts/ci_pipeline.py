#!/usr/bin/env python3
"""
Pipeline de CI Local para el Proyecto Image Enhancer.

Etapas:
1. Lint (ruff) bloqueante.
2. Tipos (mypy) sobre core, dominio y aplicación.
3. Tests síncronos del dominio puro (validación, value objects, entidades).
4. Tests asíncronos (caso de uso, adaptadores Fake, observabilidad).
5. CLI + E2E: tests de la CLI, flujo completo y smoke de `inspect`/`simulate`
   comprobando los códigos de salida esperados.

Uso: python scripts/ci_pipeline.py [--skip-lint]
"""

import argparse
import subprocess
import sys
import time
from dataclasses import dataclass, field
from datetime import datetime

PACKAGE = "src/image_enhancer"
CLI_MODULE = "image_enhancer.modules.enhancement.entry_points.cli"
FULL_HD = ["--width", "1920", "--height", "1080", "--format", "jpeg", "--size", "500000"]


# Colores para la terminal
class Colors:
    HEADER = "\033[95m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


@dataclass
class Check:
    """Un comando y el código de salida que se espera de él."""

    description: str
    command: list[str]
    expected_returncode: int = 0


@dataclass
class Stage:
    name: str
    checks: list[Check] = field(default_factory=list)


def _pytest(*paths: str) -> list[str]:
    return [sys.executable, "-m", "pytest", *paths, "-q"]


def _cli(*args: str) -> list[str]:
    return [sys.executable, "-m", CLI_MODULE, *args]


def build_stages(skip_lint: bool) -> list[Stage]:
    stages = []
    if not skip_lint:
        stages.append(
            Stage(
                "1. LINT (RUFF)",
                [Check("Estilo y errores comunes", ["ruff", "check", "src/", "tests/"])],
            )
        )

    stages += [
        Stage(
            "2. TIPOS (MYPY)",
            [
                Check(
                    "Core, dominio y aplicación",
                    [
                        "mypy",
                        f"{PACKAGE}/core",
                        f"{PACKAGE}/modules/enhancement/domain",
                        f"{PACKAGE}/modules/enhancement/application",
                        "--ignore-missing-imports",
                    ],
                )
            ],
        ),
        Stage(
            "3. DOMINIO PURO (SÍNCRONO)",
            [
                Check(
                    "Validación, value objects, Image y ProcessingJob",
                    _pytest("tests/core", "tests/modules/enhancement/domain"),
                )
            ],
        ),
        Stage(
            "4. ASÍNCRONO (CASO DE USO Y PUERTOS)",
            [
                Check(
                    "EnhanceImageUseCase y adaptadores Fake",
                    _pytest(
                        "tests/modules/enhancement/application",
                        "tests/modules/enhancement/infrastructure",
                    ),
                )
            ],
        ),
        Stage(
            "5. CLI & E2E",
            [
                Check(
                    "Tests de CLI y flujo completo",
                    _pytest("tests/modules/enhancement/entry_points", "tests/e2e"),
                ),
                Check("Smoke: inspect válido", _cli("inspect", *FULL_HD)),
                Check(
                    "Smoke: inspect rechaza dimensiones inválidas",
                    _cli(
                        "inspect", "--width", "0", "--height", "1",
                        "--format", "png", "--size", "1",
                    ),
                    expected_returncode=1,
                ),
                Check("Smoke: simulate exitoso", _cli("simulate", *FULL_HD)),
                Check(
                    "Smoke: simulate con fallo del motor",
                    _cli("simulate", *FULL_HD, "--fail-enhance"),
                    expected_returncode=1,
                ),
            ],
        ),
    ]
    return stages


def run_check(check: Check) -> bool:
    print(f"⏳ {check.description}...")
    start = time.time()
    result = subprocess.run(check.command, capture_output=True, text=True)
    duration = time.time() - start

    if result.returncode == check.expected_returncode:
        print(f"{Colors.OKGREEN}✅ PASÓ ({duration:.2f}s){Colors.ENDC}")
        return True

    print(
        f"{Colors.FAIL}❌ FALLÓ ({duration:.2f}s): exit={result.returncode}, "
        f"esperado={check.expected_returncode}{Colors.ENDC}"
    )
    print(f"{Colors.WARNING}--- STDERR ---\n{result.stderr}{Colors.ENDC}")
    print(f"{Colors.WARNING}--- STDOUT ---\n{result.stdout}{Colors.ENDC}")
    return False


def main() -> int:
    parser = argparse.ArgumentParser(description="Pipeline de CI local")
    parser.add_argument("--skip-lint", action="store_true", help="Omitir ruff")
    args = parser.parse_args()

    start_total = time.time()
    print(f"{Colors.BOLD}🚀 INICIANDO PIPELINE CI/CD - IMAGE ENHANCER{Colors.ENDC}")
    print(f"📅 Fecha: {datetime.now()}")

    for stage in build_stages(args.skip_lint):
        print(f"\n{Colors.HEADER}=== EJECUTANDO: {stage.name} ==={Colors.ENDC}")
        if not all(run_check(check) for check in stage.checks):
            print(f"{Colors.FAIL}⛔ Build detenido en: {stage.name}{Colors.ENDC}")
            return 1

    total_duration = time.time() - start_total
    print(f"\n{Colors.OKGREEN}{'='*50}{Colors.ENDC}")
    print(f"{Colors.OKGREEN}🎉  BUILD SUCCESSFUL{Colors.ENDC}")
    print(f"{Colors.OKGREEN}{'='*50}{Colors.ENDC}")
    print(f"⏱️ Tiempo Total: {total_duration:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
