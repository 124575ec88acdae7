# src/image_enhancer/core/numeric.py
"""
Helpers numéricos puros.

Arquitectura: Core (Shared Kernel)
Responsabilidad: Clasificar y redondear valores numéricos sin conocer el negocio.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from numbers import Real
from typing import Any

# ✅ bool es subclase de int en Python, pero nunca lo tratamos como número.


def is_number(value: Any) -> bool:
    """True si el valor es un número real (excluye bool)."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    """True si el valor es numérico y no es NaN ni infinito."""
    if not is_number(value):
        return False
    # Un int siempre es finito; math.isfinite lanzaría OverflowError con 10**400.
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def is_integral(value: Any) -> bool:
    """
    True si el valor representa un entero exacto.

    Acepta floats sin parte decimal (1920.0), igual que un entero.
    """
    if not is_finite_number(value):
        return False
    if isinstance(value, int):
        return True
    return float(value).is_integer()


def round_half_away_from_zero(value: float) -> int:
    """
    Redondea al entero más cercano; los empates .5 se alejan de cero.

    Decimal(value) conserva el valor binario exacto del float, así que no
    introduce errores de representación adicionales.
    """
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))
