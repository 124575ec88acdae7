import math

import pytest

from image_enhancer.core.numeric import (
    is_finite_number,
    is_integral,
    is_number,
    round_half_away_from_zero,
)


def test_bool_is_not_a_number():
    assert is_number(True) is False
    assert is_integral(False) is False


def test_integral_accepts_whole_floats():
    assert is_integral(1920) is True
    assert is_integral(1920.0) is True
    assert is_integral(1920.5) is False
    assert is_integral(math.nan) is False
    assert is_integral("1920") is False


def test_finite_number_rejects_nan_and_infinities():
    assert is_finite_number(2.5) is True
    assert is_finite_number(math.nan) is False
    assert is_finite_number(math.inf) is False
    assert is_finite_number(-math.inf) is False


@pytest.mark.parametrize(
    "value, expected",
    [(2.5, 3), (2.4999, 2), (3.5, 4), (1620.0, 1620), (-2.5, -3), (0.5, 1)],
)
def test_round_half_away_from_zero(value, expected):
    assert round_half_away_from_zero(value) == expected


def test_huge_ints_are_finite_and_integral():
    """Un int enorme no puede convertirse a float, pero sigue siendo finito."""
    assert is_finite_number(10**400) is True
    assert is_integral(10**400) is True
    assert is_integral(-(10**400)) is True
