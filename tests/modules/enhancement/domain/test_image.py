# tests/modules/enhancement/domain/test_image.py
"""
Tests unitarios para la Entidad Image.
Foco: Validación atómica, métricas derivadas y cálculo de escalado.
"""

import dataclasses

import pytest

from image_enhancer.modules.enhancement.domain.entities import Image
from image_enhancer.modules.enhancement.domain.exceptions import (
    InvalidDimensionsError,
    InvalidFileSizeError,
    InvalidFormatError,
    InvalidUpscaleFactorError,
)
from image_enhancer.modules.enhancement.domain.value_objects import ImageDimensions


# === Fixtures ===
@pytest.fixture
def full_hd():
    return Image("img-123", 1920, 1080, "jpeg", 500_000)


# === Casos de Prueba ===


def test_image_stores_metadata(full_hd):
    assert full_hd.image_id == "img-123"
    assert full_hd.width == 1920
    assert full_hd.height == 1080
    assert full_hd.format == "jpeg"
    assert full_hd.size_in_bytes == 500_000
    assert full_hd.dimensions == ImageDimensions(1920, 1080)


def test_image_preserves_original_format_casing():
    image = Image("img-1", 100, 100, "PNG", 1000)

    assert image.format == "PNG"


def test_image_derived_metrics(full_hd):
    assert full_hd.aspect_ratio == pytest.approx(1920 / 1080)
    assert full_hd.megapixels == pytest.approx(2.0736)
    assert full_hd.is_low_resolution is False


def test_image_low_resolution_below_one_megapixel():
    image = Image("img-2", 800, 600, "jpeg", 100_000)

    assert image.megapixels == pytest.approx(0.48)
    assert image.is_low_resolution is True


def test_image_exactly_one_megapixel_is_not_low_resolution():
    image = Image("img-3", 1000, 1000, "png", 100_000)

    assert image.is_low_resolution is False


@pytest.mark.parametrize(
    "width, height, expected",
    [
        (3999, 3999, True),
        (4000, 4000, False),
        (4000, 100, False),
        (100, 4000, False),
    ],
)
def test_can_be_upscaled_requires_both_axes_under_4000(width, height, expected):
    image = Image("img", width, height, "jpeg", 1000)

    assert image.can_be_upscaled() is expected


def test_upscaled_dimensions_double(full_hd):
    assert full_hd.get_upscaled_dimensions(2) == ImageDimensions(3840, 2160)


def test_upscaled_dimensions_fractional_factor(full_hd):
    assert full_hd.get_upscaled_dimensions(1.5) == ImageDimensions(2880, 1620)


def test_upscaled_dimensions_round_half_away_from_zero():
    """
    Given: 5 * 1.5 = 7.5 y 3 * 1.5 = 4.5
    Then: Empates .5 se redondean hacia arriba (8, 5), no al par (8, 4)
    """
    image = Image("img", 5, 3, "bmp", 10)

    assert image.get_upscaled_dimensions(1.5) == ImageDimensions(8, 5)


def test_upscaled_dimensions_does_not_mutate_image(full_hd):
    full_hd.get_upscaled_dimensions(4)

    assert full_hd.width == 1920
    assert full_hd.height == 1080


def test_upscaled_dimensions_validate_factor(full_hd):
    with pytest.raises(InvalidUpscaleFactorError):
        full_hd.get_upscaled_dimensions(1)


def test_upscaled_dimensions_ignore_eligibility_but_respect_bounds():
    """
    Regla: get_upscaled_dimensions no consulta can_be_upscaled().
    Un origen no elegible aún calcula, pero el resultado sigue validado.
    """
    eligible_result = Image("img", 4000, 2000, "png", 1000).get_upscaled_dimensions(2)
    assert eligible_result == ImageDimensions(8000, 4000)

    with pytest.raises(InvalidDimensionsError, match="maximum"):
        Image("img", 6000, 100, "png", 1000).get_upscaled_dimensions(2)


def test_image_validation_order_dimensions_first():
    """
    Given: Dimensiones, formato y tamaño inválidos a la vez
    Then: El primer error reportado es el de dimensiones
    """
    with pytest.raises(InvalidDimensionsError):
        Image("img", 0, 0, "gif", 0)

    with pytest.raises(InvalidFormatError):
        Image("img", 10, 10, "gif", 0)

    with pytest.raises(InvalidFileSizeError):
        Image("img", 10, 10, "jpeg", 0)


def test_image_is_immutable(full_hd):
    with pytest.raises(dataclasses.FrozenInstanceError):
        full_hd.width = 10  # type: ignore[misc]


def test_image_created_at_is_stable_across_reads(full_hd):
    first = full_hd.created_at
    second = full_hd.created_at

    assert first == second


def test_create_new_generates_unique_ids():
    a = Image.create_new(100, 100, "jpeg", 1000)
    b = Image.create_new(100, 100, "jpeg", 1000)

    assert a.image_id.startswith("img-")
    assert a.image_id != b.image_id
    assert a != b


def test_to_dict_snapshot(full_hd):
    snapshot = full_hd.to_dict()

    assert snapshot["image_id"] == "img-123"
    assert snapshot["format"] == "jpeg"
    assert snapshot["created_at"] == full_hd.created_at.isoformat()


def test_image_keeps_fractional_size_as_given():
    image = Image("img", 10, 10, "png", 1.5)

    assert image.size_in_bytes == 1.5


def test_huge_dimensions_fail_with_typed_error():
    with pytest.raises(InvalidDimensionsError, match="maximum"):
        Image("img", 10**400, 1, "png", 100)

    with pytest.raises(InvalidDimensionsError, match="maximum"):
        ImageDimensions(10**400, 1)
