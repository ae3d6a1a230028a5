import math

import pytest

from planegeom import (
    CosineLawDomainError,
    GeometryConfig,
    is_valid_triangle,
    third_side_by_cosine_law,
)


@pytest.mark.parametrize(
    'a, b, c',
    [(3, 4, 5), (1, 1, 1), (2.5, 2.5, 4.9), (0.1, 0.2, 0.25), (7, 10, 5)],
)
def test_valid_triangles(a, b, c):
    assert is_valid_triangle(a, b, c) is True


@pytest.mark.parametrize(
    'a, b, c',
    [
        (1, 1, 3),
        (0, 1, 1),
        (-1, 2, 2),
        (1, 2, 3),  # degenerate
        (3, 1, 2),
        (2, 3, 1),
        (0, 0, 0),
        (math.nan, 1, 1),
    ],
)
def test_invalid_triangles_return_false(a, b, c):
    assert is_valid_triangle(a, b, c) is False


def test_triangle_check_is_symmetric():
    sides = (4.0, 6.0, 9.0)
    expected = is_valid_triangle(*sides)
    for perm in [(6.0, 4.0, 9.0), (9.0, 6.0, 4.0), (4.0, 9.0, 6.0)]:
        assert is_valid_triangle(*perm) is expected


def test_cosine_law_right_angle():
    assert third_side_by_cosine_law(3, 4, math.pi / 2) == pytest.approx(5.0)


@pytest.mark.parametrize('a, b', [(5.0, 2.0), (2.0, 5.0), (1.5, 0.25), (10.0, 9.0)])
def test_cosine_law_zero_angle_is_difference(a, b):
    assert third_side_by_cosine_law(a, b, 0.0) == pytest.approx(abs(a - b), abs=1e-9)


def test_cosine_law_straight_angle_is_sum():
    assert third_side_by_cosine_law(2.0, 3.0, math.pi) == pytest.approx(5.0)


def test_cosine_law_equilateral():
    assert third_side_by_cosine_law(2.0, 2.0, math.pi / 3) == pytest.approx(2.0)


def test_cosine_law_result_forms_valid_triangle():
    c = third_side_by_cosine_law(3.0, 5.0, 1.2)
    assert is_valid_triangle(3.0, 5.0, c)


def test_negative_radicand_returns_nan(monkeypatch):
    monkeypatch.setattr(math, 'cos', lambda angle: 2.0)

    result = third_side_by_cosine_law(1.0, 1.0, 0.0)

    assert math.isnan(result)


def test_negative_radicand_raises_in_strict_mode(monkeypatch):
    monkeypatch.setattr(math, 'cos', lambda angle: 2.0)

    with pytest.raises(CosineLawDomainError) as exc:
        third_side_by_cosine_law(1.0, 1.0, 0.0, strict=True)

    assert exc.value.radicand == pytest.approx(-2.0)


def test_strict_mode_can_come_from_config(monkeypatch):
    monkeypatch.setattr(math, 'cos', lambda angle: 2.0)
    monkeypatch.setattr('planegeom.config._GEOMETRY_CONFIG', GeometryConfig(strict_cosine_law=True))

    with pytest.raises(ValueError):
        third_side_by_cosine_law(1.0, 1.0, 0.0)
    assert math.isnan(third_side_by_cosine_law(1.0, 1.0, 0.0, strict=False))


@pytest.mark.parametrize(
    'a, b, angle',
    [
        (3.0, 4.0, math.inf),
        (3.0, 4.0, -math.inf),
        (3.0, 4.0, math.nan),
        (math.inf, 4.0, 1.0),
        (3.0, -math.inf, 1.0),
        (math.nan, 4.0, 1.0),
        (3.0, math.nan, 0.0),
        (math.inf, math.inf, math.inf),
    ],
)
def test_cosine_law_never_raises_on_non_finite_input(a, b, angle):
    result = third_side_by_cosine_law(a, b, angle)

    assert isinstance(result, float)
    assert not math.isfinite(result)


def test_cosine_law_non_finite_angle_is_nan_even_in_strict_mode():
    assert math.isnan(third_side_by_cosine_law(3.0, 4.0, math.inf, strict=True))


@pytest.mark.parametrize('a, b', [(10**200, 10**200), (10**400, 3), (-(10**400), 3)])
def test_cosine_law_accepts_huge_integer_sides(a, b):
    result = third_side_by_cosine_law(a, b, 1.0)

    assert isinstance(result, float)


def test_cosine_law_huge_sides_at_straight_angle_is_infinite():
    assert third_side_by_cosine_law(10**400, 10**400, math.pi) == math.inf


def test_cosine_law_accepts_integer_arguments():
    assert third_side_by_cosine_law(6, 8, 0) == pytest.approx(2.0)
