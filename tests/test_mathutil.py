import dataclasses
import math

import pytest

from paddlekit.mathutil import PI, Vector2, to_degrees, to_radians


def test_pi_matches_documented_constant():
    assert to_radians(180.0) == pytest.approx(3.1415926535)
    assert PI == pytest.approx(3.1415926535)


def test_half_turn_in_radians_is_pi():
    assert to_radians(180.0) == pytest.approx(PI)


def test_pi_radians_in_degrees_is_half_turn():
    assert to_degrees(PI) == pytest.approx(180.0)


def test_zero_angle_converts_to_zero():
    assert to_radians(0.0) == 0.0
    assert to_degrees(0.0) == 0.0


@pytest.mark.parametrize("angle", [-720.0, -45.0, 1.0, 33.3, 90.0, 359.0])
def test_degree_round_trip(angle):
    assert to_degrees(to_radians(angle)) == pytest.approx(angle)


@pytest.mark.parametrize("angle", [-3.0, 0.5, 1.0, 2.5])
def test_radian_round_trip(angle):
    assert to_radians(to_degrees(angle)) == pytest.approx(angle)


def test_conversion_is_close_to_stdlib():
    assert to_radians(57.0) == pytest.approx(math.radians(57.0), rel=1e-9)


def test_default_vector_is_zero():
    assert Vector2() == Vector2.ZERO
    assert (Vector2.ZERO.x, Vector2.ZERO.y) == (0.0, 0.0)


def test_vector_holds_components():
    v = Vector2(3.5, -2.0)
    assert (v.x, v.y) == (3.5, -2.0)


def test_vector_is_immutable():
    v = Vector2(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0  # type: ignore[misc]
    assert v == Vector2(1.0, 2.0)