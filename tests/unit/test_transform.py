import math

import pytest

from transform import IDENTITY, Transform2D


def test_translation_only():
    t = Transform2D.from_xyz(5.0, -2.0, 3.0)
    assert t.transform_point((1.0, 1.0)) == (6.0, -1.0)
    assert t.inverse_transform_point((6.0, -1.0)) == pytest.approx((1.0, 1.0))


def test_rotation_is_counter_clockwise():
    t = Transform2D(x=0.0, y=0.0, z=0.0, rotation=math.pi / 2, scale_x=1.0, scale_y=1.0)
    assert t.transform_point((1.0, 0.0)) == pytest.approx((0.0, 1.0))


def test_scale_applies_before_rotation():
    t = Transform2D(x=1.0, y=0.0, z=0.0, rotation=math.pi / 2, scale_x=2.0, scale_y=1.0)
    assert t.transform_point((1.0, 0.0)) == pytest.approx((1.0, 2.0))


@pytest.mark.parametrize("sx,sy", [(0.0, 1.0), (1.0, 0.0), (0.0, 0.0)])
def test_singular_scale_has_no_inverse(sx, sy):
    t = Transform2D(x=0.0, y=0.0, z=0.0, rotation=0.3, scale_x=sx, scale_y=sy)
    assert t.inverse_matrix() is None
    assert t.inverse_transform_point((1.0, 2.0)) is None


def test_transform_point_3d_adds_z():
    t = Transform2D.from_xyz(0.0, 0.0, 1.0)
    assert t.transform_point_3d((2.0, 3.0), 10.0) == (2.0, 3.0, 11.0)


def test_identity():
    assert IDENTITY.transform_point((4.0, -7.0)) == (4.0, -7.0)


def test_tiny_uniform_scale_is_still_invertible():
    t = Transform2D(x=3.0, y=-1.0, z=0.0, rotation=0.0, scale_x=1e-7, scale_y=1e-7)
    assert t.inverse_matrix() is not None
    world = t.transform_point((250.0, -40.0))
    assert t.inverse_transform_point(world) == pytest.approx((250.0, -40.0))
