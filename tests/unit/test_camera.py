import pytest

from transform import Transform2D


def test_viewport_center_maps_to_camera_position(make_camera):
    camera = make_camera(transform=Transform2D.from_xyz(30.0, -20.0, 0.0))
    assert camera.viewport_to_world_2d((400.0, 300.0)) == pytest.approx((30.0, -20.0))


def test_screen_y_points_down_world_y_points_up(make_camera):
    camera = make_camera(scale=0.5)
    # Top-left corner of an 800x600 viewport at half scale
    assert camera.viewport_to_world_2d((0.0, 0.0)) == pytest.approx((-200.0, 150.0))
    assert camera.viewport_to_world_2d((800.0, 600.0)) == pytest.approx((200.0, -150.0))


def test_world_to_viewport_inverts_unprojection(make_camera):
    camera = make_camera(scale=0.5, transform=Transform2D.from_xyz(12.0, 7.0, 0.0))
    for pos in [(0.0, 0.0), (123.0, 456.0), (799.0, 1.0)]:
        world = camera.viewport_to_world_2d(pos)
        assert camera.world_to_viewport(world) == pytest.approx(pos)


def test_empty_viewport_cannot_unproject(make_camera):
    camera = make_camera(size=(0.0, 600.0))
    assert camera.viewport_to_world_2d((10.0, 10.0)) is None


def test_singular_camera_transform_cannot_unproject(make_camera):
    camera = make_camera(transform=Transform2D(x=0.0, y=0.0, z=0.0, rotation=0.0, scale_x=0.0, scale_y=1.0))
    assert camera.viewport_to_world_2d((10.0, 10.0)) is None


def test_primary_window_target_normalization(make_camera):
    assert make_camera(target=None).normalize_target("primary") == "primary"
    assert make_camera(target=None).normalize_target(None) is None
    assert make_camera(target="texture").normalize_target("primary") == "texture"


def test_center_on_keeps_layer(make_camera):
    camera = make_camera(transform=Transform2D.from_xyz(0.0, 0.0, 5.0))
    camera.center_on(10.0, 20.0)
    assert (camera.transform.x, camera.transform.y, camera.transform.z) == (10.0, 20.0, 5.0)
