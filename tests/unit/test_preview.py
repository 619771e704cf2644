import pytest

from picking import HitRecord
from preview import PreviewBuilding, snap_preview
from transform import Transform2D


def _hit(coord, surface_id="terrain"):
    return HitRecord(cell_id=0, camera_id="cam", depth=999.0, pointer_id="mouse",
                     surface_id=surface_id, coord=coord)


def _preview():
    return PreviewBuilding(sprite="house.png", offset=(0.0, 0.0), position=(0.0, 0.0, 3.0), z_offset=10.0)


def test_preview_snaps_to_cell_center_above_surface(make_surface):
    surface = make_surface(transform=Transform2D.from_xyz(100.0, -20.0, 1.0))
    preview = _preview()

    assert snap_preview(preview, _hit((2, 1)), [surface])

    x, y = surface.cell_center_world((2, 1))
    assert preview.position == pytest.approx((x, y, 11.0))


def test_preview_offset_is_added(make_surface):
    surface = make_surface()
    preview = _preview()
    preview.offset = (4.0, -2.0)
    snap_preview(preview, _hit((0, 0)), [surface])
    assert preview.position == pytest.approx((4.0, -2.0, 11.0))


def test_preview_stays_put_without_hover(make_surface):
    preview = _preview()
    assert not snap_preview(preview, None, [make_surface()])
    assert preview.position == (0.0, 0.0, 3.0)


def test_preview_ignores_unknown_surface(make_surface):
    preview = _preview()
    assert not snap_preview(preview, _hit((0, 0), surface_id="gone"), [make_surface()])
    assert preview.position == (0.0, 0.0, 3.0)


def test_snapping_twice_reports_no_move(make_surface):
    surface = make_surface()
    preview = _preview()
    assert snap_preview(preview, _hit((1, 1)), [surface])
    assert not snap_preview(preview, _hit((1, 1)), [surface])
