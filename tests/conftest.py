import pytest

from camera import CameraState, OrthographicProjection, Viewport
from surface_grid import SurfaceGrid
from transform import Transform2D
from world.terrain import TerrainCategory

WINDOW = "window-1"


@pytest.fixture
def make_camera():
    """Factory for a 1:1 orthographic camera centered on the origin."""
    def _make(camera_id="cam", target=WINDOW, is_active=True, order=0,
              near=-1000.0, scale=1.0, size=(800.0, 600.0), transform=None):
        return CameraState(
            camera_id=camera_id,
            is_active=is_active,
            target=target,
            viewport=Viewport(x=0.0, y=0.0, width=size[0], height=size[1]),
            transform=transform or Transform2D.from_xyz(0.0, 0.0, 0.0),
            projection=OrthographicProjection(near=near, far=1000.0, scale=scale),
            order=order,
        )
    return _make


@pytest.fixture
def make_surface():
    """Factory for a fully occupied grass surface placed at (0, 0, z)."""
    def _make(surface_id="terrain", size=(8, 8), z=1.0, transform=None, blocking=False):
        surface = SurfaceGrid(
            surface_id=surface_id,
            size=size,
            tile_size=(16.0, 17.0),
            grid_size=(16.0, 8.0),
            transform=transform or Transform2D.from_xyz(0.0, 0.0, z),
            pick_offset=(0.0, 0.0),
        )
        for col in range(size[0]):
            for row in range(size[1]):
                surface.set_cell((col, row), TerrainCategory.GRASS, visible=True, blocking=blocking)
        return surface
    return _make


@pytest.fixture
def screen_pos():
    """Viewport position over the center of a cell."""
    def _pos(camera, surface, coord):
        return camera.world_to_viewport(surface.cell_center_world(coord))
    return _pos
