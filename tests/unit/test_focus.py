from picking import HitRecord, PointerHits, hits_for_pointer, hovered_cells, merge_pointer_hits


def _hit(depth, camera_id="cam", pointer_id="mouse", surface_id="terrain", coord=(0, 0)):
    return HitRecord(
        cell_id=0,
        camera_id=camera_id,
        depth=depth,
        pointer_id=pointer_id,
        surface_id=surface_id,
        coord=coord,
    )


def test_higher_order_camera_hits_come_first():
    ui = PointerHits("mouse", [_hit(50.0, camera_id="ui")], order=1.0)
    world = PointerHits("mouse", [_hit(1.0, camera_id="world")], order=0.0)
    merged = merge_pointer_hits([world, ui])
    assert [h.camera_id for h in merged["mouse"]] == ["ui", "world"]


def test_same_order_sorted_by_depth():
    a = PointerHits("mouse", [_hit(999.0, surface_id="far"), _hit(998.0, surface_id="near")], order=0.0)
    merged = merge_pointer_hits([a])
    assert [h.surface_id for h in merged["mouse"]] == ["near", "far"]


def test_pointers_kept_apart():
    events = [
        PointerHits("a", [_hit(1.0, pointer_id="a")], order=0.0),
        PointerHits("b", [], order=0.0),
    ]
    merged = merge_pointer_hits(events)
    assert len(merged["a"]) == 1
    assert merged["b"] == []
    assert hits_for_pointer(events, "c") == []


def test_hovered_cell_is_topmost_hit():
    events = [
        PointerHits("mouse", [_hit(999.0, coord=(1, 1)), _hit(998.0, coord=(2, 2))], order=0.0),
        PointerHits("idle", [], order=0.0),
    ]
    hovered = hovered_cells(events)
    assert hovered["mouse"].coord == (2, 2)
    assert "idle" not in hovered
