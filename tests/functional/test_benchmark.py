import picking
from performance.benchmarks import picking_bench


def test_benchmark_does_not_shadow_picking_package():
    assert picking_bench.tile_picking is picking.tile_picking


def test_picking_benchmark_runs(capsys):
    picking_bench.benchmark_picking(frames=3, pointer_count=2, seed=1)
    out = capsys.readouterr().out
    assert "PICKING" in out
    assert "Hits per frame" in out
