import numpy as np
import pytest

from world.terrain import (
    ClassificationTable,
    TerrainCategory,
    build_classification_table,
    normalize_noise,
    reference_table,
)


def test_first_declared_range_wins_on_overlap():
    """Overlapping ranges resolve to the earliest one added."""
    table = ClassificationTable()
    table.add(TerrainCategory.WATER, 0.0, 0.6)
    table.add(TerrainCategory.STONE, 0.4, 1.0)

    assert table.classify(0.5) == TerrainCategory.WATER
    assert table.classify(0.4) == TerrainCategory.WATER
    assert table.classify(0.6) == TerrainCategory.STONE


def test_reference_table_boundaries():
    """Lower bounds are inclusive, upper bounds exclusive."""
    table = reference_table()
    assert table.classify(0.0) == TerrainCategory.WATER
    assert table.classify(0.1999) == TerrainCategory.WATER
    assert table.classify(0.2) == TerrainCategory.SAND
    assert table.classify(0.375) == TerrainCategory.DIRT
    assert table.classify(0.45) == TerrainCategory.GRASS
    assert table.classify(0.81) == TerrainCategory.STONE
    assert table.classify(0.999) == TerrainCategory.STONE


def test_reference_table_covers_one():
    """The last range claims 1.0 so the whole unit interval is covered."""
    assert reference_table().classify(1.0) == TerrainCategory.STONE


@pytest.mark.parametrize("sample", [-0.1, 1.5, float("nan")])
def test_out_of_range_samples_fall_back_to_dirt(sample):
    assert reference_table().classify(sample) == TerrainCategory.DIRT


def test_exclusive_table_leaves_upper_bound_to_fallback():
    table = build_classification_table([("WATER", 0.0, 0.5), ("STONE", 0.5, 1.0)], "GRASS", inclusive_end=False)
    assert table.classify(1.0) == TerrainCategory.GRASS
    assert table.classify(0.99) == TerrainCategory.STONE


def test_gap_uses_fallback():
    table = ClassificationTable(fallback=TerrainCategory.SAND)
    table.add(TerrainCategory.WATER, 0.0, 0.3)
    table.add(TerrainCategory.STONE, 0.7, 1.0)
    assert table.classify(0.5) == TerrainCategory.SAND


def test_reversed_range_rejected():
    with pytest.raises(ValueError):
        ClassificationTable().add(TerrainCategory.WATER, 0.5, 0.1)


def test_classify_array_matches_classify():
    """Vectorized classification agrees with the scalar one, boundaries included."""
    table = reference_table()
    samples = np.concatenate([
        np.linspace(-0.2, 1.2, 301),
        np.array([0.0, 0.2, 0.375, 0.45, 0.81, 1.0]),
    ])
    expected = [int(table.classify(float(s))) for s in samples]
    assert table.classify_array(samples).tolist() == expected


def test_classify_array_respects_priority():
    table = ClassificationTable()
    table.add(TerrainCategory.WATER, 0.0, 0.6)
    table.add(TerrainCategory.STONE, 0.4, 1.0)
    result = table.classify_array(np.array([0.1, 0.5, 0.9]))
    assert result.tolist() == [TerrainCategory.WATER, TerrainCategory.WATER, TerrainCategory.STONE]


def test_texture_indices_are_dense_and_stable():
    indices = sorted(c.texture_index for c in TerrainCategory)
    assert indices == list(range(len(TerrainCategory)))
    assert TerrainCategory.DIRT.texture_index == 0
    assert TerrainCategory.WATER.texture_index == 4


def test_normalize_noise():
    assert normalize_noise(-1.0) == 0.0
    assert normalize_noise(1.0) == 1.0
    assert normalize_noise(0.0) == 0.5
