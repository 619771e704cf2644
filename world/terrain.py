"""
terrain.py - Terrain categories and noise classification

Implements the discrete terrain model:
- TerrainCategory: closed set of tile kinds, each value doubling as the
  tile's texture atlas index
- ClassificationTable: ordered value ranges mapping normalized noise to a
  category (earliest matching range wins)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Tuple

import numpy as np

from config import TERRAIN_FALLBACK, TERRAIN_RANGES


# Values are texture atlas indices; keep them dense and stable
class TerrainCategory(IntEnum):
    DIRT = 0
    GRASS = 1
    STONE = 2
    SAND = 3
    WATER = 4

    @property
    def texture_index(self) -> int:
        return int(self)


@dataclass(frozen=True)
class TerrainRange:
    """A category and the half-open interval [start, end) it claims."""
    category: TerrainCategory
    start: float
    end: float

    def contains(self, value: float, inclusive_end: bool = False) -> bool:
        if inclusive_end:
            return self.start <= value <= self.end
        return self.start <= value < self.end


class ClassificationTable:
    """
    Ordered list of terrain ranges.

    Ranges are tested in the order they were added and may overlap; the
    first one containing the sample wins. Samples no range claims get the
    fallback category. With ``inclusive_end`` the last range also claims its
    upper bound, so a table covering [0, 1) in pieces covers [0, 1].
    """

    def __init__(self, fallback: TerrainCategory = TerrainCategory.DIRT,
                 inclusive_end: bool = False):
        self.fallback = fallback
        self.inclusive_end = inclusive_end
        self._ranges: List[TerrainRange] = []

    def add(self, category: TerrainCategory, start: float, end: float) -> "ClassificationTable":
        if start > end:
            raise ValueError(f"Range for {category.name} is reversed: [{start}, {end})")
        self._ranges.append(TerrainRange(category, start, end))
        return self

    @property
    def ranges(self) -> Tuple[TerrainRange, ...]:
        return tuple(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def classify(self, sample: float) -> TerrainCategory:
        """Return the category of the first range containing ``sample``."""
        last = len(self._ranges) - 1
        for i, terrain_range in enumerate(self._ranges):
            if terrain_range.contains(sample, self.inclusive_end and i == last):
                return terrain_range.category
        return self.fallback

    def classify_array(self, samples: np.ndarray) -> np.ndarray:
        """Vectorized classify: returns an int8 array of category values.

        Same priority rule as classify(): a cell keeps the category of the
        first range that claimed it.
        """
        result = np.full(samples.shape, int(self.fallback), dtype=np.int8)
        assigned = np.zeros(samples.shape, dtype=bool)
        last = len(self._ranges) - 1

        for i, terrain_range in enumerate(self._ranges):
            if self.inclusive_end and i == last:
                in_range = (samples >= terrain_range.start) & (samples <= terrain_range.end)
            else:
                in_range = (samples >= terrain_range.start) & (samples < terrain_range.end)
            claim = in_range & ~assigned
            result[claim] = int(terrain_range.category)
            assigned |= claim

        return result


def build_classification_table(
    entries: Iterable[Tuple[str, float, float]],
    fallback: str,
    inclusive_end: bool = True,
) -> ClassificationTable:
    """Build a table from (category name, start, end) entries."""
    table = ClassificationTable(TerrainCategory[fallback], inclusive_end=inclusive_end)
    for name, start, end in entries:
        table.add(TerrainCategory[name], start, end)
    return table


def reference_table() -> ClassificationTable:
    """The five-range table from config (water, sand, dirt, grass, stone)."""
    return build_classification_table(TERRAIN_RANGES, TERRAIN_FALLBACK, inclusive_end=True)


def normalize_noise(sample):
    """Map a noise sample from [-1, 1] to [0, 1]. Works on scalars and arrays."""
    return (sample + 1.0) / 2.0
