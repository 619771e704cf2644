"""Seeded fractal noise field backed by FastNoiseLite."""
from __future__ import annotations

import numpy as np
from pyfastnoiselite.pyfastnoiselite import FastNoiseLite, FractalType, NoiseType

from config import NoiseSettings


class NoiseField:
    """
    Deterministic 2D fractal noise (FBm over OpenSimplex2).

    The same settings and coordinate always give the same value in [-1, 1].
    The underlying generator is configured once here and never touched
    again, so a NoiseField can be shared freely.
    """

    def __init__(self, settings: NoiseSettings):
        self.settings = settings
        self._noise = FastNoiseLite(seed=settings.seed)
        self._noise.noise_type = NoiseType.NoiseType_OpenSimplex2
        self._noise.frequency = settings.frequency
        self._noise.fractal_type = FractalType.FractalType_FBm
        self._noise.fractal_octaves = settings.octaves
        self._noise.fractal_lacunarity = settings.lacunarity
        self._noise.fractal_gain = settings.gain
        self._noise.fractal_weighted_strength = settings.weighted_strength

    def sample(self, x: float, y: float) -> float:
        """Noise value at a single coordinate."""
        coords = np.array([[x], [y]], dtype=np.float32)
        return float(self._noise.gen_from_coords(coords)[0])

    def sample_coords(self, coords: np.ndarray) -> np.ndarray:
        """Noise values for a (2, N) array of x/y coordinates."""
        return self._noise.gen_from_coords(coords.astype(np.float32)).astype(np.float32)

    def sample_grid(self, width: int, height: int) -> np.ndarray:
        """
        Sample every integer coordinate of a width x height grid.

        Returns:
            (width, height) float32 array indexed [x, y]
        """
        xs = np.arange(width, dtype=np.float32)
        ys = np.arange(height, dtype=np.float32)
        xx, yy = np.meshgrid(xs, ys, indexing="ij")
        coords = np.array([xx.ravel(), yy.ravel()], dtype=np.float32)
        return self.sample_coords(coords).reshape(width, height)
