"""Elevation and moisture fields evaluated from seeded noise."""

import numpy as np
from numpy.typing import NDArray

from ..config import WorldConfig
from ..types import Position, TerrainSample
from .noise import NoiseFactory, NoiseField, make_noise_field
from .presets import (
    NOISE_ZOOM,
    OCTAVE_FREQUENCIES,
    OctaveProfile,
    PresetProfile,
    get_preset,
)


class TerrainEvaluator:
    """Evaluates shaped elevation and moisture for one world configuration.

    Noise fields and the preset profile are resolved once at construction,
    so a single evaluator can be reused across every strip of a region.
    """

    def __init__(self, config: WorldConfig, noise: NoiseFactory | None = None):
        factory = noise or make_noise_field
        self.config = config
        self.profile: PresetProfile = get_preset(config.preset)
        self.elevation_noise: NoiseField = factory(config.elevation_seed)
        self.moisture_noise: NoiseField = factory(config.moisture_seed)

    def evaluate(self, position: Position) -> TerrainSample:
        """Evaluate a single block."""
        elevation, moisture = self.evaluate_grid(
            np.array([position.x], dtype=np.float64),
            np.array([position.y], dtype=np.float64),
        )
        return TerrainSample(
            elevation=float(elevation[0, 0]),
            moisture=float(moisture[0, 0]),
        )

    def evaluate_grid(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
    ) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Evaluate every block on the grid spanned by xs and ys.

        Args:
            xs: 1-D array of block x coordinates (1-indexed).
            ys: 1-D array of block y coordinates (1-indexed).

        Returns:
            Tuple of (elevation, moisture), each of shape (len(ys), len(xs)).
        """
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        width, height = self.config.width, self.config.height

        nx = xs / width - 0.5
        ny = ys / height - 0.5

        elevation = _octave_sum(self.elevation_noise, self.profile.elevation, nx, ny)
        elevation = elevation ** self.profile.exponent
        elevation = self._attenuate(elevation, xs, ys)

        moisture = _octave_sum(self.moisture_noise, self.profile.moisture, nx, ny)

        return elevation, moisture

    def _attenuate(
        self,
        elevation: NDArray[np.float64],
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        """Pull elevation down with distance from the map center.

        Distance is normalized by map width on both axes.
        """
        width, height = self.config.width, self.config.height
        dx = width / 2 - xs
        dy = height / 2 - ys
        distance = np.sqrt(dy[:, np.newaxis] ** 2 + dx[np.newaxis, :] ** 2) / width

        for rule in self.profile.attenuation:
            elevation = np.where(
                distance > rule.threshold,
                elevation - (distance - rule.threshold) * rule.factor,
                elevation,
            )
        return elevation


def _octave_sum(
    field: NoiseField,
    profile: OctaveProfile,
    nx: NDArray[np.float64],
    ny: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Weighted sum of noise octaves remapped to [0, 1], divided by the profile divisor."""
    total = np.zeros((ny.size, nx.size), dtype=np.float64)
    for frequency, weight in zip(OCTAVE_FREQUENCIES, profile.weights):
        if weight == 0.0:
            continue
        scale = frequency * NOISE_ZOOM
        octave = field.sample_grid(scale * nx, scale * ny) / 2 + 0.5
        total += weight * octave
    return total / profile.divisor


def evaluate(
    config: WorldConfig,
    position: Position,
    noise: NoiseFactory | None = None,
) -> TerrainSample:
    """Evaluate elevation and moisture at one block.

    Args:
        config: World configuration.
        position: 1-indexed block coordinate.
        noise: Optional factory building a noise field from a seed string.

    Returns:
        TerrainSample for the block.
    """
    return TerrainEvaluator(config, noise).evaluate(position)


def evaluate_grid(
    config: WorldConfig,
    xs: NDArray[np.float64],
    ys: NDArray[np.float64],
    noise: NoiseFactory | None = None,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Evaluate elevation and moisture over a grid of blocks.

    Returns:
        Tuple of (elevation, moisture) arrays of shape (len(ys), len(xs)).
    """
    return TerrainEvaluator(config, noise).evaluate_grid(xs, ys)
