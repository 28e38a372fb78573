"""Seeded 2-D noise fields.

Generation only needs a narrow capability from noise: sample a reproducible
value in [-1, 1] at a point, or across a grid of points. ``NoiseField``
describes that capability; ``OpenSimplexField`` provides it with OpenSimplex
noise. Anything that builds a field from a seed string can be passed to the
generator as a ``NoiseFactory``, which keeps the pipeline testable with
deterministic stubs.
"""

import hashlib
from typing import Callable, Protocol

import numpy as np
from numpy.typing import NDArray
from opensimplex import OpenSimplex


class NoiseField(Protocol):
    """A seeded 2-D noise function returning values in [-1, 1]."""

    def sample(self, x: float, y: float) -> float:
        """Sample the field at a single point."""
        ...

    def sample_grid(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        """Sample the field on the grid spanned by two 1-D coordinate arrays.

        Returns:
            Array of shape (len(ys), len(xs)).
        """
        ...


NoiseFactory = Callable[[str], NoiseField]


def seed_to_int(seed: str) -> int:
    """Derive a stable non-negative 63-bit integer seed from a seed string.

    Args:
        seed: Seed string.

    Returns:
        Integer seed, identical for identical strings across runs and platforms.
    """
    digest = hashlib.blake2b(seed.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "big") & 0x7FFF_FFFF_FFFF_FFFF


class OpenSimplexField:
    """OpenSimplex noise seeded from a string."""

    def __init__(self, seed: str):
        self.seed = seed
        self._generator = OpenSimplex(seed=seed_to_int(seed))

    def sample(self, x: float, y: float) -> float:
        return float(self._generator.noise2(x, y))

    def sample_grid(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        return self._generator.noise2array(
            np.asarray(xs, dtype=np.float64),
            np.asarray(ys, dtype=np.float64),
        )

    def __repr__(self) -> str:
        return f"OpenSimplexField(seed={self.seed!r})"


def make_noise_field(seed: str) -> NoiseField:
    """Default NoiseFactory: OpenSimplex noise for the given seed."""
    return OpenSimplexField(seed)
