"""Biome classification from elevation and moisture."""

import numpy as np
from numpy.typing import NDArray

from ..biomes import Biome

# Checked in order, first match wins. Water bands match on e < threshold.
WATER_BANDS: tuple[tuple[float, Biome], ...] = (
    (0.08, Biome.OCEAN),
    (0.09, Biome.DEEP_WATER),
    (0.10, Biome.SHALLOW),
    (0.115, Biome.BEACH),
)

# Land bands match on e > threshold (None matches everything left). Within a
# band, moisture rules match on m < threshold, falling back to the last biome.
LAND_BANDS: tuple[tuple[float | None, tuple[tuple[float, Biome], ...], Biome], ...] = (
    (
        0.8,
        (
            (0.1, Biome.STEPPE),
            (0.2, Biome.OVERGROWN_CLIFFS),
            (0.3, Biome.HIGHLANDS),
            (0.5, Biome.TUNDRA),
        ),
        Biome.SNOWY_MOUNTAINS,
    ),
    (
        0.6,
        (
            (0.33, Biome.TEMPERATE_DESERT),
            (0.66, Biome.SHRUBLAND),
        ),
        Biome.TAIGA,
    ),
    (
        0.3,
        (
            (0.16, Biome.TEMPERATE_DESERT),
            (0.5, Biome.GRASSLAND),
            (0.83, Biome.TEMPERATE_DECIDUOUS_FOREST),
        ),
        Biome.TEMPERATE_RAIN_FOREST,
    ),
    (
        None,
        (
            (0.16, Biome.SUBTROPICAL_DESERT),
            (0.33, Biome.GRASSLAND),
            (0.55, Biome.TROPICAL_SEASONAL_FOREST),
            (0.6, Biome.PLAINS),
            (0.7, Biome.SAVANNA),
        ),
        Biome.TROPICAL_RAIN_FOREST,
    ),
)


def classify(elevation: float, moisture: float) -> Biome:
    """Classify a single (elevation, moisture) pair.

    Total over all real inputs: every pair maps to exactly one biome.
    """
    for threshold, biome in WATER_BANDS:
        if elevation < threshold:
            return biome

    for band_threshold, moisture_rules, fallback in LAND_BANDS:
        if band_threshold is not None and not elevation > band_threshold:
            continue
        for moisture_threshold, biome in moisture_rules:
            if moisture < moisture_threshold:
                return biome
        return fallback

    # Unreachable: the last land band has no threshold
    raise AssertionError("biome table has no catch-all band")


def classify_array(
    elevation: NDArray[np.float64],
    moisture: NDArray[np.float64],
) -> NDArray[np.uint8]:
    """Classify arrays of elevation and moisture.

    Args:
        elevation: Elevation field.
        moisture: Moisture field, same shape as elevation.

    Returns:
        Array of Biome catalog indices (see ``biome_from_index``) as uint8.
    """
    elevation = np.asarray(elevation)
    moisture = np.asarray(moisture)

    conditions: list[NDArray[np.bool_]] = []
    choices: list[int] = []

    for threshold, biome in WATER_BANDS:
        conditions.append(elevation < threshold)
        choices.append(biome.catalog_index)

    for band_threshold, moisture_rules, fallback in LAND_BANDS:
        if band_threshold is None:
            in_band = np.ones(elevation.shape, dtype=bool)
        else:
            in_band = elevation > band_threshold
        for moisture_threshold, biome in moisture_rules:
            conditions.append(in_band & (moisture < moisture_threshold))
            choices.append(biome.catalog_index)
        conditions.append(in_band)
        choices.append(fallback.catalog_index)

    return np.select(conditions, choices).astype(np.uint8)
