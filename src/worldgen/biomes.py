"""Biome catalog: the fixed set of terrain categories and their colors."""

from enum import Enum


class Biome(str, Enum):
    """Terrain biome with display name and map color.

    Members are the catalog itself; classification returns them directly.
    """

    OCEAN = "ocean"
    DEEP_WATER = "deepWater"
    SHALLOW = "shallow"
    BEACH = "beach"
    STEPPE = "steppe"
    OVERGROWN_CLIFFS = "overgrownCliffs"
    HIGHLANDS = "highlands"
    TUNDRA = "tundra"
    SNOWY_MOUNTAINS = "snowyMountains"
    TEMPERATE_DESERT = "temperateDesert"
    SHRUBLAND = "shrubland"
    TAIGA = "taiga"
    GRASSLAND = "grassland"
    TEMPERATE_DECIDUOUS_FOREST = "temperateDeciduousForest"
    TEMPERATE_RAIN_FOREST = "temperateRainForest"
    SUBTROPICAL_DESERT = "subtropicalDesert"
    TROPICAL_SEASONAL_FOREST = "tropicalSeasonalForest"
    PLAINS = "plains"
    SAVANNA = "savanna"
    TROPICAL_RAIN_FOREST = "tropicalRainForest"

    @property
    def code(self) -> str:
        """Stable identifier used in serialized output."""
        return self.value

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Map color as 8-bit RGB."""
        return _COLORS[self]

    @property
    def color(self) -> tuple[float, float, float, float]:
        """Map color as normalized RGBA, fully opaque."""
        r, g, b = _COLORS[self]
        return (r / 255, g / 255, b / 255, 1.0)

    @property
    def catalog_index(self) -> int:
        """Position in the catalog, used for compact array storage."""
        return _INDICES[self]


def biome_from_index(value: int) -> Biome:
    """Convert a catalog index back to its Biome."""
    return BIOMES[value]


# Shallow water intentionally shares the ocean's name and color.
_DISPLAY_NAMES: dict[Biome, str] = {
    Biome.OCEAN: "Ocean",
    Biome.DEEP_WATER: "Deep water",
    Biome.SHALLOW: "Ocean",
    Biome.BEACH: "Beach",
    Biome.STEPPE: "Steppe",
    Biome.OVERGROWN_CLIFFS: "Overgrown cliffs",
    Biome.HIGHLANDS: "Highlands",
    Biome.TUNDRA: "Tundra",
    Biome.SNOWY_MOUNTAINS: "Snowy mountains",
    Biome.TEMPERATE_DESERT: "Temperate desert",
    Biome.SHRUBLAND: "Shrubland",
    Biome.TAIGA: "Taiga",
    Biome.GRASSLAND: "Grassland",
    Biome.TEMPERATE_DECIDUOUS_FOREST: "Temperate deciduous forest",
    Biome.TEMPERATE_RAIN_FOREST: "Temperate rain forest",
    Biome.SUBTROPICAL_DESERT: "Subtropical Desert",
    Biome.TROPICAL_SEASONAL_FOREST: "Tropical seasonal forest",
    Biome.PLAINS: "Plains",
    Biome.SAVANNA: "Savanna",
    Biome.TROPICAL_RAIN_FOREST: "Tropical rain forest",
}

_COLORS: dict[Biome, tuple[int, int, int]] = {
    Biome.OCEAN: (54, 112, 181),
    Biome.DEEP_WATER: (75, 130, 196),
    Biome.SHALLOW: (54, 112, 181),
    Biome.BEACH: (227, 204, 150),
    Biome.STEPPE: (117, 116, 116),
    Biome.OVERGROWN_CLIFFS: (171, 169, 169),
    Biome.HIGHLANDS: (209, 207, 207),
    Biome.TUNDRA: (188, 188, 191),
    Biome.SNOWY_MOUNTAINS: (252, 253, 255),
    Biome.TEMPERATE_DESERT: (241, 220, 169),
    Biome.SHRUBLAND: (136, 153, 119),
    Biome.TAIGA: (152, 169, 119),
    Biome.GRASSLAND: (136, 171, 85),
    Biome.TEMPERATE_DECIDUOUS_FOREST: (70, 102, 86),
    Biome.TEMPERATE_RAIN_FOREST: (67, 136, 85),
    Biome.SUBTROPICAL_DESERT: (245, 237, 190),
    Biome.TROPICAL_SEASONAL_FOREST: (99, 150, 101),
    Biome.PLAINS: (219, 217, 169),
    Biome.SAVANNA: (204, 201, 145),
    Biome.TROPICAL_RAIN_FOREST: (103, 147, 89),
}

BIOMES: tuple[Biome, ...] = tuple(Biome)

_INDICES: dict[Biome, int] = {biome: i for i, biome in enumerate(BIOMES)}
