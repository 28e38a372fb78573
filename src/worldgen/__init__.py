"""Procedural biome world generation."""

from .biomes import BIOMES, Biome, biome_from_index
from .config import (
    OutputFormat,
    PresetType,
    WorldConfig,
    WorldOptions,
    WorldgenSettings,
    load_config,
    random_seed,
    resolve_options,
)
from .exceptions import ConfigurationError, RegionOutOfBoundsError, WorldgenError
from .render import GenerationResult, build_pixel_buffer, encode_png, render, to_data_url
from .terrain import (
    TerrainEvaluator,
    classify,
    evaluate,
    generate,
    generate_blocks,
    generate_world,
)
from .types import Block, Position, Region, Size, TerrainSample

__all__ = [
    # Types
    "Block",
    "Position",
    "Region",
    "Size",
    "TerrainSample",
    # Biomes
    "BIOMES",
    "Biome",
    "biome_from_index",
    # Config
    "OutputFormat",
    "PresetType",
    "WorldConfig",
    "WorldOptions",
    "WorldgenSettings",
    "load_config",
    "random_seed",
    "resolve_options",
    # Generation
    "TerrainEvaluator",
    "classify",
    "evaluate",
    "generate",
    "generate_blocks",
    "generate_world",
    # Rendering
    "GenerationResult",
    "build_pixel_buffer",
    "encode_png",
    "render",
    "to_data_url",
    # Exceptions
    "WorldgenError",
    "ConfigurationError",
    "RegionOutOfBoundsError",
]
