"""Procedural terrain generation package.

This package evaluates seeded elevation and moisture fields, classifies
them into biomes and assembles the blocks of a world region.
"""

from .classification import classify, classify_array
from .fields import TerrainEvaluator, evaluate, evaluate_grid
from .generator import generate, generate_blocks, generate_world
from .noise import NoiseFactory, NoiseField, OpenSimplexField, make_noise_field
from .presets import PRESETS, Attenuation, OctaveProfile, PresetProfile, get_preset

__all__ = [
    "Attenuation",
    "NoiseFactory",
    "NoiseField",
    "OctaveProfile",
    "OpenSimplexField",
    "PRESETS",
    "PresetProfile",
    "TerrainEvaluator",
    "classify",
    "classify_array",
    "evaluate",
    "evaluate_grid",
    "generate",
    "generate_blocks",
    "generate_world",
    "get_preset",
    "make_noise_field",
]
