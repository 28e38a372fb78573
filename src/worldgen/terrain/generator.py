"""World generation orchestration."""

import time
from collections import Counter
from typing import Any

import numpy as np
import structlog

from ..biomes import BIOMES
from ..config import WorldConfig, resolve_options
from ..render import GenerationResult, render
from ..types import Block, Position, Region
from .classification import classify_array
from .fields import TerrainEvaluator
from .noise import NoiseFactory

logger = structlog.get_logger()

# Columns evaluated per vectorized pass; bounds memory on large maps
STRIP_COLUMNS = 256


def resolve_region(config: WorldConfig, region: Region | None) -> Region:
    """Default to the whole map and check the region fits it.

    Raises:
        RegionOutOfBoundsError: If the region is inverted or outside the map.
    """
    if region is None:
        return Region.full(config.size)
    region.check_bounds(config.size)
    return region


def generate_blocks(
    config: WorldConfig,
    region: Region | None = None,
    noise: NoiseFactory | None = None,
) -> list[Block]:
    """Generate the blocks of a region.

    Args:
        config: World configuration.
        region: Inclusive region to generate; the whole map when None.
        noise: Optional factory building a noise field from a seed string.

    Returns:
        Blocks ordered by x ascending, then y ascending within each x.

    Raises:
        RegionOutOfBoundsError: If the region does not fit the map. Raised
            before any block is computed.
    """
    region = resolve_region(config, region)
    evaluator = TerrainEvaluator(config, noise)

    ys = np.arange(region.start.y, region.end.y + 1, dtype=np.float64)

    blocks: list[Block] = []
    for strip_start in range(region.start.x, region.end.x + 1, STRIP_COLUMNS):
        strip_end = min(strip_start + STRIP_COLUMNS - 1, region.end.x)
        xs = np.arange(strip_start, strip_end + 1, dtype=np.float64)

        elevation, moisture = evaluator.evaluate_grid(xs, ys)
        indices = classify_array(elevation, moisture)

        strip = Region(
            start=Position(x=strip_start, y=region.start.y),
            end=Position(x=strip_end, y=region.end.y),
        )
        # indices is (y, x); the transpose flattens x-major like positions()
        for position, index in zip(strip.positions(), indices.T.ravel().tolist()):
            blocks.append(Block(position=position, biome=BIOMES[index]))

    return blocks


def generate(
    config: WorldConfig,
    region: Region | None = None,
    noise: NoiseFactory | None = None,
) -> GenerationResult:
    """Generate a region of the world and render it in the configured format.

    Args:
        config: World configuration.
        region: Inclusive region to generate; the whole map when None.
        noise: Optional factory building a noise field from a seed string.

    Returns:
        Ordered list of Block for ``collection`` output, PNG bytes for ``image``.

    Raises:
        RegionOutOfBoundsError: If the region does not fit the map.
    """
    region = resolve_region(config, region)

    logger.info(
        "world_generation_started",
        preset=config.preset.value,
        width=config.width,
        height=config.height,
        region=f"{region.start}-{region.end}",
        output_format=config.output_format.value,
    )
    start_time = time.perf_counter()

    blocks = generate_blocks(config, region, noise)
    result = render(config, blocks)

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        "world_generation_completed",
        block_count=len(blocks),
        duration_ms=round(elapsed_ms, 1),
    )
    logger.debug(
        "biome_distribution",
        **{biome.code: count for biome, count in Counter(b.biome for b in blocks).items()},
    )

    return result


def generate_world(noise: NoiseFactory | None = None, **options: Any) -> GenerationResult:
    """Validate raw options, fill defaults and generate.

    Args:
        noise: Optional factory building a noise field from a seed string.
        **options: Raw options: ``type``, ``size``, ``seed``, ``chunk``, ``format``.

    Returns:
        Generated world in the requested format.

    Raises:
        ConfigurationError: If the options are invalid.
    """
    config, region = resolve_options(**options)
    return generate(config, region, noise)
