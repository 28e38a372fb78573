"""Rendering generated blocks as a collection or a PNG image."""

import base64
from io import BytesIO

import numpy as np
import structlog
from numpy.typing import NDArray
from PIL import Image

from .biomes import BIOMES
from .config import OutputFormat, WorldConfig
from .exceptions import ConfigurationError
from .types import Block

logger = structlog.get_logger()

GenerationResult = list[Block] | bytes

# Normalized RGBA per catalog index
PALETTE: NDArray[np.float32] = np.array([biome.color for biome in BIOMES], dtype=np.float32)


def render(
    config: WorldConfig,
    blocks: list[Block],
    output_format: OutputFormat | str | None = None,
) -> GenerationResult:
    """Render blocks in the requested format.

    Args:
        config: World configuration the blocks were generated from.
        blocks: Generated blocks in generator order.
        output_format: Overrides ``config.output_format`` when given.

    Returns:
        The block list unchanged for ``collection``, PNG bytes for ``image``.

    Raises:
        ConfigurationError: If ``output_format`` names no known format.
    """
    if output_format is None:
        fmt = config.output_format
    else:
        try:
            fmt = OutputFormat(output_format)
        except ValueError as e:
            raise ConfigurationError(f"Unknown output format: {output_format!r}") from e

    if fmt == OutputFormat.COLLECTION:
        return blocks

    png = encode_png(build_pixel_buffer(config, blocks))
    logger.debug(
        "map_image_encoded",
        width=config.width,
        height=config.height,
        size_bytes=len(png),
    )
    return png


def build_pixel_buffer(config: WorldConfig, blocks: list[Block]) -> NDArray[np.float32]:
    """Paint block colors into a full-map RGBA buffer.

    The block at (x, y) lands on pixel column x-1, row y-1. Pixels not
    covered by any block, such as those outside a rendered chunk, stay
    transparent (all zeros). Blocks outside the map are skipped.

    Args:
        config: World configuration; its size sets the buffer size.
        blocks: Blocks to paint.

    Returns:
        Float32 array of shape (height, width, 4) with channels in [0, 1].
    """
    width, height = config.width, config.height
    buffer = np.zeros((height, width, 4), dtype=np.float32)
    if not blocks:
        return buffer

    xs = np.array([block.position.x for block in blocks], dtype=np.intp)
    ys = np.array([block.position.y for block in blocks], dtype=np.intp)
    indices = np.array([block.biome.catalog_index for block in blocks], dtype=np.intp)

    inside = (xs >= 1) & (xs <= width) & (ys >= 1) & (ys <= height)
    buffer[ys[inside] - 1, xs[inside] - 1] = PALETTE[indices[inside]]
    return buffer


def encode_png(buffer: NDArray[np.float32]) -> bytes:
    """Encode a normalized RGBA buffer as PNG.

    Args:
        buffer: Array of shape (height, width, 4) with channels in [0, 1].

    Returns:
        PNG file contents.
    """
    rgba = np.clip(np.round(buffer * 255), 0, 255).astype(np.uint8)
    image = Image.fromarray(rgba)

    output = BytesIO()
    image.save(output, format="PNG")
    return output.getvalue()


def to_data_url(png: bytes) -> str:
    """Wrap PNG bytes in a base64 data URL."""
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")
