"""World configuration: validated options, defaults and TOML loading."""

import secrets
import string
import tomllib
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, Field, StringConstraints, ValidationError, model_validator

from .exceptions import ConfigurationError
from .types import Position, Region, Size

SEED_DIGITS = 30

SeedString = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=1,
        max_length=100,
        pattern=r"^[A-Za-z0-9]+$",
    ),
]


class PresetType(str, Enum):
    """Named landmass shapes."""

    ARCHIPELAGO = "archipelago"
    ORBED_ARCHIPELAGO = "orbedArchipelago"
    DEFAULT = "default"


class OutputFormat(str, Enum):
    """How generated blocks are returned."""

    COLLECTION = "collection"
    IMAGE = "image"

    @classmethod
    def _missing_(cls, value: object) -> "OutputFormat | None":
        # "png" was the original name of the image format
        if value == "png":
            return cls.IMAGE
        return None


class WorldConfig(BaseModel, frozen=True):
    """Fully resolved world configuration consumed by the generator."""

    preset: PresetType = PresetType.DEFAULT
    size: Size = Field(default_factory=Size)
    elevation_seed: SeedString
    moisture_seed: SeedString
    output_format: OutputFormat = OutputFormat.COLLECTION

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height


class SeedOptions(BaseModel):
    """Optional seeds; missing ones are filled with random digit strings."""

    elevation: SeedString | None = None
    moisture: SeedString | None = None


class ChunkBound(BaseModel):
    """One corner of a chunk, 1-indexed."""

    width: int = Field(ge=1, description="Block x coordinate")
    height: int = Field(ge=1, description="Block y coordinate")


class ChunkOptions(BaseModel):
    """Inclusive sub-rectangle of the map to generate."""

    start: ChunkBound
    end: ChunkBound


class WorldOptions(BaseModel):
    """Raw generation options as accepted from callers and config files.

    Unknown keys are ignored.
    """

    type: PresetType = PresetType.ARCHIPELAGO
    size: Size = Field(default_factory=Size)
    seed: SeedOptions = Field(default_factory=SeedOptions)
    chunk: ChunkOptions | None = None
    format: OutputFormat = OutputFormat.COLLECTION

    @model_validator(mode="after")
    def _check_chunk_within_size(self) -> "WorldOptions":
        if self.chunk is None:
            return self
        start, end = self.chunk.start, self.chunk.end
        if end.width > self.size.width or end.height > self.size.height:
            raise ValueError(
                f"chunk end ({end.width}, {end.height}) exceeds size "
                f"{self.size.width}x{self.size.height}"
            )
        if start.width > end.width or start.height > end.height:
            raise ValueError(
                f"chunk start ({start.width}, {start.height}) is after "
                f"end ({end.width}, {end.height})"
            )
        return self

    def region(self) -> Region:
        """Chunk as a Region, or the whole map when no chunk is set."""
        if self.chunk is None:
            return Region.full(self.size)
        return Region(
            start=Position(x=self.chunk.start.width, y=self.chunk.start.height),
            end=Position(x=self.chunk.end.width, y=self.chunk.end.height),
        )


def random_seed(digits: int = SEED_DIGITS) -> str:
    """Generate a random seed made of decimal digits."""
    return "".join(secrets.choice(string.digits) for _ in range(digits))


def resolve_options(**options: Any) -> tuple[WorldConfig, Region]:
    """Validate raw options and fill in defaults.

    Args:
        **options: Option keys ``type``, ``size``, ``seed``, ``chunk`` and
            ``format`` in the nested shape of WorldOptions.

    Returns:
        Tuple of (WorldConfig, Region).

    Raises:
        ConfigurationError: If any option is malformed or out of bounds.
    """
    try:
        parsed = WorldOptions.model_validate(options)
    except ValidationError as e:
        raise ConfigurationError(_describe_errors(e)) from e

    config = WorldConfig(
        preset=parsed.type,
        size=parsed.size,
        elevation_seed=parsed.seed.elevation or random_seed(),
        moisture_seed=parsed.seed.moisture or random_seed(),
        output_format=parsed.format,
    )
    return config, parsed.region()


class WorldgenSettings(BaseModel):
    """Contents of a TOML config file.

    Options live under ``[world]``; an optional top-level ``[chunk]`` table
    selects the region and takes precedence over ``[world.chunk]``.
    """

    world: WorldOptions = Field(default_factory=WorldOptions)
    chunk: ChunkOptions | None = None

    def to_options(self) -> dict[str, Any]:
        """Raw options suitable for ``resolve_options``."""
        options = self.world.model_dump(mode="json", exclude_none=True)
        if self.chunk is not None:
            options["chunk"] = self.chunk.model_dump(mode="json")
        return options


def load_config(config_path: Path) -> WorldgenSettings:
    """Load generation options from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed WorldgenSettings.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ConfigurationError: If the TOML is malformed or the options fail
            validation.
    """
    with open(config_path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {config_path}: {e}") from e
    try:
        return WorldgenSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(_describe_errors(e)) from e


def _describe_errors(error: ValidationError) -> str:
    """Flatten pydantic errors into one line per violated constraint."""
    parts = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "options"
        parts.append(f"{location}: {err['msg']}")
    return "Invalid world options: " + "; ".join(parts)
