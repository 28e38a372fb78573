"""Shared test fixtures for worldgen tests."""

import tempfile
from pathlib import Path

import numpy as np
import pytest
import structlog

from worldgen.config import OutputFormat, PresetType, WorldConfig
from worldgen.types import Size


class ConstantNoise:
    """Noise field returning the same value everywhere."""

    def __init__(self, value: float):
        self.value = value

    def sample(self, x: float, y: float) -> float:
        return self.value

    def sample_grid(self, xs, ys):
        return np.full((len(ys), len(xs)), self.value, dtype=np.float64)


class RecordingNoise(ConstantNoise):
    """Constant noise field that records every grid it was asked to sample."""

    def __init__(self, value: float = 0.0):
        super().__init__(value)
        self.calls: list[tuple[np.ndarray, np.ndarray]] = []

    def sample_grid(self, xs, ys):
        self.calls.append((np.array(xs), np.array(ys)))
        return super().sample_grid(xs, ys)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def constant_noise():
    """Factory for noise factories that ignore the seed and return a constant."""

    def make(value: float):
        return lambda seed: ConstantNoise(value)

    return make


@pytest.fixture
def seeded_noise():
    """Factory for noise factories that map each seed string to a constant."""

    def make(values: dict[str, float]):
        return lambda seed: ConstantNoise(values[seed])

    return make


@pytest.fixture
def recording_noise():
    """Noise factory keeping one RecordingNoise per seed, exposed as .fields."""

    fields: dict[str, RecordingNoise] = {}

    def factory(seed: str) -> RecordingNoise:
        fields[seed] = RecordingNoise()
        return fields[seed]

    factory.fields = fields  # type: ignore[attr-defined]
    return factory


@pytest.fixture
def small_config() -> WorldConfig:
    """10x10 default-preset world with fixed seeds."""
    return WorldConfig(
        preset=PresetType.DEFAULT,
        size=Size(width=10, height=10),
        elevation_seed="a1",
        moisture_seed="b2",
    )


@pytest.fixture
def image_config(small_config: WorldConfig) -> WorldConfig:
    """Same world as small_config, rendered as an image."""
    return small_config.model_copy(update={"output_format": OutputFormat.IMAGE})


@pytest.fixture
def sample_config_toml() -> str:
    """Sample world options as TOML."""
    return """
[world]
type = "orbedArchipelago"
format = "collection"

[world.size]
width = 6
height = 4

[world.seed]
elevation = "alpha1"
moisture = "beta2"

[chunk.start]
width = 2
height = 1

[chunk.end]
width = 4
height = 3
"""


@pytest.fixture
def config_file(temp_dir: Path, sample_config_toml: str) -> Path:
    """Write the sample TOML to a temporary file."""
    config_path = temp_dir / "world.toml"
    config_path.write_text(sample_config_toml)
    return config_path
