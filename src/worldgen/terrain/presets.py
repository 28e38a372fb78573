"""Preset profiles: octave weighting, shaping exponent and border attenuation.

Every preset shares the same field arithmetic; a preset only chooses the
numbers fed into it.
"""

from pydantic import BaseModel, Field

from ..config import PresetType

# Coordinate scale applied to every octave frequency
NOISE_ZOOM = 4

OCTAVE_FREQUENCIES: tuple[int, ...] = (1, 2, 4, 8, 16, 32)


class OctaveProfile(BaseModel, frozen=True):
    """Weights for summing noise octaves, and the normalizing divisor."""

    weights: tuple[float, ...] = Field(description="Weight per octave frequency")
    divisor: float = Field(description="Divides the weighted sum")


class Attenuation(BaseModel, frozen=True):
    """Linear elevation penalty past a normalized distance from the center."""

    threshold: float = Field(description="Distance where the penalty begins")
    factor: float = Field(description="Penalty per unit of distance past threshold")


class PresetProfile(BaseModel, frozen=True):
    """Complete field shaping for one preset."""

    elevation: OctaveProfile
    exponent: int = Field(description="Power applied to normalized elevation")
    attenuation: tuple[Attenuation, ...] = Field(
        description="Border penalties; all matching rules stack"
    )
    moisture: OctaveProfile


# The elevation divisor is a fixed literal shared by all presets. It does not
# equal the weight sum (0.72 vs 0.74 in the second octave).
ELEVATION = OctaveProfile(
    weights=(1.4, 0.74, 0.0, 0.29, 0.0, 0.02),
    divisor=1.0 + 0.72 + 0.0 + 0.29 + 0.0 + 0.02,
)

MOISTURE = OctaveProfile(
    weights=(1.0, 0.75, 0.33, 0.33, 0.33, 0.5),
    divisor=1.0 + 0.75 + 0.33 + 0.33 + 0.33 + 0.5,
)

_OUTER_EDGE = Attenuation(threshold=0.45, factor=18)

PRESETS: dict[PresetType, PresetProfile] = {
    PresetType.ARCHIPELAGO: PresetProfile(
        elevation=ELEVATION,
        exponent=7,
        attenuation=(Attenuation(threshold=0.35, factor=4), _OUTER_EDGE),
        moisture=MOISTURE,
    ),
    PresetType.ORBED_ARCHIPELAGO: PresetProfile(
        elevation=ELEVATION,
        exponent=4,
        attenuation=(_OUTER_EDGE,),
        moisture=MOISTURE,
    ),
    PresetType.DEFAULT: PresetProfile(
        elevation=ELEVATION,
        exponent=4,
        attenuation=(_OUTER_EDGE,),
        moisture=MOISTURE,
    ),
}


def get_preset(preset: PresetType) -> PresetProfile:
    """Look up the profile for a preset."""
    return PRESETS[preset]
