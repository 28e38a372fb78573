"""Tests for preset profiles."""

import pytest

from worldgen.config import PresetType
from worldgen.terrain.presets import (
    MOISTURE,
    NOISE_ZOOM,
    OCTAVE_FREQUENCIES,
    PRESETS,
    get_preset,
)


class TestPresetTable:
    """Tests for the preset strategy table."""

    def test_every_preset_has_profile(self) -> None:
        """Each preset name has a profile."""
        for preset in PresetType:
            assert get_preset(preset) is PRESETS[preset]

    def test_octave_frequencies(self) -> None:
        """Octaves double from 1 to 32."""
        assert OCTAVE_FREQUENCIES == (1, 2, 4, 8, 16, 32)
        assert NOISE_ZOOM == 4

    def test_elevation_weights_shared(self) -> None:
        """All presets share the elevation weights."""
        for profile in PRESETS.values():
            assert profile.elevation.weights == (1.4, 0.74, 0.0, 0.29, 0.0, 0.02)
            assert len(profile.elevation.weights) == len(OCTAVE_FREQUENCIES)

    def test_elevation_divisor_is_fixed_literal(self) -> None:
        """Divisor is 2.03, not the 2.45 the weights sum to."""
        for profile in PRESETS.values():
            assert profile.elevation.divisor == pytest.approx(2.03)
            assert profile.elevation.divisor != pytest.approx(sum(profile.elevation.weights))

    def test_moisture_divisor_is_weight_sum(self) -> None:
        """Moisture is normalized by its weight sum."""
        assert MOISTURE.weights == (1.0, 0.75, 0.33, 0.33, 0.33, 0.5)
        assert MOISTURE.divisor == pytest.approx(3.24)
        for profile in PRESETS.values():
            assert profile.moisture == MOISTURE

    def test_exponents(self) -> None:
        """Archipelago uses exponent 7, the others 4."""
        assert get_preset(PresetType.ARCHIPELAGO).exponent == 7
        assert get_preset(PresetType.ORBED_ARCHIPELAGO).exponent == 4
        assert get_preset(PresetType.DEFAULT).exponent == 4

    def test_archipelago_attenuation_stacks_two_rules(self) -> None:
        """Archipelago carries both penalty rules."""
        rules = get_preset(PresetType.ARCHIPELAGO).attenuation
        assert [(r.threshold, r.factor) for r in rules] == [(0.35, 4), (0.45, 18)]

    def test_other_presets_single_rule(self) -> None:
        """Other presets carry only the outer rule."""
        for preset in (PresetType.ORBED_ARCHIPELAGO, PresetType.DEFAULT):
            rules = get_preset(preset).attenuation
            assert [(r.threshold, r.factor) for r in rules] == [(0.45, 18)]
