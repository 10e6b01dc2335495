"""Tests for the fixed brew schedule: presets, steps, lookup, formatting."""

from __future__ import annotations

import dataclasses

import pytest

from brewguide.timer.schedule import (
    DEFAULT_PRESET,
    NO_ACTIVE_STEP,
    TOTAL_DURATION,
    Preset,
    Step,
    active_step_index,
    build_steps,
    format_time,
)


# ═══════════════════════════════════════════════════════════════════════════
#  PRESETS
# ═══════════════════════════════════════════════════════════════════════════


class TestPresets:

    def test_15g_water_targets(self):
        w = Preset.BEANS_15G.water
        assert w.pours == (35, 90, 150, 225)
        assert w.total == 225

    def test_20g_water_targets(self):
        w = Preset.BEANS_20G.water
        assert w.pours == (45, 120, 200, 300)
        assert w.total == 300

    def test_preset_from_grams(self):
        assert Preset(15) is Preset.BEANS_15G
        assert Preset(20) is Preset.BEANS_20G

    def test_unknown_grams_rejected(self):
        with pytest.raises(ValueError):
            Preset(18)

    def test_default_is_20g(self):
        assert DEFAULT_PRESET is Preset.BEANS_20G

    def test_labels(self):
        assert Preset.BEANS_15G.label == "15g"
        assert Preset.BEANS_20G.grams == 20


# ═══════════════════════════════════════════════════════════════════════════
#  STEP TABLE
# ═══════════════════════════════════════════════════════════════════════════


class TestStepTable:

    @pytest.mark.parametrize("preset", list(Preset))
    def test_six_steps(self, preset):
        assert len(build_steps(preset)) == 6

    @pytest.mark.parametrize("preset", list(Preset))
    def test_offsets_strictly_increasing_from_zero(self, preset):
        offsets = [s.offset_seconds for s in build_steps(preset)]
        assert offsets == [0, 40, 90, 130, 165, 210]
        assert offsets[0] == 0
        assert all(a < b for a, b in zip(offsets, offsets[1:]))

    def test_last_step_at_total_duration(self):
        assert build_steps(DEFAULT_PRESET)[-1].offset_seconds == TOTAL_DURATION

    def test_numbers_are_one_based(self):
        assert [s.number for s in build_steps(DEFAULT_PRESET)] == [1, 2, 3, 4, 5, 6]

    def test_descriptions_use_20g_water(self):
        steps = build_steps(Preset.BEANS_20G)
        assert "45g" in steps[0].description
        assert "120g" in steps[1].description
        assert "200g" in steps[2].description
        assert "300g" in steps[3].description

    def test_descriptions_use_15g_water(self):
        steps = build_steps(Preset.BEANS_15G)
        assert "35g" in steps[0].description
        assert "90g" in steps[1].description
        assert "150g" in steps[2].description
        assert "225g" in steps[3].description

    def test_presets_share_titles_and_actions(self):
        a = build_steps(Preset.BEANS_15G)
        b = build_steps(Preset.BEANS_20G)
        assert [s.title for s in a] == [s.title for s in b]
        assert [s.action_label for s in a] == [s.action_label for s in b]

    def test_steps_are_immutable(self):
        step = build_steps(DEFAULT_PRESET)[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.offset_seconds = 5  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════
#  ACTIVE STEP LOOKUP
# ═══════════════════════════════════════════════════════════════════════════


class TestActiveStepIndex:

    @pytest.fixture
    def steps(self):
        return build_steps(DEFAULT_PRESET)

    @pytest.mark.parametrize(
        "elapsed, expected",
        [(0, 0), (39, 0), (40, 1), (89, 1), (90, 2), (129, 2),
         (130, 3), (164, 3), (165, 4), (209, 4), (210, 5)],
    )
    def test_boundaries(self, steps, elapsed, expected):
        assert active_step_index(elapsed, steps) == expected

    def test_matches_interval_definition_everywhere(self, steps):
        for elapsed in range(TOTAL_DURATION):
            i = active_step_index(elapsed, steps)
            assert steps[i].offset_seconds <= elapsed
            if i + 1 < len(steps):
                assert elapsed < steps[i + 1].offset_seconds

    def test_monotonic(self, steps):
        indices = [active_step_index(t, steps) for t in range(TOTAL_DURATION + 1)]
        assert indices == sorted(indices)

    def test_no_active_step_before_first_offset(self):
        late_start = (Step(1, 10, "a", "", ""), Step(2, 20, "b", "", ""))
        assert active_step_index(5, late_start) == NO_ACTIVE_STEP

    def test_empty_table(self):
        assert active_step_index(100, ()) == NO_ACTIVE_STEP


# ═══════════════════════════════════════════════════════════════════════════
#  TIME FORMATTING
# ═══════════════════════════════════════════════════════════════════════════


class TestFormatTime:

    @pytest.mark.parametrize(
        "seconds, text",
        [(0, "0:00"), (5, "0:05"), (60, "1:00"), (65, "1:05"),
         (185, "3:05"), (210, "3:30"), (600, "10:00")],
    )
    def test_format(self, seconds, text):
        assert format_time(seconds) == text

    def test_negative_clamped(self):
        assert format_time(-3) == "0:00"
