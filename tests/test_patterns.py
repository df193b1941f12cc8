"""Tests for bar repetition patterns."""

from __future__ import annotations

import logging

import pytest

import patterns
from bar_builder import build_bar_template
from config import PatternMode
from patterns import (
    DEFAULT_PATTERNS,
    PatternConfig,
    apply_pattern,
    calculate_bar_counts,
    calculate_conveyor_capacity,
    calculate_conveyor_capacity_from_values,
    describe_pattern,
    preview_pattern,
    validate_pattern,
)


@pytest.fixture
def templates(ceramic_id, sweeper_id):
    return {
        "std": build_bar_template(12.0, [(ceramic_id, 3)], name="Standard 12"),
        "sweep": build_bar_template(12.0, [(sweeper_id, 4)], name="Sweeper 12"),
    }


class TestApplyPattern:
    def test_interval_every_fourth(self):
        cfg = PatternConfig(PatternMode.INTERVAL, "A", "B", 4)
        seq = apply_pattern(cfg, 12)["sequence"]
        secondary = [i for i, t in enumerate(seq, 1) if t == "B"]
        assert secondary == [4, 8, 12]
        assert seq.count("A") == 9

    def test_alternating(self):
        cfg = PatternConfig(PatternMode.ALTERNATING, "A", "B")
        assert apply_pattern(cfg, 5)["sequence"] == ["A", "B", "A", "B", "A"]

    def test_alternating_without_secondary(self):
        res = apply_pattern(PatternConfig(PatternMode.ALTERNATING, "A"), 4)
        assert res == {"sequence": ["A"] * 4, "primary_count": 4, "secondary_count": 0}

    def test_all_same_ignores_secondary(self):
        res = apply_pattern(PatternConfig(PatternMode.ALL_SAME, "A", "B"), 3)
        assert res["sequence"] == ["A", "A", "A"]

    @pytest.mark.parametrize("total", [0, -3])
    def test_empty(self, total):
        res = apply_pattern(PatternConfig(PatternMode.INTERVAL, "A", "B"), total)
        assert res == {"sequence": [], "primary_count": 0, "secondary_count": 0}

    def test_interval_below_one_places_no_secondary(self):
        res = apply_pattern(PatternConfig(PatternMode.INTERVAL, "A", "B", 0), 6)
        assert res["secondary_count"] == 0

    def test_string_mode(self):
        res = apply_pattern(PatternConfig("alternating", "A", "B"), 2)
        assert res["sequence"] == ["A", "B"]

    @pytest.mark.parametrize("mode", list(PatternMode))
    @pytest.mark.parametrize("secondary", [None, "B"])
    def test_counts_add_up(self, mode, secondary):
        for interval in (1, 2, 3, 4, 7):
            cfg = PatternConfig(mode, "A", secondary, interval)
            for total in range(0, 30):
                res = apply_pattern(cfg, total)
                assert res["primary_count"] + res["secondary_count"] == total
                assert len(res["sequence"]) == total

    def test_bar_counts(self):
        cfg = DEFAULT_PATTERNS["sweeper_every_4th"]("A", "B")
        assert calculate_bar_counts(cfg, 29) == {"primary": 22, "secondary": 7}


class TestConveyorCapacity:
    def test_totals(self, templates):
        cfg = PatternConfig(PatternMode.INTERVAL, "std", "sweep", 4)
        res = calculate_conveyor_capacity(cfg, 12, templates)
        std = 3 * 0.1207
        sweep = 4 * 0.08
        assert res["total_capacity_lb"] == pytest.approx(9 * std + 3 * sweep)
        assert res["capacity_per_bar_avg"] == pytest.approx(res["total_capacity_lb"] / 12)
        assert res["primary_bar_count"] == 9
        assert res["secondary_bar_count"] == 3
        assert res["bar_sequence"][3] == {
            "position": 4,
            "template_id": "sweep",
            "template_name": "Sweeper 12",
            "capacity_lb": pytest.approx(sweep),
        }

    def test_capacity_cached_per_template(self, templates, monkeypatch):
        calls = []
        real = patterns.calculate_bar_capacity

        def counting(template):
            calls.append(template.name)
            return real(template)

        monkeypatch.setattr(patterns, "calculate_bar_capacity", counting)
        calculate_conveyor_capacity(PatternConfig(PatternMode.ALTERNATING, "std", "sweep"),
                                    40, templates)
        assert sorted(calls) == ["Standard 12", "Sweeper 12"]

    def test_missing_template_counts_zero(self, templates, caplog):
        cfg = PatternConfig(PatternMode.ALTERNATING, "std", "ghost")
        with caplog.at_level(logging.WARNING):
            res = calculate_conveyor_capacity(cfg, 4, templates)
        assert res["bar_sequence"][1]["template_name"] == "Unknown"
        assert res["bar_sequence"][1]["capacity_lb"] == 0.0
        assert res["total_capacity_lb"] == pytest.approx(2 * 3 * 0.1207)
        assert "ghost" in caplog.text

    def test_zero_bars(self, templates):
        res = calculate_conveyor_capacity(PatternConfig(PatternMode.ALL_SAME, "std"), 0, templates)
        assert res["total_capacity_lb"] == 0.0
        assert res["capacity_per_bar_avg"] == 0.0
        assert res["bar_sequence"] == []

    def test_from_values(self):
        cfg = PatternConfig(PatternMode.INTERVAL, "A", "B", 4)
        res = calculate_conveyor_capacity_from_values(cfg, 12, 1.0, 0.5)
        assert res["total_capacity_lb"] == pytest.approx(10.5)
        assert res["capacity_per_bar_avg"] == pytest.approx(0.875)

    def test_from_values_zero_bars(self):
        res = calculate_conveyor_capacity_from_values(PatternConfig(PatternMode.ALL_SAME, "A"), 0, 1.0)
        assert res == {"total_capacity_lb": 0.0, "capacity_per_bar_avg": 0.0}


class TestValidatePattern:
    def test_primary_required(self):
        res = validate_pattern(PatternConfig(PatternMode.ALL_SAME, ""))
        assert not res.valid

    def test_unknown_templates(self, templates):
        res = validate_pattern(PatternConfig(PatternMode.ALTERNATING, "nope", "also_nope"), templates)
        assert len(res.errors) == 2

    @pytest.mark.parametrize("mode", [PatternMode.ALTERNATING, PatternMode.INTERVAL])
    def test_missing_secondary_is_warning(self, mode):
        res = validate_pattern(PatternConfig(mode, "A"))
        assert res.valid
        assert len(res.warnings) == 1

    def test_interval_below_two(self):
        res = validate_pattern(PatternConfig(PatternMode.INTERVAL, "A", "B", 1))
        assert res.errors == ["Interval must be at least 2"]

    def test_valid(self, templates):
        res = validate_pattern(DEFAULT_PATTERNS["alternating"]("std", "sweep"), templates)
        assert res.valid
        assert res.warnings == []


class TestDisplayHelpers:
    def test_describe(self, templates):
        assert describe_pattern(DEFAULT_PATTERNS["all_ceramic"]("std"), templates) == "All bars: Standard 12"
        assert (describe_pattern(DEFAULT_PATTERNS["alternating"]("std", "sweep"), templates)
                == "Alternating: Standard 12 / Sweeper 12")
        assert (describe_pattern(DEFAULT_PATTERNS["sweeper_every_4th"]("std", "sweep"), templates)
                == "Standard 12, with Sweeper 12 every 4 bars")

    def test_describe_without_templates(self):
        assert describe_pattern(PatternConfig(PatternMode.INTERVAL, "A")) == "All bars: Primary"

    def test_preview(self):
        preview = preview_pattern(PatternConfig(PatternMode.INTERVAL, "A", "B", 4))
        assert len(preview) == 8
        assert [p["position"] for p in preview if not p["is_primary"]] == [4, 8]

    def test_default_patterns(self):
        cfg = DEFAULT_PATTERNS["sweeper_every_4th"]("A", "S")
        assert cfg.mode == PatternMode.INTERVAL
        assert cfg.interval_count == 4
        assert DEFAULT_PATTERNS["all_ceramic"]("A").secondary_template_id is None
