"""Tests for input/output validation rules."""

from __future__ import annotations

from dataclasses import replace

import pytest

from config import (
    ChipType,
    ConveyorClass,
    ConveyorStyle,
    FluidType,
    MaterialType,
    TemperatureClass,
)
from validation import (
    Severity,
    ValidationMessage,
    _dedupe,
    has_errors,
    has_warnings,
    message_by_code,
    messages_for_field,
    validate,
    validate_inputs,
    validate_outputs,
)

GOOD_OUTPUTS = {"chain_length_in": 371.0, "throughput_margin": 1.575}


def _codes(msgs):
    return [m.code for m in msgs]


class TestInputRules:
    def test_clean_inputs(self, standard_inputs):
        assert validate_inputs(standard_inputs) == []

    @pytest.mark.parametrize("material,code", [
        (MaterialType.ALUMINUM, "INVALID_MATERIAL_ALUMINUM"),
        (MaterialType.STAINLESS_STEEL, "INVALID_MATERIAL_STAINLESS"),
    ])
    def test_non_magnetic_material(self, standard_inputs, material, code):
        msgs = validate_inputs(replace(standard_inputs, material_type=material))
        assert _codes(msgs) == [code]
        assert msgs[0].severity == Severity.ERROR
        assert msgs[0].field == "material_type"

    def test_flat_geometry_requires_style_c(self, standard_inputs):
        msgs = validate_inputs(replace(standard_inputs, discharge_height_in=0.0, incline_angle_deg=0.0))
        assert _codes(msgs) == ["STYLE_C_REQUIRED_ZERO_HEIGHT", "STYLE_C_REQUIRED_ZERO_ANGLE"]
        assert all(m.field == "style" for m in msgs)

    def test_zero_angle_alone(self, standard_inputs):
        msgs = validate_inputs(replace(standard_inputs, incline_angle_deg=0.0))
        assert _codes(msgs) == ["STYLE_C_REQUIRED_ZERO_ANGLE"]

    def test_style_c_flat_is_fine(self, standard_inputs):
        inputs = replace(standard_inputs, style=ConveyorStyle.C,
                         discharge_height_in=0.0, incline_angle_deg=0.0)
        assert validate_inputs(inputs) == []

    @pytest.mark.parametrize("changes,code,field", [
        ({"infeed_length_in": 30.0}, "CUSTOM_TAIL_TRACKS_REQUIRED", "infeed_length_in"),
        ({"belt_speed_fpm": 121.0}, "SPEED_TOO_HIGH", "belt_speed_fpm"),
        ({"chip_type": ChipType.STRINGERS}, "CHIP_TYPE_BRIDGING", "chip_type"),
        ({"chip_type": ChipType.BIRD_NESTS}, "CHIP_TYPE_BRIDGING", "chip_type"),
        ({"temperature_class": TemperatureClass.RED_HOT}, "TEMPERATURE_RED_HOT", "temperature_class"),
        ({"fluid_type": FluidType.OIL_BASED}, "FLUID_OIL_BASED", "fluid_type"),
        ({"magnet_width_in": 30.0}, "CONSIDER_HD_MAGNET_WIDTH", "magnet_width_in"),
        ({"load_lbs_per_hr": 6000.0}, "CONSIDER_HD_LOAD", "load_lbs_per_hr"),
        ({"discharge_height_in": 250.0}, "CONSIDER_HD_DISCHARGE_HEIGHT", "discharge_height_in"),
    ])
    def test_warning_rules(self, standard_inputs, changes, code, field):
        msgs = validate_inputs(replace(standard_inputs, **changes))
        assert _codes(msgs) == [code]
        assert msgs[0].severity == Severity.WARNING
        assert msgs[0].field == field

    def test_thresholds_are_exclusive(self, standard_inputs):
        inputs = replace(standard_inputs, infeed_length_in=39.0, belt_speed_fpm=120.0,
                         magnet_width_in=24.0, load_lbs_per_hr=5000.0, discharge_height_in=200.0)
        assert validate_inputs(inputs) == []

    def test_heavy_duty_not_nagged(self, heavy_duty_inputs):
        inputs = replace(heavy_duty_inputs, magnet_width_in=30.0, load_lbs_per_hr=9000.0,
                         discharge_height_in=300.0)
        assert validate_inputs(inputs) == []


class TestOutputRules:
    def test_clean_outputs(self, standard_inputs):
        assert validate_outputs(standard_inputs, GOOD_OUTPUTS) == []

    def test_long_chain_on_standard(self, standard_inputs, heavy_duty_inputs):
        outputs = dict(GOOD_OUTPUTS, chain_length_in=600.0)
        assert _codes(validate_outputs(standard_inputs, outputs)) == ["CONSIDER_HD_CHAIN_LENGTH"]
        assert validate_outputs(heavy_duty_inputs, outputs) == []

    def test_undersized_for_chips(self, standard_inputs):
        msgs = validate_outputs(standard_inputs, dict(GOOD_OUTPUTS, throughput_margin=1.4))
        assert _codes(msgs) == ["THROUGHPUT_UNDERSIZED_CHIPS"]

    def test_parts_threshold(self, standard_inputs):
        parts = replace(standard_inputs, chip_type=ChipType.PARTS)
        assert validate_outputs(parts, dict(GOOD_OUTPUTS, throughput_margin=1.4)) == []
        msgs = validate_outputs(parts, dict(GOOD_OUTPUTS, throughput_margin=1.2))
        assert _codes(msgs) == ["THROUGHPUT_UNDERSIZED_PARTS"]

    def test_zero_margin_not_flagged(self, standard_inputs):
        assert validate_outputs(standard_inputs, dict(GOOD_OUTPUTS, throughput_margin=0.0)) == []

    def test_accepts_attribute_objects(self, standard_inputs):
        class Out:
            chain_length_in = 800.0
            throughput_margin = 2.0
        assert _codes(validate_outputs(standard_inputs, Out())) == ["CONSIDER_HD_CHAIN_LENGTH"]


class TestValidate:
    def test_report_split(self, standard_inputs):
        inputs = replace(standard_inputs, material_type=MaterialType.ALUMINUM, belt_speed_fpm=150.0)
        report = validate(inputs, dict(GOOD_OUTPUTS, throughput_margin=1.1))
        assert _codes(report.errors) == ["INVALID_MATERIAL_ALUMINUM"]
        assert _codes(report.warnings) == ["SPEED_TOO_HIGH", "THROUGHPUT_UNDERSIZED_CHIPS"]
        assert not report.is_valid

    def test_warnings_do_not_invalidate(self, standard_inputs):
        report = validate(replace(standard_inputs, fluid_type=FluidType.OIL_BASED), GOOD_OUTPUTS)
        assert report.is_valid
        assert len(report.warnings) == 1

    def test_idempotent_and_order_stable(self, standard_inputs):
        inputs = replace(standard_inputs, chip_type=ChipType.BIRD_NESTS, infeed_length_in=10.0,
                         temperature_class=TemperatureClass.RED_HOT,
                         conveyor_class=ConveyorClass.STANDARD, magnet_width_in=30.0)
        outputs = dict(GOOD_OUTPUTS, chain_length_in=900.0, throughput_margin=1.2)
        first = validate(inputs, outputs)
        second = validate(inputs, outputs)
        assert first == second
        assert _codes(first.warnings) == _codes(second.warnings)

    def test_dedupe_keeps_first(self):
        a = ValidationMessage(Severity.WARNING, "X", "first", "f")
        b = ValidationMessage(Severity.WARNING, "X", "second", "f")
        c = ValidationMessage(Severity.WARNING, "X", "other field", "g")
        assert _dedupe([a, b, c]) == [a, c]


class TestHelpers:
    @pytest.fixture
    def messages(self):
        return [
            ValidationMessage(Severity.ERROR, "E1", "bad", "style"),
            ValidationMessage(Severity.WARNING, "W1", "meh", "chip_type"),
            ValidationMessage(Severity.WARNING, "W2", "meh too", "style"),
        ]

    def test_has(self, messages):
        assert has_errors(messages)
        assert has_warnings(messages)
        assert not has_errors(messages[1:])
        assert not has_warnings([])

    def test_for_field(self, messages):
        assert _codes(messages_for_field(messages, "style")) == ["E1", "W2"]

    def test_by_code(self, messages):
        assert message_by_code(messages, "W1").field == "chip_type"
        assert message_by_code(messages, "nope") is None

    def test_to_dict(self, messages):
        assert messages[0].to_dict() == {"severity": "error", "code": "E1",
                                         "message": "bad", "field": "style"}
