# -*- coding: utf-8 -*-
"""
validation.py
Domain rules checked against the inputs and the computed outputs.

Errors mean the configuration cannot be built as specified; warnings are
informational and never make a result unusable.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional

from config import (
    ChipType,
    ConveyorClass,
    ConveyorInputs,
    ConveyorStyle,
    FluidType,
    MaterialType,
    TemperatureClass,
)
from constants import GEOMETRY_LIMITS, HEAVY_DUTY_THRESHOLDS, THROUGHPUT_MARGIN_THRESHOLDS

__all__ = [
    "Severity",
    "ValidationMessage",
    "ValidationReport",
    "validate_inputs",
    "validate_outputs",
    "validate",
    "has_errors",
    "has_warnings",
    "messages_for_field",
    "message_by_code",
]


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class ValidationMessage:
    severity: Severity
    code: str
    message: str
    field: Optional[str] = None

    def to_dict(self):
        return {"severity": self.severity.value, "code": self.code,
                "message": self.message, "field": self.field}


@dataclass(frozen=True)
class ValidationReport:
    warnings: List[ValidationMessage] = field(default_factory=list)
    errors: List[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _error(code, message, fld):
    return ValidationMessage(Severity.ERROR, code, message, fld)


def _warning(code, message, fld):
    return ValidationMessage(Severity.WARNING, code, message, fld)

# ──────────────────────────────────────────────────────────────────────────────
# Input rules
# ──────────────────────────────────────────────────────────────────────────────
def validate_inputs(inputs: ConveyorInputs) -> List[ValidationMessage]:
    msgs: List[ValidationMessage] = []

    # Non-magnetic material
    if inputs.material_type == MaterialType.ALUMINUM:
        msgs.append(_error("INVALID_MATERIAL_ALUMINUM",
                           "Invalid - Aluminum cannot be magnetized", "material_type"))
    if inputs.material_type == MaterialType.STAINLESS_STEEL:
        msgs.append(_error("INVALID_MATERIAL_STAINLESS",
                           "Invalid - Stainless steel cannot be magnetized", "material_type"))

    # Flat conveyors must be style C
    if inputs.style != ConveyorStyle.C:
        if inputs.discharge_height_in == 0:
            msgs.append(_error("STYLE_C_REQUIRED_ZERO_HEIGHT",
                               "Style C required for horizontal-only configuration", "style"))
        if inputs.incline_angle_deg == 0:
            msgs.append(_error("STYLE_C_REQUIRED_ZERO_ANGLE",
                               "Style C required for 0° angle", "style"))

    if inputs.infeed_length_in < GEOMETRY_LIMITS["min_infeed_warning_in"]:
        msgs.append(_warning("CUSTOM_TAIL_TRACKS_REQUIRED",
                             "Custom tail tracks and tail end required", "infeed_length_in"))
    if inputs.belt_speed_fpm > GEOMETRY_LIMITS["max_belt_speed_fpm"]:
        msgs.append(_warning("SPEED_TOO_HIGH", "Material could be flung off", "belt_speed_fpm"))

    if inputs.chip_type in (ChipType.STRINGERS, ChipType.BIRD_NESTS):
        msgs.append(_warning("CHIP_TYPE_BRIDGING",
                             "Poor option due to magnet bridging", "chip_type"))
    if inputs.temperature_class == TemperatureClass.RED_HOT:
        msgs.append(_warning("TEMPERATURE_RED_HOT",
                             "Poor choice for magnetic conveyor", "temperature_class"))
    if inputs.fluid_type == FluidType.OIL_BASED:
        msgs.append(_warning("FLUID_OIL_BASED", "Require SS rigidized cover", "fluid_type"))

    # Suggest Heavy Duty while still on Standard
    if inputs.conveyor_class == ConveyorClass.STANDARD:
        hd = HEAVY_DUTY_THRESHOLDS
        if inputs.magnet_width_in > hd["magnet_width_in"]:
            msgs.append(_warning("CONSIDER_HD_MAGNET_WIDTH",
                                 f'Consider Heavy Duty class for magnet width > {hd["magnet_width_in"]:g}"',
                                 "magnet_width_in"))
        if inputs.load_lbs_per_hr > hd["load_lbs_per_hr"]:
            msgs.append(_warning("CONSIDER_HD_LOAD",
                                 f'Consider Heavy Duty class for load > {hd["load_lbs_per_hr"]:,.0f} lbs/hr',
                                 "load_lbs_per_hr"))
        if inputs.discharge_height_in > hd["discharge_height_in"]:
            msgs.append(_warning("CONSIDER_HD_DISCHARGE_HEIGHT",
                                 f'Consider Heavy Duty class for discharge height > {hd["discharge_height_in"]:g}"',
                                 "discharge_height_in"))
    return msgs

# ──────────────────────────────────────────────────────────────────────────────
# Output rules
# ──────────────────────────────────────────────────────────────────────────────
def _value(outputs: Any, name: str) -> float:
    if isinstance(outputs, Mapping):
        return outputs.get(name, 0.0)
    return getattr(outputs, name, 0.0)


def validate_outputs(inputs: ConveyorInputs, outputs: Any) -> List[ValidationMessage]:
    """*outputs* may be a ConveyorOutputs or a plain dict of output fields."""
    msgs: List[ValidationMessage] = []

    if inputs.conveyor_class == ConveyorClass.STANDARD:
        limit = HEAVY_DUTY_THRESHOLDS["chain_length_in"]
        if _value(outputs, "chain_length_in") > limit:
            msgs.append(_warning("CONSIDER_HD_CHAIN_LENGTH",
                                 f'Consider Heavy Duty class for chain length > {limit:g}"',
                                 "chain_length_in"))

    margin = _value(outputs, "throughput_margin")
    if margin > 0:
        if inputs.chip_type == ChipType.PARTS:
            if margin < THROUGHPUT_MARGIN_THRESHOLDS["parts"]:
                msgs.append(_warning("THROUGHPUT_UNDERSIZED_PARTS",
                                     "Undersized for parts", "throughput_margin"))
        elif margin < THROUGHPUT_MARGIN_THRESHOLDS["chips"]:
            msgs.append(_warning("THROUGHPUT_UNDERSIZED_CHIPS",
                                 "Undersized for chips", "throughput_margin"))
    return msgs

# ──────────────────────────────────────────────────────────────────────────────
def _dedupe(messages: Iterable[ValidationMessage]) -> List[ValidationMessage]:
    seen = set()
    out = []
    for m in messages:
        key = (m.code, m.field)
        if key in seen:
            continue
        seen.add(key)
        out.append(m)
    return out


def validate(inputs: ConveyorInputs, outputs: Any) -> ValidationReport:
    """All rules, at most one message per (code, field), in rule order."""
    messages = _dedupe(validate_inputs(inputs) + validate_outputs(inputs, outputs))
    return ValidationReport(
        warnings=[m for m in messages if m.severity == Severity.WARNING],
        errors=[m for m in messages if m.severity == Severity.ERROR],
    )


def has_errors(messages: Iterable[ValidationMessage]) -> bool:
    return any(m.severity == Severity.ERROR for m in messages)


def has_warnings(messages: Iterable[ValidationMessage]) -> bool:
    return any(m.severity == Severity.WARNING for m in messages)


def messages_for_field(messages: Iterable[ValidationMessage], fld: str) -> List[ValidationMessage]:
    return [m for m in messages if m.field == fld]


def message_by_code(messages: Iterable[ValidationMessage], code: str) -> Optional[ValidationMessage]:
    return next((m for m in messages if m.code == code), None)
