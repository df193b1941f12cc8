# -*- coding: utf-8 -*-
"""
formulas.py – Magnetic conveyor master calculation
==================================================

`calculate(inputs)` runs the fixed pipeline

    parameters → geometry → magnets → bar capacity → throughput
               → loads → drive → validation

and returns one immutable `ConveyorOutputs`. Throughput has to run before
loads because the resting chip load is part of the total load.

No step raises for in-domain numbers: degenerate values propagate as zeros
and domain problems come back as validation messages.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from bar_builder import calculate_bar_capacity_from_counts
from config import BarConfiguration, ConveyorInputs, PatternMode
from drive_utils import calculate_drive
from geometry import calculate_geometry
from loads import calculate_loads
from magnets import calculate_magnets
from parameters import resolve_parameters
from patterns import PatternConfig, calculate_conveyor_capacity_from_values
from throughput import calculate_throughput, estimate_ceramic_count
from validation import ValidationMessage, validate

logger = logging.getLogger(__name__)

__all__ = [
    "ConveyorOutputs",
    "get_bar_capacity",
    "calculate_conveyor_total_capacity",
    "calculate",
]


@dataclass(frozen=True)
class ConveyorOutputs:
    # Geometry
    incline_length_in: float
    incline_run_in: float
    horizontal_length_in: float
    path_length_ft: float
    belt_length_ft: float
    chain_length_in: float
    # Magnets
    magnet_weight_each_lb: float
    qty_magnets: int
    total_magnet_weight_lb: float
    # Loads
    weight_per_foot_lb: float
    belt_pull_friction_lb: float
    belt_pull_gravity_lb: float
    chip_load_lb: float
    total_load_lb: float
    # Drive
    total_belt_pull_lb: float
    running_torque_in_lb: float
    total_torque_in_lb: float
    required_rpm: float
    suggested_gear_ratio: float
    # Throughput
    achieved_throughput_lbs_hr: float
    throughput_margin: float
    # Bar
    bar_capacity_lb: float
    bar_ceramic_count: int
    bar_neo_count: int
    # Parameters actually used
    coefficient_of_friction_used: float
    safety_factor_used: float
    starting_belt_pull_lb_used: float
    chain_weight_lb_per_ft_used: float
    bar_pattern_mode: Optional[PatternMode] = None
    total_conveyor_capacity_lb: Optional[float] = None
    warnings: Tuple[ValidationMessage, ...] = ()
    errors: Tuple[ValidationMessage, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict; enums become their values, messages become dicts."""
        out: Dict[str, Any] = {}
        for f in fields(self):
            val = getattr(self, f.name)
            if isinstance(val, Enum):
                val = val.value
            elif f.name in ("warnings", "errors"):
                val = [m.to_dict() for m in val]
            out[f.name] = val
        out["is_valid"] = self.is_valid
        return out

# ──────────────────────────────────────────────────────────────────────────────
# Bar capacity
# ──────────────────────────────────────────────────────────────────────────────
def get_bar_capacity(bar_config: Optional[BarConfiguration],
                     magnet_width_in: float) -> Dict[str, float]:
    """
    Capacity per bar from the bar configuration, or from a ceramic-only bar
    sized to the magnet width when none (or a zero capacity) is given.
    """
    if bar_config is not None and bar_config.bar_capacity_lb > 0:
        return {
            "capacity": bar_config.bar_capacity_lb,
            "ceramic_count": bar_config.ceramic_count,
            "neo_count": bar_config.neo_count,
        }

    ceramic = estimate_ceramic_count(magnet_width_in)
    return {
        "capacity": calculate_bar_capacity_from_counts(ceramic, 0, magnet_width_in),
        "ceramic_count": ceramic,
        "neo_count": 0,
    }


def calculate_conveyor_total_capacity(bar_config: Optional[BarConfiguration],
                                      qty_magnets: int) -> float:
    """Pattern-weighted capacity of every bar on the belt [lb]; 0 without a bar config."""
    if bar_config is None or bar_config.bar_capacity_lb <= 0:
        return 0.0

    mode = PatternMode(bar_config.pattern_mode)
    secondary = bar_config.secondary_bar_capacity_lb
    if secondary is None:
        secondary = bar_config.bar_capacity_lb

    pattern = PatternConfig(
        mode=mode,
        primary_template_id="primary",
        secondary_template_id=None if mode == PatternMode.ALL_SAME else "secondary",
        interval_count=bar_config.interval_count,
    )
    result = calculate_conveyor_capacity_from_values(
        pattern, qty_magnets, bar_config.bar_capacity_lb, secondary)
    return result["total_capacity_lb"]

# ──────────────────────────────────────────────────────────────────────────────
# Master calculation
# ──────────────────────────────────────────────────────────────────────────────
def calculate(inputs: ConveyorInputs) -> ConveyorOutputs:
    params = resolve_parameters(inputs)
    logger.debug(f"parameters: {params}")

    angle = inputs.effective_angle_deg
    geo = calculate_geometry(
        inputs.infeed_length_in,
        inputs.effective_height_in,
        angle,
        inputs.effective_discharge_length_in,
        params.chain_pitch_in,
    )
    logger.debug(f"geometry: {geo}")

    mag = calculate_magnets(inputs.magnet_width_in, geo["belt_length_ft"], inputs.magnet_centers_in)
    logger.debug(f"magnets: {mag}")

    bar = get_bar_capacity(inputs.bar_configuration, inputs.magnet_width_in)
    total_capacity = calculate_conveyor_total_capacity(inputs.bar_configuration, mag["qty_magnets"])
    logger.debug(f"bar: {bar}, conveyor capacity {total_capacity:.3f} lb")

    tput = calculate_throughput(
        mag["qty_magnets"],
        inputs.belt_speed_fpm,
        inputs.magnet_centers_in,
        inputs.load_lbs_per_hr,
        bar["capacity"],
    )
    logger.debug(f"throughput: {tput}")

    loads = calculate_loads(
        params.chain_weight_lb_per_ft,
        mag["total_magnet_weight_lb"],
        geo["belt_length_ft"],
        geo["incline_length_in"],
        angle,
        params.coefficient_of_friction,
        tput["chip_load_lb"],
    )
    logger.debug(f"loads: {loads}")

    drive = calculate_drive(
        params.starting_belt_pull_lb,
        loads["total_load_lb"],
        params.sprocket_pitch_diameter_in,
        params.safety_factor,
        inputs.belt_speed_fpm,
        params.lead_in_per_rev,
        params.motor_base_rpm,
    )
    logger.debug(f"drive: {drive}")

    values = {
        **geo,
        **mag,
        **loads,
        **drive,
        "achieved_throughput_lbs_hr": tput["achieved_throughput_lbs_hr"],
        "throughput_margin": tput["throughput_margin"],
        "bar_capacity_lb": bar["capacity"],
        "bar_ceramic_count": bar["ceramic_count"],
        "bar_neo_count": bar["neo_count"],
        "bar_pattern_mode": (inputs.bar_configuration.pattern_mode
                             if inputs.bar_configuration is not None else None),
        "total_conveyor_capacity_lb": total_capacity if total_capacity > 0 else None,
        "coefficient_of_friction_used": params.coefficient_of_friction,
        "safety_factor_used": params.safety_factor,
        "starting_belt_pull_lb_used": params.starting_belt_pull_lb,
        "chain_weight_lb_per_ft_used": params.chain_weight_lb_per_ft,
    }

    report = validate(inputs, values)
    if report.errors:
        logger.debug(f"{len(report.errors)} validation error(s): "
                     f"{[m.code for m in report.errors]}")

    return ConveyorOutputs(**values, warnings=tuple(report.warnings), errors=tuple(report.errors))
