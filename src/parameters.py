# -*- coding: utf-8 -*-
"""
parameters.py
Physical parameter sets per conveyor class and the override resolver.
Nothing executes on import; call resolve_parameters().
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from config import ConveyorClass, ConveyorInputs
from constants import MOTOR_BASE_RPM, STARTING_BELT_PULL_LB

__all__ = [
    "PhysicalParameters",
    "STANDARD_PARAMS",
    "HEAVY_DUTY_PARAMS",
    "parameters_for_class",
    "resolve_parameters",
]

# ──────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class PhysicalParameters:
    chain_pitch_in: float               # chain link pitch [in]
    chain_weight_lb_per_ft: float       # bare chain [lb/ft]
    sprocket_pitch_diameter_in: float   # drive sprocket PD [in]
    head_sprocket_teeth: int
    tail_sprocket_teeth: int
    lead_in_per_rev: float              # teeth × pitch / 2 [in/rev]
    motor_base_rpm: float
    coefficient_of_friction: float      # steel on UHMW
    safety_factor: float                # applied to running torque
    starting_belt_pull_lb: float


# C2040 chain, lighter duty
STANDARD_PARAMS = PhysicalParameters(
    chain_pitch_in=1.0,
    chain_weight_lb_per_ft=2.0,
    sprocket_pitch_diameter_in=4.5,
    head_sprocket_teeth=28,
    tail_sprocket_teeth=16,
    lead_in_per_rev=14.0,
    motor_base_rpm=MOTOR_BASE_RPM,
    coefficient_of_friction=0.2,
    safety_factor=2.0,
    starting_belt_pull_lb=STARTING_BELT_PULL_LB,
)

# C2060H chain
HEAVY_DUTY_PARAMS = PhysicalParameters(
    chain_pitch_in=1.5,
    chain_weight_lb_per_ft=3.0,
    sprocket_pitch_diameter_in=6.74,
    head_sprocket_teeth=28,
    tail_sprocket_teeth=14,
    lead_in_per_rev=21.0,
    motor_base_rpm=MOTOR_BASE_RPM,
    coefficient_of_friction=0.15,
    safety_factor=1.5,
    starting_belt_pull_lb=STARTING_BELT_PULL_LB,
)

_CLASS_PARAMS = {
    ConveyorClass.STANDARD: STANDARD_PARAMS,
    ConveyorClass.HEAVY_DUTY: HEAVY_DUTY_PARAMS,
}

# ──────────────────────────────────────────────────────────────────────────────
def parameters_for_class(conveyor_class: ConveyorClass) -> PhysicalParameters:
    """Canonical parameter set; unknown classes fall back to Standard."""
    return _CLASS_PARAMS.get(conveyor_class, STANDARD_PARAMS)


def _pick(override: Optional[float], default: float) -> float:
    # 0.0 is a real override, only None means "not given"
    return default if override is None else override


def resolve_parameters(inputs: ConveyorInputs) -> PhysicalParameters:
    """
    Merge class defaults with the four user-overridable fields.

    Returns a new PhysicalParameters; the canonical sets are never mutated.
    """
    base = parameters_for_class(inputs.conveyor_class)
    return replace(
        base,
        coefficient_of_friction=_pick(inputs.coefficient_of_friction, base.coefficient_of_friction),
        safety_factor=_pick(inputs.safety_factor, base.safety_factor),
        starting_belt_pull_lb=_pick(inputs.starting_belt_pull_lb, base.starting_belt_pull_lb),
        chain_weight_lb_per_ft=_pick(inputs.chain_weight_lb_per_ft, base.chain_weight_lb_per_ft),
    )
