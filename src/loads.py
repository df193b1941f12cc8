"""
loads.py
Belt pull from friction, incline lift and resting chips.
"""
from math import radians, sin
from typing import Dict

# ──────────────────────────────────────────────────────────────────────────────
def weight_per_foot(chain_weight_lb_per_ft: float, total_magnet_weight_lb: float,
                    belt_length_ft: float) -> float:
    """Distributed chain + magnet weight [lb/ft]."""
    if belt_length_ft <= 0:
        return chain_weight_lb_per_ft
    return chain_weight_lb_per_ft + total_magnet_weight_lb / belt_length_ft


def belt_pull_friction(weight_per_ft: float, belt_length_ft: float, cof: float) -> float:
    """Sliding friction of chain + magnets on the UHMW track [lb]."""
    return weight_per_ft * belt_length_ft * cof


def belt_pull_gravity(incline_length_in: float, weight_per_ft: float, angle_deg: float) -> float:
    """Lift component along the incline [lb]; zero for a flat conveyor."""
    if angle_deg == 0 or incline_length_in == 0:
        return 0.0
    return (incline_length_in / 12.0) * weight_per_ft * sin(radians(angle_deg))


def total_load(friction_lb: float, gravity_lb: float, chip_load_lb: float) -> float:
    return friction_lb + gravity_lb + chip_load_lb

# ──────────────────────────────────────────────────────────────────────────────
def calculate_loads(
    chain_weight_lb_per_ft: float,
    total_magnet_weight_lb: float,
    belt_length_ft: float,
    incline_length_in: float,
    angle_deg: float,
    cof: float,
    chip_load_lb: float = 0.0,
) -> Dict[str, float]:
    """
    Combine chain weight, magnets, friction and incline into total load.

    ``chip_load_lb`` comes from the throughput step, which therefore has to
    run first.
    """
    w = weight_per_foot(chain_weight_lb_per_ft, total_magnet_weight_lb, belt_length_ft)
    friction = belt_pull_friction(w, belt_length_ft, cof)
    gravity = belt_pull_gravity(incline_length_in, w, angle_deg)

    return {
        "weight_per_foot_lb": w,
        "belt_pull_friction_lb": friction,
        "belt_pull_gravity_lb": gravity,
        "chip_load_lb": chip_load_lb,
        "total_load_lb": total_load(friction, gravity, chip_load_lb),
    }
