# -*- coding: utf-8 -*-
"""
drive_utils.py – Sprocket torque & gearmotor speed helpers
==========================================================

Turns the total load on the chain into what the gearmotor has to deliver
at the head shaft.

Public API (stable)
-------------------
- `calculate_drive()` – belt pull → torque (with safety factor) and belt
  speed → shaft rpm → suggested gear ratio.

Motor horsepower is deliberately **not** computed: gearbox and motor are
picked from the vendor catalog against torque and output speed.
"""
from __future__ import annotations

from typing import Dict

__all__ = [
    "total_belt_pull",
    "running_torque",
    "total_torque",
    "required_rpm",
    "suggested_gear_ratio",
    "calculate_drive",
]

# ----------------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------------

def total_belt_pull(starting_pull_lb: float, total_load_lb: float) -> float:
    """Static breakaway pull plus running load **[lb]**."""
    return starting_pull_lb + total_load_lb


def running_torque(belt_pull_lb: float, sprocket_pd_in: float) -> float:
    """Torque at the drive sprocket **[in·lb]** = pull × PD / 2."""
    return belt_pull_lb * (sprocket_pd_in / 2.0)


def total_torque(running_torque_in_lb: float, safety_factor: float) -> float:
    return running_torque_in_lb * safety_factor


def required_rpm(belt_speed_fpm: float, lead_in_per_rev: float) -> float:
    """Head-shaft speed **[rev/min]** for a belt speed in ft/min."""
    if lead_in_per_rev <= 0:
        return 0.0
    return belt_speed_fpm * 12.0 / lead_in_per_rev


def suggested_gear_ratio(motor_base_rpm: float, shaft_rpm: float) -> float:
    """Motor rpm / shaft rpm; pick the nearest catalog ratio from this."""
    if shaft_rpm <= 0:
        return 0.0
    return motor_base_rpm / shaft_rpm

# ----------------------------------------------------------------------------
# Public: calculate_drive
# ----------------------------------------------------------------------------

def calculate_drive(
    starting_pull_lb: float,
    total_load_lb: float,
    sprocket_pd_in: float,
    safety_factor: float,
    belt_speed_fpm: float,
    lead_in_per_rev: float,
    motor_base_rpm: float,
) -> Dict[str, float]:
    """Translate chain load and belt speed → drive-side requirements.

    Parameters
    ----------
    starting_pull_lb : float
        Fixed breakaway pull for the conveyor class [lb].
    total_load_lb : float
        Friction + gravity + chip load [lb].
    sprocket_pd_in : float
        Drive sprocket pitch diameter [in].
    safety_factor : float
        Multiplier on running torque for start-up and shock.
    belt_speed_fpm : float
        Chain speed [ft/min].
    lead_in_per_rev : float
        Chain travel per head-shaft revolution [in].
    motor_base_rpm : float
        Nameplate motor speed [rev/min].

    Returns
    -------
    dict with keys `total_belt_pull_lb`, `running_torque_in_lb`,
    `total_torque_in_lb`, `required_rpm`, `suggested_gear_ratio`.
    """
    pull = total_belt_pull(starting_pull_lb, total_load_lb)
    T_run = running_torque(pull, sprocket_pd_in)
    rpm = required_rpm(belt_speed_fpm, lead_in_per_rev)

    return {
        "total_belt_pull_lb": pull,
        "running_torque_in_lb": T_run,
        "total_torque_in_lb": total_torque(T_run, safety_factor),
        "required_rpm": rpm,
        "suggested_gear_ratio": suggested_gear_ratio(motor_base_rpm, rpm),
    }


# -----------------------------------------------------------------------------
# Basic smoke‑test when run standalone
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    # Example: Standard class, 124 lb load at 30 ft/min
    drive = calculate_drive(100.0, 124.0, 4.5, 2.0, 30.0, 14.0, 1750.0)
    print("calculate_drive→", drive)
