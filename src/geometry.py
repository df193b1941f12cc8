"""
geometry.py
Pure helpers for conveyor path geometry & chain length.
Nothing executes on import; call calculate_geometry().
"""
from math import ceil, radians, sin, tan
from typing import Dict

# ──────────────────────────────────────────────────────────────────────────────
def incline_length(discharge_height_in: float, angle_deg: float) -> float:
    """Sloped length of the incline [in] = height / sin(angle)."""
    if discharge_height_in == 0 or angle_deg == 0:
        return 0.0
    s = sin(radians(angle_deg))
    if s == 0:
        return 0.0
    return discharge_height_in / s


def incline_run(discharge_height_in: float, angle_deg: float) -> float:
    """Horizontal projection of the incline [in] = height / tan(angle)."""
    if discharge_height_in == 0 or angle_deg == 0:
        return 0.0
    # tan(90°) is not infinite in floating point; the run vanishes exactly
    if angle_deg == 90:
        return 0.0
    t = tan(radians(angle_deg))
    if t == 0:
        return 0.0
    return discharge_height_in / t


def horizontal_length(infeed_in: float, run_in: float, discharge_in: float) -> float:
    return infeed_in + run_in + discharge_in


def path_length(infeed_in: float, incline_in: float, discharge_in: float) -> float:
    """One side of the chain path [ft]."""
    return (infeed_in + incline_in + discharge_in) / 12.0


def belt_length(path_length_ft: float) -> float:
    """Top run plus return [ft]."""
    return path_length_ft * 2.0


def chain_length(belt_length_ft: float, chain_pitch_in: float) -> float:
    """Chain length [in], always rounded UP to a whole number of pitches."""
    if chain_pitch_in <= 0:
        return 0.0
    pitches = ceil(belt_length_ft * 12.0 / chain_pitch_in)
    return pitches * chain_pitch_in

# ──────────────────────────────────────────────────────────────────────────────
def calculate_geometry(
    infeed_length_in: float,
    discharge_height_in: float,
    angle_deg: float,
    discharge_length_in: float,
    chain_pitch_in: float,
) -> Dict[str, float]:
    """
    Compute the conveyor layout.

    Returns
    -------
    dict with keys:
        incline_length_in, incline_run_in   incline slope / projection
        horizontal_length_in                overall footprint
        path_length_ft, belt_length_ft      one side / both sides
        chain_length_in                     rounded up to chain pitch
    """
    L_inc = incline_length(discharge_height_in, angle_deg)
    run = incline_run(discharge_height_in, angle_deg)

    path_ft = path_length(infeed_length_in, L_inc, discharge_length_in)
    belt_ft = belt_length(path_ft)

    return {
        "incline_length_in": L_inc,
        "incline_run_in": run,
        "horizontal_length_in": horizontal_length(infeed_length_in, run, discharge_length_in),
        "path_length_ft": path_ft,
        "belt_length_ft": belt_ft,
        "chain_length_in": chain_length(belt_ft, chain_pitch_in),
    }
