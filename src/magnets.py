"""
magnets.py
Magnet bar weight and quantity along the chain.
"""
from math import floor
from typing import Dict

from constants import MAGNET_WEIGHT_INTERCEPT, MAGNET_WEIGHT_SLOPE

# ──────────────────────────────────────────────────────────────────────────────
def magnet_weight(
    width_in: float,
    intercept: float = MAGNET_WEIGHT_INTERCEPT,
    slope: float = MAGNET_WEIGHT_SLOPE,
) -> float:
    """Weight of one magnet bar [lb], linear fit against catalog data."""
    return intercept + width_in * slope


def magnet_quantity(belt_length_ft: float, magnet_centers_in: float) -> int:
    """
    Number of bars on the belt.

    One pitch is lost at the chain master link, so a belt shorter than two
    pitches carries no bars at all.
    """
    if magnet_centers_in <= 0:
        return 0
    raw = floor(belt_length_ft * 12.0 / magnet_centers_in)
    return max(0, raw - 1)


def total_magnet_weight(weight_each_lb: float, qty: int) -> float:
    return weight_each_lb * qty

# ──────────────────────────────────────────────────────────────────────────────
def calculate_magnets(
    width_in: float,
    belt_length_ft: float,
    magnet_centers_in: float,
) -> Dict[str, float]:
    """Return magnet_weight_each_lb, qty_magnets and total_magnet_weight_lb."""
    each = magnet_weight(width_in)
    qty = magnet_quantity(belt_length_ft, magnet_centers_in)
    return {
        "magnet_weight_each_lb": each,
        "qty_magnets": qty,
        "total_magnet_weight_lb": total_magnet_weight(each, qty),
    }
