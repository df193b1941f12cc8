"""
throughput.py
Achieved chip removal rate, resting chip load and margin.
"""
from typing import Dict

from bar_builder import compute_magnet_fit
from constants import FALLBACK_CERAMIC_LENGTH_IN, FALLBACK_GAP_IN, THROUGHPUT_MARGIN_THRESHOLDS

# ──────────────────────────────────────────────────────────────────────────────
def calculate_throughput(
    qty_magnets: int,
    belt_speed_fpm: float,
    magnet_centers_in: float,
    load_lbs_per_hr: float,
    bar_capacity_lb: float = 0.0,
) -> Dict[str, float]:
    """
    Returns chip_load_lb, achieved_throughput_lbs_hr, throughput_margin.

    With no bar capacity the requested load is passed straight through
    (margin 1.0), which keeps older configurations without a bar
    configuration working.
    """
    if bar_capacity_lb <= 0:
        return {
            "chip_load_lb": 0.0,
            "achieved_throughput_lbs_hr": load_lbs_per_hr,
            "throughput_margin": 1.0 if load_lbs_per_hr > 0 else 0.0,
        }

    # half the removable mass is resting on the bars at any instant
    chip_load = bar_capacity_lb * qty_magnets / 2.0

    if magnet_centers_in > 0:
        achieved = bar_capacity_lb * qty_magnets * belt_speed_fpm * 60.0 / magnet_centers_in
    else:
        achieved = 0.0

    margin = achieved / load_lbs_per_hr if load_lbs_per_hr > 0 else 0.0
    return {
        "chip_load_lb": chip_load,
        "achieved_throughput_lbs_hr": achieved,
        "throughput_margin": margin,
    }


def estimate_ceramic_count(magnet_width_in: float) -> int:
    """3.5" ceramics that fit across the bar with the standard gap."""
    return compute_magnet_fit(magnet_width_in, FALLBACK_CERAMIC_LENGTH_IN, FALLBACK_GAP_IN)["count"]


def margin_status(margin: float) -> str:
    if margin >= THROUGHPUT_MARGIN_THRESHOLDS["chips"]:
        return "good"
    if margin >= THROUGHPUT_MARGIN_THRESHOLDS["parts"]:
        return "warning"
    return "insufficient"
