"""
breakdown.py
Step-by-step numbers behind a bar capacity and its throughput, for callers
that want to show their working. Numbers only; formatting is the caller's.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional

from catalog import CERAMIC_5_3_5, NEO_35_2_0, MagnetMaterial
from saturation import DEFAULT_SATURATION, SaturationModel
from throughput import calculate_throughput, margin_status

# Effective lb per magnet for the two magnets used in count-based bars
CERAMIC_CAPACITY = CERAMIC_5_3_5.removal_capacity_lb
NEO_CAPACITY = NEO_35_2_0.removal_capacity_lb


@dataclass(frozen=True)
class ConveyorContext:
    qty_magnets: int
    belt_speed_fpm: float
    magnet_centers_in: float
    load_lbs_per_hr: float
    pattern_mode: str = "all_same"

# ──────────────────────────────────────────────────────────────────────────────
def get_magnet_contributions(ceramic_count: int, neo_count: int) -> List[Dict[str, object]]:
    """One entry per magnet type present on the bar."""
    out = []
    if ceramic_count > 0:
        out.append({
            "material": MagnetMaterial.CERAMIC.value,
            "name": CERAMIC_5_3_5.name,
            "count": ceramic_count,
            "capacity_each_lb": CERAMIC_CAPACITY,
            "total_capacity_lb": ceramic_count * CERAMIC_CAPACITY,
        })
    if neo_count > 0:
        out.append({
            "material": MagnetMaterial.NEO.value,
            "name": NEO_35_2_0.name,
            "count": neo_count,
            "capacity_each_lb": NEO_CAPACITY,
            "total_capacity_lb": neo_count * NEO_CAPACITY,
        })
    return out


def get_calculation_breakdown(
    ceramic_count: int,
    neo_count: int,
    bar_width_in: float,
    context: Optional[ConveyorContext] = None,
    model: SaturationModel = DEFAULT_SATURATION,
) -> Dict[str, object]:
    """
    Raw capacity → saturation factor → bar capacity → conveyor totals.

    ``throughput`` is only filled in when a context is given and the bar
    has a positive capacity; otherwise it is None.
    """
    contributions = get_magnet_contributions(ceramic_count, neo_count)
    raw = sum(c["total_capacity_lb"] for c in contributions)
    factor = model.correction(neo_count, ceramic_count, bar_width_in) if raw > 0 else 1.0
    bar_capacity = raw * factor

    total_bars = context.qty_magnets if context else 0
    throughput = None
    if context is not None and bar_capacity > 0:
        tput = calculate_throughput(
            context.qty_magnets,
            context.belt_speed_fpm,
            context.magnet_centers_in,
            context.load_lbs_per_hr,
            bar_capacity,
        )
        margin = tput["throughput_margin"]
        throughput = {
            "chip_load_lb": tput["chip_load_lb"],
            "achieved_throughput_lbs_hr": tput["achieved_throughput_lbs_hr"],
            "required_throughput_lbs_hr": context.load_lbs_per_hr,
            "margin": margin,
            "margin_status": margin_status(margin),
        }

    return {
        "magnet_contributions": contributions,
        "raw_capacity_lb": raw,
        "saturation_factor": factor,
        "bar_capacity_lb": bar_capacity,
        "pattern_mode": context.pattern_mode if context else "all_same",
        "total_bars": total_bars,
        "total_conveyor_capacity_lb": bar_capacity * total_bars,
        "throughput": throughput,
    }
