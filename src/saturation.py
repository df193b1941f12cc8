#!/usr/bin/env python3
"""
saturation.py
---------------------------------------------------------------
• Library:
      SaturationModel.factor(width, neo_count)  → efficiency ≤ 1.0
      DEFAULT_SATURATION.apply(base, neo, ceramic, width) → corrected lb

  Closely packed neo magnets interfere with each other, so a pure-neo bar
  removes less than the linear sum of its magnets. The factor is an
  empirical fit against the reference removal-capacity tables.

• Stand-alone CLI:
      $ python src/saturation.py --max-neo 8
  writes a factor-vs-width CSV and PNG into the working directory.
"""

# ───────────────────────── imports ──────────────────────────
from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping

import numpy as np
import pandas as pd

# ───────────────────────── constants ───────────────────────
# bar width [in] → neo count → efficiency factor (1.0 = no correction)
SATURATION_TABLE: Dict[float, Dict[int, float]] = {
    12: {4: 0.884, 5: 0.80, 6: 0.72},
    15: {4: 0.969, 5: 0.907, 6: 0.85},
    18: {4: 0.99, 5: 0.95, 6: 0.90},
    24: {4: 1.0, 5: 0.98, 6: 0.95},
}

SATURATION_THRESHOLD = 3        # neo count at or below → no correction
EXTRAPOLATION_DECAY = 0.08      # per neo beyond the table, on a 12" bar
REFERENCE_WIDTH_IN = 12.0
MIN_FACTOR = 0.5

# ───────────────────────── model ───────────────────────────
@dataclass(frozen=True)
class SaturationModel:
    """Table + interpolate in width + extrapolate in neo count."""
    table: Mapping[float, Mapping[int, float]] = field(
        default_factory=lambda: SATURATION_TABLE)
    threshold: int = SATURATION_THRESHOLD
    decay: float = EXTRAPOLATION_DECAY
    reference_width_in: float = REFERENCE_WIDTH_IN
    floor: float = MIN_FACTOR

    def __post_init__(self):
        # private read-only copy; models never share a table
        frozen = {w: MappingProxyType(dict(row)) for w, row in self.table.items()}
        object.__setattr__(self, "table", MappingProxyType(frozen))

    @property
    def widths(self):
        return sorted(self.table)

    def factor_for_width(self, width_in: float, neo_count: int) -> float:
        """Factor at a tabulated width; counts past the table decay linearly."""
        row = self.table.get(width_in)
        if not row:
            return 1.0
        if neo_count in row:
            return row[neo_count]

        max_neo = max(row)
        if neo_count > max_neo:
            extra = (neo_count - max_neo) * self.decay * (self.reference_width_in / width_in)
            return max(self.floor, row[max_neo] - extra)
        return 1.0

    def factor(self, width_in: float, neo_count: int) -> float:
        """Factor for any width; clamped to the first / last tabulated row."""
        widths = self.widths
        factors = [self.factor_for_width(w, neo_count) for w in widths]
        # np.interp holds the end values outside [widths[0], widths[-1]]
        return float(np.interp(width_in, widths, factors))

    def correction(self, neo_count: int, ceramic_count: int, width_in: float) -> float:
        # mixing in ceramic is empirically found not to saturate
        if neo_count <= self.threshold or ceramic_count > 0:
            return 1.0
        return min(1.0, self.factor(width_in, neo_count))

    def apply(self, base_capacity_lb: float, neo_count: int,
              ceramic_count: int, width_in: float) -> float:
        return base_capacity_lb * self.correction(neo_count, ceramic_count, width_in)


DEFAULT_SATURATION = SaturationModel()

# ───────────────────────── CLI ─────────────────────────────
def factor_table(model: SaturationModel = DEFAULT_SATURATION,
                 widths=None, neo_counts=range(4, 9)):
    """Factor grid as a DataFrame: one row per width, one column per neo count."""
    if widths is None:
        widths = np.arange(6.0, 30.5, 0.5)
    data = {"width_in": np.asarray(widths, dtype=float)}
    for n in neo_counts:
        data[f"neo_{n}"] = [model.correction(n, 0, w) for w in data["width_in"]]
    return pd.DataFrame(data)


def _cli():
    import matplotlib.pyplot as plt

    ap = argparse.ArgumentParser(description="Tabulate the neo saturation factor")
    ap.add_argument("--max-neo", type=int, default=8,
                    help="Largest neo count to tabulate")
    max_neo = ap.parse_args().max_neo

    df = factor_table(neo_counts=range(SATURATION_THRESHOLD + 1, max_neo + 1))
    csv_name = f"saturation_factor_neo4-{max_neo}.csv"
    df.to_csv(csv_name, index=False)

    plt.figure(figsize=(5.8, 3.5))
    for col in df.columns[1:]:
        plt.plot(df["width_in"], df[col], label=col.replace("_", " "))
    plt.xlabel("Bar width [in]")
    plt.ylabel("Saturation factor [-]")
    plt.ylim(0.45, 1.02)
    plt.grid(True, ls=":")
    plt.legend(fontsize=8)
    plt.tight_layout()
    png_name = f"saturation_factor_neo4-{max_neo}.png"
    plt.savefig(png_name, dpi=300)

    print(f"[OK] {csv_name} + {png_name} written")


if __name__ == "__main__":
    _cli()
