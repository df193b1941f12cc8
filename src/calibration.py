# -*- coding: utf-8 -*-
"""
calibration.py
Compare the count-based bar capacity model against the reference
removal-capacity tables.

    >>> compare_against_reference().round(3)
"""
from __future__ import annotations

import pandas as pd

from bar_builder import calculate_bar_capacity_from_counts
from catalog import reference_rows
from constants import CERAMIC_CAPACITY_LB, NEO_CAPACITY_LB
from saturation import DEFAULT_SATURATION, SaturationModel

__all__ = ["reference_table", "compare_against_reference", "discrepancies"]


def reference_table() -> pd.DataFrame:
    """Reference lookup as rows of oal_in, ceramic_count, neo_count, reference_lb."""
    return pd.DataFrame(
        reference_rows(),
        columns=["oal_in", "ceramic_count", "neo_count", "reference_lb"],
    )


def compare_against_reference(model: SaturationModel = DEFAULT_SATURATION) -> pd.DataFrame:
    """Reference table plus raw / corrected model capacity and the error."""
    df = reference_table()
    df["raw_lb"] = df["ceramic_count"] * CERAMIC_CAPACITY_LB + df["neo_count"] * NEO_CAPACITY_LB
    df["corrected_lb"] = [
        calculate_bar_capacity_from_counts(int(c), int(n), float(w), model=model)
        for w, c, n in zip(df["oal_in"], df["ceramic_count"], df["neo_count"])
    ]
    df["difference_lb"] = df["corrected_lb"] - df["reference_lb"]
    df["percent_error"] = df["difference_lb"] / df["reference_lb"] * 100.0
    return df


def discrepancies(threshold_pct: float = 10.0,
                  model: SaturationModel = DEFAULT_SATURATION) -> pd.DataFrame:
    """Rows whose absolute percent error exceeds *threshold_pct*."""
    df = compare_against_reference(model)
    return df[df["percent_error"].abs() > threshold_pct].reset_index(drop=True)
