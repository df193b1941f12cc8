# -*- coding: utf-8 -*-
"""
patterns.py – Bar repetition along the chain
============================================

Modes
-----
- ``all_same``    : [A][A][A][A]…
- ``alternating`` : [A][B][A][B]…  (odd positions primary)
- ``interval``    : [A][A][A][B][A][A][A][B]…  (B every *N*-th bar)

Positions are 1-indexed; the template a bar gets is a pure function of its
position, so sequences can be rebuilt at any time.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional

from bar_builder import BarTemplate, calculate_bar_capacity
from config import PatternMode

logger = logging.getLogger(__name__)

__all__ = [
    "PatternConfig",
    "PatternValidationResult",
    "apply_pattern",
    "calculate_conveyor_capacity",
    "calculate_conveyor_capacity_from_values",
    "validate_pattern",
    "describe_pattern",
    "preview_pattern",
    "calculate_bar_counts",
    "DEFAULT_PATTERNS",
]

DEFAULT_INTERVAL = 4


@dataclass(frozen=True)
class PatternConfig:
    mode: PatternMode
    primary_template_id: str
    secondary_template_id: Optional[str] = None
    interval_count: int = DEFAULT_INTERVAL


@dataclass
class PatternValidationResult:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

# ----------------------------------------------------------------------------
# Sequencing
# ----------------------------------------------------------------------------

def _is_secondary(config: PatternConfig, position: int) -> bool:
    if not config.secondary_template_id:
        return False
    if config.mode == PatternMode.ALTERNATING:
        return position % 2 == 0
    if config.mode == PatternMode.INTERVAL:
        n = config.interval_count
        return n >= 1 and position % n == 0
    return False


def apply_pattern(config: PatternConfig, total_bars: int) -> Dict[str, object]:
    """Template id for every bar position.

    Returns
    -------
    dict with keys ``sequence`` (list of template ids), ``primary_count``,
    ``secondary_count``. The two counts always add up to ``total_bars``.
    """
    if total_bars <= 0:
        return {"sequence": [], "primary_count": 0, "secondary_count": 0}

    sequence = []
    secondary = 0
    for position in range(1, int(total_bars) + 1):
        if _is_secondary(config, position):
            sequence.append(config.secondary_template_id)
            secondary += 1
        else:
            sequence.append(config.primary_template_id)

    return {
        "sequence": sequence,
        "primary_count": len(sequence) - secondary,
        "secondary_count": secondary,
    }


def calculate_bar_counts(config: PatternConfig, total_bars: int) -> Dict[str, int]:
    seq = apply_pattern(config, total_bars)
    return {"primary": seq["primary_count"], "secondary": seq["secondary_count"]}

# ----------------------------------------------------------------------------
# Capacity
# ----------------------------------------------------------------------------

def calculate_conveyor_capacity(
    config: PatternConfig,
    total_bars: int,
    templates: Mapping[str, BarTemplate],
) -> Dict[str, object]:
    """Removal capacity of every bar on the conveyor and the total [lb].

    Templates missing from *templates* contribute 0 lb.
    """
    seq = apply_pattern(config, total_bars)
    cache: Dict[str, float] = {}
    bars = []
    total = 0.0

    for position, template_id in enumerate(seq["sequence"], 1):
        template = templates.get(template_id)
        if template is None:
            if template_id not in cache:
                logger.warning(f"[patterns] template {template_id!r} not found, counted as 0 lb")
                cache[template_id] = 0.0
            name = "Unknown"
        else:
            name = template.name
            if template_id not in cache:
                cache[template_id] = calculate_bar_capacity(template)

        capacity = cache[template_id]
        total += capacity
        bars.append({
            "position": position,
            "template_id": template_id,
            "template_name": name,
            "capacity_lb": capacity,
        })

    n = len(bars)
    return {
        "total_capacity_lb": total,
        "capacity_per_bar_avg": total / n if n else 0.0,
        "bar_sequence": bars,
        "primary_bar_count": seq["primary_count"],
        "secondary_bar_count": seq["secondary_count"],
    }


def calculate_conveyor_capacity_from_values(
    config: PatternConfig,
    total_bars: int,
    primary_capacity_lb: float,
    secondary_capacity_lb: float = 0.0,
) -> Dict[str, float]:
    """Same total as above when the two bar capacities are already known."""
    seq = apply_pattern(config, total_bars)
    total = (seq["primary_count"] * primary_capacity_lb
             + seq["secondary_count"] * secondary_capacity_lb)
    return {
        "total_capacity_lb": total,
        "capacity_per_bar_avg": total / total_bars if total_bars > 0 else 0.0,
    }

# ----------------------------------------------------------------------------
# Validation & display helpers
# ----------------------------------------------------------------------------

def validate_pattern(
    config: PatternConfig,
    templates: Optional[Mapping[str, BarTemplate]] = None,
) -> PatternValidationResult:
    result = PatternValidationResult()

    primary = config.primary_template_id
    if not primary:
        result.errors.append("Primary template is required")
    elif templates is not None and primary not in templates:
        result.errors.append(f'Primary template "{primary}" not found')

    if config.mode in (PatternMode.ALTERNATING, PatternMode.INTERVAL):
        secondary = config.secondary_template_id
        if not secondary:
            mode = "Alternating" if config.mode == PatternMode.ALTERNATING else "Interval"
            result.warnings.append(
                f"{mode} mode without secondary template will use primary for all bars")
        elif templates is not None and secondary not in templates:
            result.errors.append(f'Secondary template "{secondary}" not found')

    if config.mode == PatternMode.INTERVAL and config.interval_count < 2:
        result.errors.append("Interval must be at least 2")

    return result


def describe_pattern(config: PatternConfig,
                     templates: Optional[Mapping[str, BarTemplate]] = None) -> str:
    templates = templates or {}

    def _name(tid, fallback):
        t = templates.get(tid)
        return t.name if t is not None else fallback

    primary = _name(config.primary_template_id, "Primary")
    if not config.secondary_template_id or config.mode == PatternMode.ALL_SAME:
        return f"All bars: {primary}"

    secondary = _name(config.secondary_template_id, "Secondary")
    if config.mode == PatternMode.ALTERNATING:
        return f"Alternating: {primary} / {secondary}"
    return f"{primary}, with {secondary} every {config.interval_count} bars"


def preview_pattern(config: PatternConfig, count: int = 8) -> List[Dict[str, object]]:
    """First *count* positions, flagged primary / not primary."""
    return [
        {"position": pos, "is_primary": not _is_secondary(config, pos)}
        for pos in range(1, max(0, count) + 1)
    ]


DEFAULT_PATTERNS: Dict[str, Callable[..., PatternConfig]] = {
    "all_ceramic": lambda template_id: PatternConfig(PatternMode.ALL_SAME, template_id),
    "alternating": lambda primary_id, secondary_id: PatternConfig(
        PatternMode.ALTERNATING, primary_id, secondary_id),
    "sweeper_every_4th": lambda primary_id, sweeper_id: PatternConfig(
        PatternMode.INTERVAL, primary_id, sweeper_id, 4),
}
