# -*- coding: utf-8 -*-
"""
bar_builder.py – Magnet bar layout & removal capacity
=====================================================

A bar is filled left-to-right with catalog magnets separated by a fixed gap
until the target overall length (OAL) is reached::

    OAL 12"
    [Ceramic 3.5"][gap .25][Ceramic 3.5"][gap .25][Ceramic 3.5"] = 11.0"
    leftover 1.0"

Everything computed about a bar (positions, achieved OAL, leftover, hold
force, validity) is derived from its ordered magnet list on every access,
so editing the list can never leave stale numbers behind.

Layout problems are *collected*, never raised: a template with errors is
still returned so the caller can show the partial state.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import floor, isclose
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from catalog import (
    DEFAULT_CATALOG,
    ConveyorMagnetFamily,
    MagnetCatalogItem,
    MagnetMaterial,
    catalog_by_id,
)
from constants import (
    CERAMIC_CAPACITY_LB,
    DEFAULT_END_CLEARANCE_IN,
    DEFAULT_GAP_IN,
    DEFAULT_LEFTOVER_TOLERANCE_IN,
    NEO_CAPACITY_LB,
)
from saturation import DEFAULT_SATURATION, SaturationModel

logger = logging.getLogger(__name__)

__all__ = [
    "SlotSpec",
    "BarSlot",
    "BarIssue",
    "BarTemplate",
    "BarValidationResult",
    "compute_magnet_fit",
    "build_bar_template",
    "calculate_bar_capacity",
    "calculate_bar_capacity_from_counts",
    "validate_bar_config",
    "count_magnets_by_type",
    "create_slot_specs_from_counts",
    "compute_optimal_mix",
]

# ----------------------------------------------------------------------------
# Records
# ----------------------------------------------------------------------------

@dataclass(frozen=True)
class SlotSpec:
    magnet_id: str
    quantity: int = 1


@dataclass(frozen=True)
class BarSlot:
    slot_index: int
    magnet: MagnetCatalogItem
    position_in: float          # left edge, measured from the bar end

    @property
    def magnet_id(self) -> str:
        return self.magnet.part_number


@dataclass(frozen=True)
class BarIssue:
    code: str
    message: str


@dataclass
class BarValidationResult:
    errors: List[BarIssue] = field(default_factory=list)
    warnings: List[BarIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def codes(self) -> List[str]:
        return [i.code for i in self.errors + self.warnings]


@dataclass
class BarTemplate:
    """Ordered magnets on one bar plus the layout rules they were placed under."""
    target_oal_in: float
    gap_in: float = DEFAULT_GAP_IN
    end_clearance_in: float = DEFAULT_END_CLEARANCE_IN
    tolerance_in: float = DEFAULT_LEFTOVER_TOLERANCE_IN
    family_slug: str = ""
    name: str = ""
    magnets: List[MagnetCatalogItem] = field(default_factory=list)
    build_errors: List[BarIssue] = field(default_factory=list)
    saturation: SaturationModel = DEFAULT_SATURATION

    def __post_init__(self):
        if not self.name:
            self.name = f'{self.target_oal_in:g}" Bar Template'

    # ── editing ──────────────────────────────────────────────────────────
    def add_magnet(self, magnet: MagnetCatalogItem, quantity: int = 1) -> None:
        self.magnets.extend([magnet] * max(0, int(quantity)))

    def remove_slot(self, slot_index: int) -> MagnetCatalogItem:
        """Drop one slot; later slots shift left. Raises IndexError if absent."""
        return self.magnets.pop(slot_index)

    # ── derived layout ───────────────────────────────────────────────────
    @property
    def slots(self) -> List[BarSlot]:
        out = []
        pos = self.end_clearance_in
        for idx, magnet in enumerate(self.magnets):
            if idx > 0:
                pos += self.gap_in
            out.append(BarSlot(slot_index=idx, magnet=magnet, position_in=pos))
            pos += magnet.length_in
        return out

    @property
    def magnet_count(self) -> int:
        return len(self.magnets)

    @property
    def achieved_oal_in(self) -> float:
        n = len(self.magnets)
        gaps = max(0, n - 1) * self.gap_in
        return sum(m.length_in for m in self.magnets) + gaps + 2 * self.end_clearance_in

    @property
    def leftover_in(self) -> float:
        """Signed; negative means the bar is overfilled."""
        return self.target_oal_in - self.achieved_oal_in

    @property
    def ceramic_count(self) -> int:
        return sum(1 for m in self.magnets if m.material == MagnetMaterial.CERAMIC)

    @property
    def neo_count(self) -> int:
        return sum(1 for m in self.magnets if m.material == MagnetMaterial.NEO)

    @property
    def raw_hold_force_lb(self) -> float:
        return sum(m.removal_capacity_lb for m in self.magnets)

    @property
    def bar_hold_force_lb(self) -> float:
        """Removal capacity after the neo saturation correction [lb]."""
        return self.saturation.apply(
            self.raw_hold_force_lb, self.neo_count, self.ceramic_count, self.target_oal_in)

    @property
    def bar_weight_lb(self) -> float:
        return sum(m.weight_lb for m in self.magnets)

    @property
    def validation_errors(self) -> List[BarIssue]:
        issues = list(self.build_errors)
        leftover = self.leftover_in
        if leftover < 0:
            issues.append(BarIssue(
                "BAR_OVERFILL", f'Bar overfill: {abs(leftover):.3f}" over target OAL'))
        elif leftover > self.tolerance_in:
            issues.append(BarIssue(
                "EXCESSIVE_LEFTOVER",
                f'Excessive leftover: {leftover:.3f}" (tolerance: {self.tolerance_in}")'))
        return issues

    @property
    def is_valid(self) -> bool:
        return not self.validation_errors

# ----------------------------------------------------------------------------
# Fit & build
# ----------------------------------------------------------------------------

def compute_magnet_fit(
    target_oal_in: float,
    magnet_length_in: float,
    gap_in: float = DEFAULT_GAP_IN,
    end_clearance_in: float = DEFAULT_END_CLEARANCE_IN,
) -> Dict[str, float]:
    """How many magnets of one length fit in *target_oal_in*.

    ``n = floor((OAL − 2·clearance + gap) / (length + gap))``

    Returns
    -------
    dict with keys ``count``, ``achieved_oal_in``, ``remaining_in``.
    """
    if magnet_length_in <= 0 or target_oal_in <= 0 or gap_in < 0:
        return {"count": 0, "achieved_oal_in": 0.0, "remaining_in": target_oal_in}

    available = target_oal_in - 2 * end_clearance_in + gap_in
    count = floor(available / (magnet_length_in + gap_in))

    if count <= 0:
        return {
            "count": 0,
            "achieved_oal_in": 2 * end_clearance_in,
            "remaining_in": target_oal_in - 2 * end_clearance_in,
        }

    achieved = count * magnet_length_in + (count - 1) * gap_in + 2 * end_clearance_in
    return {"count": count, "achieved_oal_in": achieved, "remaining_in": target_oal_in - achieved}


SlotLike = Union[SlotSpec, Tuple[str, int]]
CatalogLike = Union[Mapping[str, MagnetCatalogItem], Iterable[MagnetCatalogItem]]


def _as_lookup(catalog: CatalogLike) -> Mapping[str, MagnetCatalogItem]:
    if isinstance(catalog, Mapping):
        return catalog
    return catalog_by_id(catalog)


def build_bar_template(
    target_oal_in: float,
    slot_specs: Sequence[SlotLike],
    gap_in: float = DEFAULT_GAP_IN,
    catalog: CatalogLike = DEFAULT_CATALOG,
    end_clearance_in: float = DEFAULT_END_CLEARANCE_IN,
    tolerance_in: float = DEFAULT_LEFTOVER_TOLERANCE_IN,
    family_slug: str = "",
    name: str = "",
) -> BarTemplate:
    """Lay out *slot_specs* in order. Unknown ids are recorded and skipped."""
    lookup = _as_lookup(catalog)
    template = BarTemplate(
        target_oal_in=target_oal_in,
        gap_in=gap_in,
        end_clearance_in=end_clearance_in,
        tolerance_in=tolerance_in,
        family_slug=family_slug,
        name=name,
    )

    for spec in slot_specs:
        if not isinstance(spec, SlotSpec):
            spec = SlotSpec(*spec)
        magnet = lookup.get(spec.magnet_id)
        if magnet is None:
            logger.warning(f"[bar_builder] magnet {spec.magnet_id!r} not in catalog, slot skipped")
            template.build_errors.append(BarIssue(
                "MAGNET_NOT_FOUND", f"Magnet {spec.magnet_id} not found in catalog"))
            continue
        template.add_magnet(magnet, spec.quantity)

    return template

# ----------------------------------------------------------------------------
# Capacity
# ----------------------------------------------------------------------------

def calculate_bar_capacity(template: BarTemplate) -> float:
    """Saturation-corrected removal capacity of a built bar [lb]."""
    if not template.magnets:
        return 0.0
    return template.bar_hold_force_lb


def calculate_bar_capacity_from_counts(
    ceramic_count: int,
    neo_count: int,
    bar_width_in: float,
    ceramic_capacity: float = CERAMIC_CAPACITY_LB,
    neo_capacity: float = NEO_CAPACITY_LB,
    model: SaturationModel = DEFAULT_SATURATION,
) -> float:
    """Capacity [lb] from magnet counts, without building a template."""
    base = ceramic_count * ceramic_capacity + neo_count * neo_capacity
    return model.apply(base, neo_count, ceramic_count, bar_width_in)

# ----------------------------------------------------------------------------
# Family rules
# ----------------------------------------------------------------------------

def _length_allowed(length_in: float, allowed: Iterable[float]) -> bool:
    return any(isclose(length_in, a, abs_tol=1e-9) for a in allowed)


def validate_bar_config(template: BarTemplate, family: ConveyorMagnetFamily) -> BarValidationResult:
    """Check a bar against its family's cross-section, length and count rules."""
    result = BarValidationResult()

    if not template.magnets:
        result.errors.append(BarIssue("BAR_EMPTY", "Bar template has no slots"))
        return result

    n = template.magnet_count
    if n > family.max_magnets_per_bar:
        result.errors.append(BarIssue(
            "TOO_MANY_MAGNETS", f"Too many magnets: {n} exceeds max {family.max_magnets_per_bar}"))

    for magnet in template.magnets:
        if magnet.cross_section_key != family.cross_section_key:
            result.errors.append(BarIssue(
                "CROSS_SECTION_MISMATCH",
                f"Magnet {magnet.name} has wrong cross-section: {magnet.cross_section_key} "
                f"(family requires {family.cross_section_key})"))
        if not _length_allowed(magnet.length_in, family.allowed_lengths_in):
            allowed = ", ".join(f"{a:g}" for a in family.allowed_lengths_in)
            result.errors.append(BarIssue(
                "LENGTH_NOT_ALLOWED",
                f'Magnet {magnet.name} has non-standard length: {magnet.length_in}" '
                f'(family allows {allowed}")'))
        if not magnet.is_active:
            result.warnings.append(BarIssue("MAGNET_INACTIVE", f"Magnet {magnet.name} is inactive"))

    leftover = template.leftover_in
    if leftover < 0:
        result.errors.append(BarIssue(
            "BAR_OVERFILL",
            f'Bar overfill: achieved {template.achieved_oal_in:.3f}" exceeds target '
            f'{template.target_oal_in}"'))
    elif leftover > template.tolerance_in:
        result.warnings.append(BarIssue(
            "EXCESSIVE_LEFTOVER",
            f'Excessive leftover: {leftover:.3f}" (tolerance: {template.tolerance_in}")'))

    return result

# ----------------------------------------------------------------------------
# Utilities
# ----------------------------------------------------------------------------

def count_magnets_by_type(template: BarTemplate) -> Dict[str, int]:
    ceramic, neo = template.ceramic_count, template.neo_count
    return {"ceramic": ceramic, "neo": neo, "total": ceramic + neo}


def create_slot_specs_from_counts(
    ceramic_magnet_id: str,
    ceramic_count: int,
    neo_magnet_id: str,
    neo_count: int,
) -> List[SlotSpec]:
    """Ceramics first, then neos; zero counts are left out."""
    specs = []
    if ceramic_count > 0:
        specs.append(SlotSpec(ceramic_magnet_id, ceramic_count))
    if neo_count > 0:
        specs.append(SlotSpec(neo_magnet_id, neo_count))
    return specs


def compute_optimal_mix(
    target_oal_in: float,
    ceramic_length_in: float,
    neo_length_in: float,
    gap_in: float = DEFAULT_GAP_IN,
    neo_boost: int = 0,
) -> Dict[str, int]:
    """
    Fill with ceramics, then swap up to *neo_boost* of them for neos while
    the bar stays within tolerance of the OAL.
    """
    fit = compute_magnet_fit(target_oal_in, ceramic_length_in, gap_in)
    ceramic, neo = fit["count"], 0

    if neo_boost <= 0 or neo_boost > ceramic:
        return {"ceramic": ceramic, "neo": 0}

    delta = neo_length_in - ceramic_length_in
    remaining = fit["remaining_in"]
    for _ in range(neo_boost):
        remaining -= delta
        if remaining < -DEFAULT_LEFTOVER_TOLERANCE_IN:
            break
        ceramic -= 1
        neo += 1

    return {"ceramic": ceramic, "neo": neo}
