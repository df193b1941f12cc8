# -*- coding: utf-8 -*-
"""
catalog.py
Magnet catalog, conveyor magnet families and the reference removal-capacity
tables the bar capacity model is calibrated against.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

__all__ = [
    "MagnetMaterial",
    "MagnetCatalogItem",
    "ConveyorMagnetFamily",
    "CERAMIC_5_3_5",
    "CERAMIC_5_2_5",
    "NEO_35_1_375",
    "NEO_50_1_375",
    "NEO_35_2_0",
    "DEFAULT_CATALOG",
    "STANDARD_FAMILY",
    "HEAVY_DUTY_FAMILY",
    "MAGNET_FAMILIES",
    "REMOVAL_CAPACITY_REFERENCE",
    "catalog_by_id",
    "family_by_slug",
    "reference_rows",
]


class MagnetMaterial(str, Enum):
    CERAMIC = "ceramic"
    NEO = "neo"

# ──────────────────────────────────────────────────────────────────────────────
# Catalog items
# ──────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class MagnetCatalogItem:
    part_number: str                 # catalog id
    name: str
    cross_section_key: str           # e.g. "1.00x1.38"
    material: MagnetMaterial
    grade: str
    length_in: float
    width_in: float
    height_in: float
    weight_lb: float
    hold_force_proxy_lb: float       # effective lb removed per magnet
    efficiency_factor: float = 1.0
    is_active: bool = True

    @property
    def removal_capacity_lb(self) -> float:
        return self.hold_force_proxy_lb * self.efficiency_factor


# Primary magnet for standard bars (0.362 lb / 3 on a 12" bar)
CERAMIC_5_3_5 = MagnetCatalogItem(
    part_number="MAG050100013753500",
    name='Ceramic 5 - 3.5" Standard',
    cross_section_key="1.00x1.38",
    material=MagnetMaterial.CERAMIC,
    grade="ceramic_5",
    length_in=3.5, width_in=1.0, height_in=1.38,
    weight_lb=0.5,
    hold_force_proxy_lb=0.1207,
)

# Sweeper magnet
CERAMIC_5_2_5 = MagnetCatalogItem(
    part_number="MAG050100013752500",
    name='Ceramic 5 - 2.5" Sweeper',
    cross_section_key="1.00x1.38",
    material=MagnetMaterial.CERAMIC,
    grade="ceramic_5",
    length_in=2.5, width_in=1.0, height_in=1.38,
    weight_lb=0.35,
    hold_force_proxy_lb=0.08,
)

NEO_35_1_375 = MagnetCatalogItem(
    part_number="MAGRARE0100200138",
    name='Neo 35 - 1.375"',
    cross_section_key="1.00x2.00",
    material=MagnetMaterial.NEO,
    grade="neo_35",
    length_in=1.375, width_in=1.0, height_in=2.0,
    weight_lb=0.3,
    hold_force_proxy_lb=0.298,
)

NEO_50_1_375 = MagnetCatalogItem(
    part_number="MAGRARE0100200138N50",
    name='Neo 50 - 1.375"',
    cross_section_key="1.00x2.00",
    material=MagnetMaterial.NEO,
    grade="neo_50",
    length_in=1.375, width_in=1.0, height_in=2.0,
    weight_lb=0.3,
    hold_force_proxy_lb=0.298,
)

# Same section as the ceramics so the two can share a standard bar
NEO_35_2_0 = MagnetCatalogItem(
    part_number="MAGRARE0100200200",
    name='Neo 35 - 2"',
    cross_section_key="1.00x1.38",
    material=MagnetMaterial.NEO,
    grade="neo_35",
    length_in=2.0, width_in=1.0, height_in=1.38,
    weight_lb=0.25,
    hold_force_proxy_lb=0.298,
)

DEFAULT_CATALOG: Tuple[MagnetCatalogItem, ...] = (
    CERAMIC_5_3_5,
    CERAMIC_5_2_5,
    NEO_35_1_375,
    NEO_50_1_375,
    NEO_35_2_0,
)

# ──────────────────────────────────────────────────────────────────────────────
# Families
# ──────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ConveyorMagnetFamily:
    slug: str
    name: str
    cross_section_key: str
    magnet_width_in: float
    magnet_height_in: float
    allowed_lengths_in: Tuple[float, ...]
    max_magnets_per_bar: int


STANDARD_FAMILY = ConveyorMagnetFamily(
    slug="standard",
    name="Standard Conveyor",
    cross_section_key="1.00x1.38",
    magnet_width_in=1.0,
    magnet_height_in=1.38,
    allowed_lengths_in=(2.5, 3.5),
    max_magnets_per_bar=12,
)

HEAVY_DUTY_FAMILY = ConveyorMagnetFamily(
    slug="heavy_duty",
    name="Heavy Duty Conveyor",
    cross_section_key="1.00x2.00",
    magnet_width_in=1.0,
    magnet_height_in=2.0,
    allowed_lengths_in=(1.375, 2.0),
    max_magnets_per_bar=16,
)

MAGNET_FAMILIES: Tuple[ConveyorMagnetFamily, ...] = (STANDARD_FAMILY, HEAVY_DUTY_FAMILY)

# ──────────────────────────────────────────────────────────────────────────────
# Reference removal capacities [lb/bar], keyed by OAL → (ceramic, neo)
# ──────────────────────────────────────────────────────────────────────────────
REMOVAL_CAPACITY_REFERENCE: Dict[int, Dict[Tuple[int, int], float]] = {
    12: {(3, 0): 0.362, (2, 1): 0.52, (1, 2): 0.717,
         (0, 3): 0.896, (0, 4): 1.054, (0, 5): 1.192},
    15: {(4, 0): 0.48, (3, 1): 0.621, (2, 2): 0.818,
         (1, 3): 0.976, (0, 4): 1.155, (0, 5): 1.352},
    18: {(5, 0): 0.542, (4, 1): 0.739, (3, 2): 0.88,
         (2, 3): 1.077, (1, 4): 1.274},
    24: {(6, 0): 0.723, (5, 1): 0.92, (4, 2): 1.061,
         (3, 3): 1.258, (2, 4): 1.454},
}

# ──────────────────────────────────────────────────────────────────────────────
def catalog_by_id(items: Iterable[MagnetCatalogItem] = DEFAULT_CATALOG) -> Dict[str, MagnetCatalogItem]:
    """Index catalog items by part number."""
    return {m.part_number: m for m in items}


def family_by_slug(slug: str) -> Optional[ConveyorMagnetFamily]:
    for fam in MAGNET_FAMILIES:
        if fam.slug == slug:
            return fam
    return None


def reference_rows() -> List[Tuple[int, int, int, float]]:
    """Flatten the reference tables into (oal, ceramic, neo, lb) rows."""
    return [
        (oal, ceramic, neo, lb)
        for oal, table in REMOVAL_CAPACITY_REFERENCE.items()
        for (ceramic, neo), lb in table.items()
    ]
