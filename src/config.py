# -*- coding: utf-8 -*-
"""
Central input records for the magnetic conveyor calculator, plus a YAML
loader for batches of inputs.
"""
from __future__ import annotations

from dataclasses import MISSING, dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from constants import DEFAULT_DISCHARGE_LENGTH_IN

# ──────────────────────────────────────────────────────────────────────────────
# Closed value sets
# ──────────────────────────────────────────────────────────────────────────────
class ConveyorStyle(str, Enum):
    A = "A"    # horiz → incline → horiz, standard body
    B = "B"    # horiz → incline → horiz, alternate body
    C = "C"    # horizontal only
    D = "D"    # incline primary, minimal infeed


class ConveyorClass(str, Enum):
    STANDARD = "standard"       # C2040 chain
    HEAVY_DUTY = "heavy_duty"   # C2060H chain


class MagnetType(str, Enum):
    CERAMIC_5 = "ceramic_5"
    CERAMIC_8 = "ceramic_8"
    NEO_35 = "neo_35"
    NEO_50 = "neo_50"


class ChipType(str, Enum):
    SMALL = "small"
    STRINGERS = "stringers"
    BIRD_NESTS = "bird_nests"
    SAW_FINES = "saw_fines"
    PARTS = "parts"
    STEEL_FIBER = "steel_fiber"


class MaterialType(str, Enum):
    STEEL = "steel"
    CAST_IRON = "cast_iron"
    ALUMINUM = "aluminum"
    STAINLESS_STEEL = "stainless_steel"


class TemperatureClass(str, Enum):
    AMBIENT = "ambient"
    WARM = "warm"
    RED_HOT = "red_hot"


class FluidType(str, Enum):
    NONE = "none"
    WATER_SOLUBLE = "water_soluble"
    OIL_BASED = "oil_based"
    MINIMAL_RESIDUAL_OIL = "minimal_residual_oil"


class ChipDelivery(str, Enum):
    CHIP_CHUTE = "chip_chute"
    VIBRATING_FEEDER = "vibrating_feeder"
    ALONG_INFEED = "along_infeed"


class SupportType(str, Enum):
    FIXED_LEGS = "fixed_legs"
    ADJUSTABLE_LEGS = "adjustable_legs"
    CASTERS = "casters"
    FOOT_PADS = "foot_pads"
    LEVELING_FEET = "leveling_feet"


class PatternMode(str, Enum):
    ALL_SAME = "all_same"
    ALTERNATING = "alternating"
    INTERVAL = "interval"

# ──────────────────────────────────────────────────────────────────────────────
# Bar configuration handed over by the bar builder
# ──────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class BarConfiguration:
    bar_capacity_lb: float                      # corrected capacity of the primary bar [lb]
    ceramic_count: int = 0
    neo_count: int = 0
    pattern_mode: PatternMode = PatternMode.ALL_SAME
    secondary_bar_capacity_lb: Optional[float] = None
    interval_count: int = 4

# ──────────────────────────────────────────────────────────────────────────────
# Conveyor inputs (all lengths in inches, angles in degrees)
# ──────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ConveyorInputs:
    style: ConveyorStyle
    conveyor_class: ConveyorClass
    # Geometry
    infeed_length_in: float
    discharge_height_in: float
    incline_angle_deg: float
    # Magnets
    magnet_width_in: float
    magnet_type: MagnetType
    magnet_centers_in: float          # pitch between bars
    # Operation
    belt_speed_fpm: float
    load_lbs_per_hr: float
    material_type: MaterialType
    chip_type: ChipType
    discharge_length_in: float = DEFAULT_DISCHARGE_LENGTH_IN
    temperature_class: Optional[TemperatureClass] = None
    fluid_type: Optional[FluidType] = None
    chip_delivery: Optional[ChipDelivery] = None
    support_type: Optional[SupportType] = None
    # Power-user overrides (None → class default)
    coefficient_of_friction: Optional[float] = None
    safety_factor: Optional[float] = None
    starting_belt_pull_lb: Optional[float] = None
    chain_weight_lb_per_ft: Optional[float] = None
    bar_configuration: Optional[BarConfiguration] = None

    @property
    def is_horizontal_only(self) -> bool:
        return self.style == ConveyorStyle.C

    @property
    def effective_angle_deg(self) -> float:
        """Incline angle actually used; style C is forced flat."""
        return 0.0 if self.is_horizontal_only else self.incline_angle_deg

    @property
    def effective_height_in(self) -> float:
        """Discharge height actually used; style C is forced to 0."""
        return 0.0 if self.is_horizontal_only else self.discharge_height_in

    @property
    def effective_discharge_length_in(self) -> float:
        return 0.0 if self.is_horizontal_only else self.discharge_length_in

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "ConveyorInputs":
        """Build inputs from a plain dict (YAML/JSON); unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        params = {k: v for k, v in data.items() if k in known}

        missing = [f.name for f in fields(cls)
                   if f.name not in params and f.default is MISSING and f.default_factory is MISSING]
        if missing:
            raise ValueError(f"Missing required input fields: {', '.join(missing)}")

        for name, enum_cls in _ENUM_FIELDS.items():
            value = params.get(name)
            if value is not None:
                params[name] = _coerce_enum(enum_cls, value, name)

        if params.get("discharge_length_in") is None:
            params.pop("discharge_length_in", None)

        bar = params.get("bar_configuration")
        if isinstance(bar, dict):
            bar_known = {f.name for f in fields(BarConfiguration)}
            # null fields fall back to the dataclass defaults
            bar_params = {k: v for k, v in bar.items() if k in bar_known and v is not None}
            if "pattern_mode" in bar_params:
                bar_params["pattern_mode"] = _coerce_enum(
                    PatternMode, bar_params["pattern_mode"], "pattern_mode")
            params["bar_configuration"] = BarConfiguration(**bar_params)

        return cls(**params)


_ENUM_FIELDS = {
    "style": ConveyorStyle,
    "conveyor_class": ConveyorClass,
    "magnet_type": MagnetType,
    "material_type": MaterialType,
    "chip_type": ChipType,
    "temperature_class": TemperatureClass,
    "fluid_type": FluidType,
    "chip_delivery": ChipDelivery,
    "support_type": SupportType,
}


def _coerce_enum(enum_cls, value, name: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValueError(f"Invalid {name} {value!r}; expected one of: {allowed}") from None

# ──────────────────────────────────────────────────────────────────────────────
# Utility: load conveyor inputs from a YAML file
# ──────────────────────────────────────────────────────────────────────────────
def load_inputs(path: Path) -> List[ConveyorInputs]:
    """
    Load one or more ConveyorInputs from a YAML file. The file may hold a
    single mapping or a list of mappings.

    Example YAML:
      - style: B
        conveyor_class: standard
        infeed_length_in: 48
        discharge_height_in: 100
        incline_angle_deg: 60
        ...
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    data = yaml.safe_load(path.read_text())
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a mapping or a list of mappings")

    records = []
    for idx, entry in enumerate(data, 1):
        if not isinstance(entry, dict):
            raise ValueError(f"Entry {idx} in {path} is not a mapping")
        records.append(ConveyorInputs.from_mapping(entry))
    return records
