"""Pytest configuration and fixtures."""

from __future__ import annotations

from dataclasses import replace

import pytest

from config import (
    ChipType,
    ConveyorClass,
    ConveyorInputs,
    ConveyorStyle,
    FluidType,
    MagnetType,
    MaterialType,
    TemperatureClass,
)
from catalog import CERAMIC_5_2_5, CERAMIC_5_3_5, NEO_35_2_0


@pytest.fixture
def standard_inputs():
    """Standard class, style B, 12" bars on 12" centers at 30 FPM."""
    return ConveyorInputs(
        style=ConveyorStyle.B,
        conveyor_class=ConveyorClass.STANDARD,
        infeed_length_in=48.0,
        discharge_height_in=100.0,
        incline_angle_deg=60.0,
        discharge_length_in=22.0,
        magnet_width_in=12.0,
        magnet_type=MagnetType.CERAMIC_5,
        magnet_centers_in=12.0,
        belt_speed_fpm=30.0,
        load_lbs_per_hr=1000.0,
        material_type=MaterialType.STEEL,
        chip_type=ChipType.SMALL,
        temperature_class=TemperatureClass.AMBIENT,
        fluid_type=FluidType.WATER_SOLUBLE,
    )


@pytest.fixture
def heavy_duty_inputs(standard_inputs):
    return replace(standard_inputs, conveyor_class=ConveyorClass.HEAVY_DUTY)


@pytest.fixture
def input_mapping():
    """Plain dict as it would come out of a YAML file."""
    return {
        "style": "B",
        "conveyor_class": "standard",
        "infeed_length_in": 48,
        "discharge_height_in": 100,
        "incline_angle_deg": 60,
        "magnet_width_in": 12,
        "magnet_type": "ceramic_5",
        "magnet_centers_in": 12,
        "belt_speed_fpm": 30,
        "load_lbs_per_hr": 1000,
        "material_type": "steel",
        "chip_type": "small",
    }


@pytest.fixture
def ceramic_id():
    return CERAMIC_5_3_5.part_number


@pytest.fixture
def sweeper_id():
    return CERAMIC_5_2_5.part_number


@pytest.fixture
def boost_neo_id():
    return NEO_35_2_0.part_number
