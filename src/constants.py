# -*- coding: utf-8 -*-
"""
Calculation constants, thresholds and limits for the magnetic conveyor.

Everything that is a fitted or catalog-derived number lives here so it can
be recalibrated without touching the formulas.
"""

# ──────────────────────────────────────────────────────────────────────────────
# Magnet bar weight (REV-1 linear fit against catalog weights)
# ──────────────────────────────────────────────────────────────────────────────
MAGNET_WEIGHT_INTERCEPT = 0.22    # [lb]
MAGNET_WEIGHT_SLOPE = 0.5312      # [lb per inch of bar width]

# ──────────────────────────────────────────────────────────────────────────────
# Shared drive constants
# ──────────────────────────────────────────────────────────────────────────────
STARTING_BELT_PULL_LB = 100.0     # fixed for both classes
MOTOR_BASE_RPM = 1750.0           # standard 4-pole gearmotor
DEFAULT_DISCHARGE_LENGTH_IN = 22.0

# ──────────────────────────────────────────────────────────────────────────────
# Bar capacity defaults (effective lb removed per magnet, net of efficiency)
# ──────────────────────────────────────────────────────────────────────────────
CERAMIC_CAPACITY_LB = 0.1207      # 0.362 lb / 3 magnets on a 12" bar
NEO_CAPACITY_LB = 0.298

DEFAULT_GAP_IN = 0.25
DEFAULT_END_CLEARANCE_IN = 0.0
DEFAULT_LEFTOVER_TOLERANCE_IN = 0.25

# Fallback bar when no bar configuration is supplied
FALLBACK_CERAMIC_LENGTH_IN = 3.5
FALLBACK_GAP_IN = 0.25

# ──────────────────────────────────────────────────────────────────────────────
# Heavy-Duty suggestion thresholds (only checked on the Standard class)
# ──────────────────────────────────────────────────────────────────────────────
HEAVY_DUTY_THRESHOLDS = {
    "magnet_width_in": 24.0,
    "load_lbs_per_hr": 5000.0,
    "discharge_height_in": 200.0,
    "chain_length_in": 500.0,
}

# ──────────────────────────────────────────────────────────────────────────────
# Geometry / operating limits
# ──────────────────────────────────────────────────────────────────────────────
GEOMETRY_LIMITS = {
    "min_angle_deg": 0.0,
    "max_angle_deg": 90.0,
    "min_belt_speed_fpm": 6.0,
    "max_belt_speed_fpm": 120.0,
    "min_infeed_warning_in": 39.0,   # below this: custom tail tracks
}

# Minimum achieved/required throughput ratio before an undersize warning
THROUGHPUT_MARGIN_THRESHOLDS = {
    "chips": 1.5,
    "parts": 1.25,
}

STANDARD_MAGNET_WIDTHS_IN = (5, 6, 7.5, 8.5, 9.5, 10, 12, 12.5, 14, 15, 18, 24, 30)
SUPPORTED_OAL_VALUES_IN = (12, 15, 18, 24, 30)
SUPPORTED_CENTER_SPACING_IN = (12, 18, 24, 36)
