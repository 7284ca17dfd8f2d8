"""
Physical constants and numerical guards for ctesol.

This module consolidates the constants shared by the solar position and
irradiance modules, with references to the formulas that use them.
"""

import math

# =============================================================================
# Physical Constants
# =============================================================================

# Solar constant (W/m²)
# ISO 52010-1:2017 uses 1370 W/m²; Duffie & Beckman (2013) use 1367 W/m².
# A computation must keep one value throughout (see solar_model.py).
G_SC_ISO = 1370.0
G_SC_DUFFIE = 1367.0

# Perez clearness parameter constant K (rad^-3), ISO 52010-1 table 9
K_CLEARNESS = 1.014


# =============================================================================
# Unit Conversions
# =============================================================================

TO_RAD = math.pi / 180.0
TO_DEG = 180.0 / math.pi

# Wh to kWh conversion factor (monthly accumulation)
WH_TO_KWH = 1e-3


# =============================================================================
# Numerical Guards
# =============================================================================

# Solar altitudes below this value (degrees) are set to exactly 0
MIN_SOLAR_ALTITUDE_DEG = 0.0001

# Diffuse irradiance below this value (W/m²) means a fully clear sky
MIN_DIFFUSE_IRRADIANCE = 0.01

# Clearness parameter returned when there is no diffuse irradiance
CLEAR_SKY_CLEARNESS = 999.0

# Zenith bound for the circumsolar b parameter, b = max(cos 85°, cos zenith)
CIRCUMSOLAR_MAX_ZENITH_DEG = 85.0

# Zenith used in place of a sun at or below the horizon when splitting
# measured irradiance (division by sin(altitude))
HORIZON_ZENITH_DEG = 89.5

# Air mass switches to the Kasten-Young correction below this altitude
AIR_MASS_ALTITUDE_LIMIT_DEG = 10.0


# =============================================================================
# Defaults
# =============================================================================

# Non-leap year used to convert (month, day) into a day of the year
REFERENCE_YEAR = 2001

# Ground reflectance, ISO 52010-1 Annex B default
DEFAULT_ALBEDO = 0.2


__all__ = [
    "G_SC_ISO",
    "G_SC_DUFFIE",
    "K_CLEARNESS",
    "TO_RAD",
    "TO_DEG",
    "WH_TO_KWH",
    "MIN_SOLAR_ALTITUDE_DEG",
    "MIN_DIFFUSE_IRRADIANCE",
    "CLEAR_SKY_CLEARNESS",
    "CIRCUMSOLAR_MAX_ZENITH_DEG",
    "HORIZON_ZENITH_DEG",
    "AIR_MASS_ALTITUDE_LIMIT_DEG",
    "REFERENCE_YEAR",
    "DEFAULT_ALBEDO",
]
