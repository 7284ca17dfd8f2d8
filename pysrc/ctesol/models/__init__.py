"""Data models for irradiance calculations.

Modules
-------
weather
    ``Location`` and ``HourlyObservation`` dataclasses.
surface
    ``Surface`` orientation and the standard CTE orientations.
config
    ``ModelConfig`` run-time settings.
results
    ``SunPosition``, ``IrradianceResult`` and ``MonthlyIrradiation``.
"""

from .config import ModelConfig
from .results import IrradianceResult, MonthlyIrradiation, SunPosition
from .surface import STANDARD_ORIENTATIONS, Surface, orientation
from .weather import HourlyObservation, Location

__all__ = [
    # Weather and location
    "Location",
    "HourlyObservation",
    # Surfaces
    "Surface",
    "STANDARD_ORIENTATIONS",
    "orientation",
    # Configuration
    "ModelConfig",
    # Results
    "SunPosition",
    "IrradianceResult",
    "MonthlyIrradiation",
]
