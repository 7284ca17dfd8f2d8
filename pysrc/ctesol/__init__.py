"""ctesol - Solar geometry and irradiance on building surfaces.

Computes the position of the sun, the angle of incidence on inclined
surfaces and the ISO 52010-1 (Perez) split of measured horizontal beam and
diffuse irradiance into direct, diffuse and ground-reflected irradiance on
any surface, with monthly accumulation and the reference climates of the
Spanish building code (CTE).

Quick start::

    import ctesol

    obs = ctesol.HourlyObservation(month=7, day=17, hour=12, beam_horizontal=650, diffuse_horizontal=120)
    location = ctesol.Location(latitude=40.7)
    result = ctesol.compute_irradiance(obs, location, ctesol.Surface.vertical(0.0, name="S"))
    print(f"Direct {result.direct:.0f} W/m², diffuse {result.diffuse:.0f} W/m²")

Weather files::

    observations, location = ctesol.io.load_met("zonaD3.met")
    results = ctesol.radiation_for_surface(observations, location, ctesol.Surface.horizontal())
    monthly = ctesol.monthly_accumulation(results)

Model selection::

    config = ctesol.ModelConfig(model="duffie")
"""

import logging
from importlib.metadata import PackageNotFoundError, version

logger = logging.getLogger(__name__)

# Version: single source of truth is pyproject.toml
try:
    __version__ = version("ctesol")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"  # Fallback for source checkouts without metadata

from . import cte, io  # noqa: E402
from .angles import acosd, asind, atand, cosd, sind, tand, wrap_angle  # noqa: E402
from .dates import day_of_year  # noqa: E402
from .errors import ConfigurationError, CtesolError, DomainError, WeatherDataError  # noqa: E402
from .irradiance import (  # noqa: E402
    compute_irradiance,
    radiation_for_surface,
    sun_position_for,
    total_diffuse_irradiance,
    total_direct_irradiance,
    total_irradiance,
)
from .models import (  # noqa: E402
    STANDARD_ORIENTATIONS,
    HourlyObservation,
    IrradianceResult,
    Location,
    ModelConfig,
    MonthlyIrradiation,
    Surface,
    SunPosition,
)
from .solar_model import DuffieBeckmanModel, Iso52010Model, SolarModel, get_model  # noqa: E402
from .summary import monthly_accumulation  # noqa: E402

__all__ = [
    "__version__",
    # Modules
    "cte",
    "io",
    # Angles and dates
    "sind",
    "cosd",
    "tand",
    "asind",
    "acosd",
    "atand",
    "wrap_angle",
    "day_of_year",
    # Errors
    "CtesolError",
    "DomainError",
    "WeatherDataError",
    "ConfigurationError",
    # Data models
    "Location",
    "HourlyObservation",
    "Surface",
    "STANDARD_ORIENTATIONS",
    "ModelConfig",
    "SunPosition",
    "IrradianceResult",
    "MonthlyIrradiation",
    # Solar models
    "SolarModel",
    "Iso52010Model",
    "DuffieBeckmanModel",
    "get_model",
    # Irradiance
    "sun_position_for",
    "compute_irradiance",
    "total_direct_irradiance",
    "total_diffuse_irradiance",
    "total_irradiance",
    "radiation_for_surface",
    "monthly_accumulation",
]
