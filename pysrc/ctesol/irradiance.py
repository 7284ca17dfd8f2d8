"""
Irradiance on inclined surfaces from measured horizontal irradiance.

For each hourly observation the sun position is computed (a measured zenith
replaces the computed altitude). The measured beam and diffuse horizontal
irradiance are split with the Perez model and regrouped as in ISO 52010-1
eqs. 37-39:

- total direct = beam on the surface + circumsolar
- total diffuse = sky diffuse - circumsolar + ground reflected
- total = total direct + total diffuse

The circumsolar part is counted once, as direct irradiance.

Example:
    >>> obs = HourlyObservation(month=7, day=15, hour=12, beam_horizontal=650, diffuse_horizontal=120)
    >>> loc = Location(latitude=40.7)
    >>> result = compute_irradiance(obs, loc, Surface.vertical(0.0))
    >>> result.direct, result.diffuse
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from .ctesol_logging import get_logger
from .dates import day_of_year
from .errors import DomainError
from .models.config import ModelConfig
from .models.results import IrradianceResult, SunPosition
from .models.surface import Surface
from .models.weather import HourlyObservation, Location
from .physics import perez
from .physics.geometry import beam_normal_from_horizontal
from .solar_model import get_model

logger = get_logger(__name__)


def sun_position_for(
    observation: HourlyObservation,
    location: Location,
    config: ModelConfig | None = None,
) -> SunPosition:
    """
    Sun position for an observation.

    The declination, hour angle and azimuth are always computed, and so is
    the angle of incidence derived from them. When the observation carries
    a measured sun position, its zenith replaces the computed altitude used
    to split the horizontal irradiance. The measured azimuth is not used.

    Args:
        observation: Hourly observation
        location: Location of the weather station
        config: Model configuration (default: ModelConfig.defaults())

    Returns:
        SunPosition in the package-wide conventions
    """
    config = config or ModelConfig.defaults()
    model = get_model(config.model)
    nday = day_of_year(observation.month, observation.day)
    if config.use_solar_time:
        solar_hour = model.solar_time(observation.hour, nday, location)
    else:
        solar_hour = observation.hour
    position = model.sun_position(nday, solar_hour, location.latitude)
    if observation.has_sun_position:
        position = replace(position, altitude=90.0 - observation.sun_zenith)
    return position


def compute_irradiance(
    observation: HourlyObservation,
    location: Location,
    surface: Surface,
    config: ModelConfig | None = None,
    albedo: float | None = None,
) -> IrradianceResult:
    """
    Direct and diffuse irradiance on a surface for one hour, with its breakdown.

    Args:
        observation: Hourly observation with beam and diffuse horizontal irradiance
        location: Location of the weather station
        surface: Receiving surface
        config: Model configuration (default: ModelConfig.defaults())
        albedo: Ground reflectance. Overrides the surface and configuration albedo.

    Returns:
        IrradianceResult, W/m²

    Raises:
        DomainError: If the albedo is outside [0, 1] or an intermediate angle leaves its valid range.
        ConfigurationError: If solar time is requested for a location without UTC offset.
    """
    config = config or ModelConfig.defaults()
    model = get_model(config.model)
    if albedo is None:
        albedo = surface.albedo if surface.albedo is not None else config.albedo
    if not 0 <= albedo <= 1:
        raise DomainError("albedo", albedo, "must be in [0, 1]")

    position = sun_position_for(observation, location, config)
    incidence = model.incidence_angle(position, location.latitude, surface)

    zenith = position.zenith
    if zenith > config.horizon_zenith:
        logger.debug(
            f"{observation.month:02d}-{observation.day:02d} h{observation.hour:g}: "
            f"zenith {zenith:.2f}° capped at {config.horizon_zenith}°"
        )
        zenith = config.horizon_zenith
    altitude = 90.0 - zenith

    nday = position.day_of_year
    diffuse = observation.diffuse_horizontal
    beam = beam_normal_from_horizontal(observation.beam_horizontal, altitude)

    direct = perez.direct_on_surface(beam, incidence)
    circumsolar = perez.circumsolar_on_surface(beam, diffuse, altitude, incidence, nday, model.solar_constant)
    sky = perez.diffuse_on_surface(beam, diffuse, altitude, incidence, surface.tilt, nday, model.solar_constant)
    ground = perez.ground_reflected_on_surface(beam, diffuse, altitude, surface.tilt, albedo)

    return IrradianceResult(
        month=observation.month,
        day=observation.day,
        hour=observation.hour,
        direct=direct + circumsolar,
        diffuse=sky - circumsolar + ground,
        beam=direct,
        circumsolar=circumsolar,
        sky_diffuse=sky,
        ground_reflected=ground,
    )


def total_direct_irradiance(
    observation: HourlyObservation,
    location: Location,
    surface: Surface,
    config: ModelConfig | None = None,
) -> float:
    """Total direct irradiance (beam + circumsolar) on a surface, W/m² (ISO 52010-1 eq. 37)."""
    return compute_irradiance(observation, location, surface, config).direct


def total_diffuse_irradiance(
    observation: HourlyObservation,
    location: Location,
    surface: Surface,
    config: ModelConfig | None = None,
    albedo: float | None = None,
) -> float:
    """
    Total diffuse irradiance on a surface, W/m² (ISO 52010-1 eq. 38).

    Sky diffuse minus the circumsolar part (counted as direct) plus the
    ground-reflected irradiance.
    """
    return compute_irradiance(observation, location, surface, config, albedo).diffuse


def total_irradiance(
    observation: HourlyObservation,
    location: Location,
    surface: Surface,
    config: ModelConfig | None = None,
    albedo: float | None = None,
) -> float:
    """Total irradiance on a surface, W/m² (ISO 52010-1 eq. 39)."""
    return compute_irradiance(observation, location, surface, config, albedo).total


def radiation_for_surface(
    observations: Iterable[HourlyObservation],
    location: Location,
    surface: Surface,
    config: ModelConfig | None = None,
    albedo: float | None = None,
) -> list[IrradianceResult]:
    """
    Irradiance on a surface for a series of observations.

    Each hour is independent; the order of the results follows the input.

    Args:
        observations: Hourly observations, e.g. from :func:`ctesol.io.observations_from_met`
        location: Location of the weather station
        surface: Receiving surface
        config: Model configuration (default: ModelConfig.defaults())
        albedo: Ground reflectance override

    Returns:
        One IrradianceResult per observation
    """
    config = config or ModelConfig.defaults()
    results = [compute_irradiance(obs, location, surface, config, albedo) for obs in observations]
    label = surface.name or f"tilt {surface.tilt:g}° azimuth {surface.azimuth:g}°"
    logger.debug(f"Computed {len(results)} hourly results for surface {label} ({config.model})")
    return results
