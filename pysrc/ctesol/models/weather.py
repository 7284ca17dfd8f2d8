"""Weather and location data models."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..errors import DomainError, WeatherDataError


@dataclass(frozen=True)
class Location:
    """
    Geographic location of a weather station.

    Attributes:
        latitude: Latitude in degrees (north positive).
        longitude: Longitude in degrees (east positive).
        elevation_km: Elevation above sea level in km. Default 0.
        utc_offset: Clock time relative to UTC in hours. Only needed when
            clock hours are converted to solar time. Default None.
    """

    latitude: float
    longitude: float = 0.0
    elevation_km: float = 0.0
    utc_offset: float | None = None

    def __post_init__(self):
        if not -90 <= self.latitude <= 90:
            raise DomainError("latitude", self.latitude, "must be in [-90, 90]")
        if not -180 <= self.longitude <= 180:
            raise DomainError("longitude", self.longitude, "must be in [-180, 180]")
        if self.elevation_km < 0:
            raise DomainError("elevation_km", self.elevation_km, "must be >= 0")
        if self.utc_offset is not None and not -12 <= self.utc_offset <= 14:
            raise DomainError("utc_offset", self.utc_offset, "must be in [-12, 14]")


@dataclass(frozen=True)
class HourlyObservation:
    """
    Measured irradiance for one hour.

    Attributes:
        month: Month [1, 12].
        day: Day of the month [1, 31].
        hour: Hour of the day [0, 24]. Solar hour unless the model configuration
            asks for clock time.
        beam_horizontal: Direct (beam) irradiance on the horizontal plane, W/m².
        diffuse_horizontal: Diffuse irradiance on the horizontal plane, W/m².
        sun_azimuth: Measured solar azimuth, degrees. Optional, kept for reference only.
        sun_zenith: Measured solar zenith, degrees. Optional.

    When both are given, sun_zenith replaces the computed solar altitude in
    the irradiance split. The incidence angle is always computed.
    """

    month: int
    day: int
    hour: float
    beam_horizontal: float
    diffuse_horizontal: float
    sun_azimuth: float | None = None
    sun_zenith: float | None = None

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise WeatherDataError("month", self.month, "must be in [1, 12]")
        if not 1 <= self.day <= 31:
            raise WeatherDataError("day", self.day, "must be in [1, 31]")
        if not 0 <= self.hour <= 24:
            raise WeatherDataError("hour", self.hour, "must be in [0, 24]")
        for name in ("beam_horizontal", "diffuse_horizontal"):
            value = getattr(self, name)
            if math.isnan(value) or value < 0:
                raise WeatherDataError(name, value, "irradiance must be >= 0")
        if self.sun_azimuth is not None and not -180 <= self.sun_azimuth <= 180:
            raise WeatherDataError("sun_azimuth", self.sun_azimuth, "must be in [-180, 180]")
        if self.sun_zenith is not None and not 0 <= self.sun_zenith <= 180:
            raise WeatherDataError("sun_zenith", self.sun_zenith, "must be in [0, 180]")

    @property
    def has_sun_position(self) -> bool:
        """True when the observation carries a measured sun position."""
        return self.sun_azimuth is not None and self.sun_zenith is not None

    @property
    def global_horizontal(self) -> float:
        """Global irradiance on the horizontal plane, W/m²."""
        return self.beam_horizontal + self.diffuse_horizontal
