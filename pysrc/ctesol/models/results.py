"""Result data models."""

from __future__ import annotations

import calendar
from dataclasses import dataclass


@dataclass(frozen=True)
class SunPosition:
    """
    Position of the sun for one hour.

    Angles use the package-wide conventions: hour angle zero at solar noon,
    negative in the morning; azimuth zero due south, east negative, west
    positive, in (-180, 180].

    Attributes:
        day_of_year: Day of the year [1, 366].
        solar_hour: Solar hour the position was computed for.
        declination: Solar declination, degrees.
        hour_angle: Hour angle, degrees.
        altitude: Solar altitude, degrees. Negative or 0 when the sun is below the horizon.
        azimuth: Solar azimuth, degrees.
    """

    day_of_year: int
    solar_hour: float
    declination: float
    hour_angle: float
    altitude: float
    azimuth: float

    @property
    def zenith(self) -> float:
        """Solar zenith, degrees (90 - altitude)."""
        return 90.0 - self.altitude

    @property
    def is_above_horizon(self) -> bool:
        return self.altitude > 0.0


@dataclass(frozen=True)
class IrradianceResult:
    """
    Irradiance on an inclined surface for one hour.

    Attributes:
        month: Month of the observation.
        day: Day of the month.
        hour: Hour of the observation.
        direct: Total direct irradiance (beam + circumsolar), W/m².
        diffuse: Total diffuse irradiance (sky - circumsolar + ground reflected), W/m².
        beam: Beam part of the direct irradiance, W/m².
        circumsolar: Circumsolar part of the direct irradiance, W/m².
        sky_diffuse: Sky diffuse irradiance before the circumsolar part is removed, W/m².
        ground_reflected: Ground-reflected irradiance, W/m².
    """

    month: int
    day: int
    hour: float
    direct: float
    diffuse: float
    beam: float = 0.0
    circumsolar: float = 0.0
    sky_diffuse: float = 0.0
    ground_reflected: float = 0.0

    @property
    def total(self) -> float:
        """Total irradiance on the surface, W/m²."""
        return self.direct + self.diffuse


@dataclass(frozen=True)
class MonthlyIrradiation:
    """
    Irradiation on a surface accumulated over one month.

    Attributes:
        month: Month [1, 12].
        direct: Direct irradiation, kWh/m².
        diffuse: Diffuse irradiation, kWh/m².
        hours: Number of hourly results accumulated.
        days: Number of distinct days seen in the results.
    """

    month: int
    direct: float
    diffuse: float
    hours: int
    days: int

    @property
    def total(self) -> float:
        """Total irradiation, kWh/m²."""
        return self.direct + self.diffuse

    @property
    def month_name(self) -> str:
        return calendar.month_abbr[self.month]

    def daily_mean(self) -> float:
        """
        Mean daily total irradiation over the days present, kWh/m²/day.

        Returns 0 for an empty month.
        """
        if self.days == 0:
            return 0.0
        return self.total / self.days
