"""
Solar position after Duffie & Beckman.

Conventions are those of the book: hour angle zero at solar noon, morning
negative and afternoon positive; azimuths from south, east negative and
west positive. Longitudes in :func:`solar_to_standard_time_correction` are
measured west positive, as in eq. 1.5.2.

Reference:
    Duffie, J.A. & Beckman, W.A. (2013). Solar Engineering of Thermal
    Processes, 4th ed. Wiley. Chapter 1.
"""

from __future__ import annotations

import math

import numpy as np

from ..angles import acosd, clip_unit, cosd, sind, tand
from ..constants import G_SC_DUFFIE
from ..dates import day_angle

SECONDS_PER_DAY = 24 * 3600


def equation_of_time(nday: float) -> float:
    """
    Equation of time, minutes. Spencer (1971), eq. 1.5.3.

    Args:
        nday: Day of the year [1, 366]
    """
    bb = day_angle(nday)
    return 229.2 * float(
        0.000075
        + 0.001868 * cosd(bb)
        - 0.032077 * sind(bb)
        - 0.014615 * cosd(2 * bb)
        - 0.04089 * sind(2 * bb)
    )


def solar_to_standard_time_correction(standard_meridian: float, longitude: float, nday: float) -> float:
    """
    Solar time minus standard time, hours (eq. 1.5.2).

    Standard time does not include daylight saving time.

    Args:
        standard_meridian: Standard meridian of the time zone, degrees, west positive [0, 360)
        longitude: Longitude of the location, degrees, west positive [0, 360)
        nday: Day of the year [1, 366]
    """
    return (4 * (standard_meridian - longitude) + equation_of_time(nday)) / 60.0


def declination(nday: float) -> float:
    """Declination, degrees in [-23.45, 23.45]. Cooper (1969), eq. 1.6.1a."""
    return 23.45 * float(sind((284 + nday) * 360.0 / 365.0))


def hour_angle(solar_hour: float) -> float:
    """Hour angle, degrees: 15° per hour, zero at solar noon, morning negative."""
    return 15.0 * (solar_hour - 12.0)


def hour_angle_to_time(hangle: float) -> float:
    """Solar hour for an hour angle. Converts sunrise/sunset hour angles to times."""
    return 12.0 + hangle / 15.0


def sun_zenith(latitude: float, delta: float, hangle: float) -> float:
    """
    Solar zenith, degrees (eq. 1.6.5). In [0, 90] while the sun is above the horizon.

    Args:
        latitude: Latitude, degrees, north positive
        delta: Declination, degrees
        hangle: Hour angle, degrees
    """
    return float(acosd(clip_unit(cosd(latitude) * cosd(delta) * cosd(hangle) + sind(latitude) * sind(delta))))


def sun_azimuth(latitude: float, delta: float, hangle: float, zenith: float) -> float:
    """
    Solar azimuth, degrees in [-180, 180], east negative (eq. 1.6.6).

    The sign follows the hour angle. Returns 0 at the zenith and at the poles,
    where the azimuth is undefined.
    """
    denom = float(sind(zenith) * cosd(latitude))
    if abs(denom) < 1e-12:
        return 0.0
    sign = 1.0 if hangle >= 0 else -1.0
    return sign * abs(float(acosd(clip_unit((cosd(zenith) * sind(latitude) - sind(delta)) / denom))))


def sunset_hour_angle(latitude: float, delta: float) -> float:
    """
    Sunset hour angle, degrees (eq. 1.6.10). Sunrise is its negative.

    Clamped to 0 (polar night) or 180 (midnight sun) at high latitudes.
    """
    return float(acosd(clip_unit(-tand(latitude) * tand(delta))))


def daylight_hours(latitude: float, delta: float) -> float:
    """Number of daylight hours (eq. 1.6.11)."""
    return 2.0 * sunset_hour_angle(latitude, delta) / 15.0


def extraterrestrial_normal(nday: float, solar_constant: float = G_SC_DUFFIE) -> float:
    """Extraterrestrial irradiance on the plane normal to the beam, W/m² (eq. 1.4.1a)."""
    return solar_constant * (1 + 0.033 * float(cosd(360.0 * nday / 365.0)))


def daily_extraterrestrial_horizontal(latitude: float, nday: float, solar_constant: float = G_SC_DUFFIE) -> float:
    """
    Daily extraterrestrial irradiation on a horizontal plane H_o, J/m² (eq. 1.10.3).

    Args:
        latitude: Latitude, degrees
        nday: Day of the year [1, 366]
        solar_constant: Solar constant, W/m²
    """
    delta = declination(nday)
    ws = sunset_hour_angle(latitude, delta)
    return (
        SECONDS_PER_DAY
        / math.pi
        * extraterrestrial_normal(nday, solar_constant)
        * float(
            cosd(latitude) * cosd(delta) * sind(ws)
            + math.pi * ws / 180.0 * sind(latitude) * sind(delta)
        )
    )


def hourly_extraterrestrial_horizontal(
    latitude: float,
    nday: float,
    hour_start: float,
    hour_end: float | None = None,
    solar_constant: float = G_SC_DUFFIE,
) -> float:
    """
    Extraterrestrial irradiation on a horizontal plane between two solar hours I_o, J/m² (eq. 1.10.4).

    Args:
        latitude: Latitude, degrees
        nday: Day of the year [1, 366]
        hour_start: Solar hour at the start of the period
        hour_end: Solar hour at the end of the period (default: one hour later)
        solar_constant: Solar constant, W/m²

    Example:
        >>> hourly_extraterrestrial_horizontal(43, 105, 10) / 1e6  # April 15, 10-11 h
        3.79...
    """
    if hour_end is None:
        hour_end = hour_start + 1
    w1 = hour_angle(hour_start)
    w2 = hour_angle(hour_end)
    delta = declination(nday)
    return (
        SECONDS_PER_DAY
        / 2
        / math.pi
        * extraterrestrial_normal(nday, solar_constant)
        * float(
            cosd(latitude) * cosd(delta) * (sind(w2) - sind(w1))
            + math.pi * (w2 - w1) / 180.0 * sind(latitude) * sind(delta)
        )
    )


def hourly_sun_path(latitude: float, nday: int) -> np.ndarray:
    """
    Zenith and azimuth at the middle of each hour of a day.

    Returns:
        Array of shape (24, 3) with columns (solar hour, zenith, azimuth)
    """
    delta = declination(nday)
    rows = []
    for hour in np.arange(0.5, 24.0, 1.0):
        hangle = hour_angle(hour)
        zen = sun_zenith(latitude, delta, hangle)
        rows.append((hour, zen, sun_azimuth(latitude, delta, hangle, zen)))
    return np.array(rows, dtype=float)
