"""
Solar position after ISO 52010-1:2017, section 6.4.1.

Angles follow the conventions of the standard:
- hour angle positive in the morning (eq. 10), zero at the middle of hour
  section 13 (solar time 12.5 as the end of the section)
- azimuths measured from south, east positive, west negative (eqs. 13-16)

:mod:`ctesol.solar_model` converts these to the package-wide convention
(east negative) at its boundary.

Reference:
    ISO 52010-1:2017 - Energy performance of buildings. External climatic
    conditions. Part 1: Conversion of climatic data for energy calculations.
"""

from __future__ import annotations

import math

import numpy as np

from ..angles import asind, clip_unit, cosd, sind, wrap_angle
from ..constants import MIN_SOLAR_ALTITUDE_DEG


def earth_orbit_deviation(nday: float) -> float:
    """Earth orbit deviation R_dc = 360 n / 365, degrees (eq. 2)."""
    return nday * 360.0 / 365.0


def declination(nday: float) -> float:
    """
    Solar declination, degrees, approximately in [-23.45, 23.45] (eq. 1).

    Angular position of the sun at solar noon with respect to the plane of
    the equator, north positive.

    Args:
        nday: Day of the year [1, 366]
    """
    rdc = earth_orbit_deviation(nday)
    return float(
        0.33281
        - 22.984 * cosd(rdc)
        - 0.3499 * cosd(2 * rdc)
        - 0.1398 * cosd(3 * rdc)
        + 3.7872 * sind(rdc)
        + 0.03205 * sind(2 * rdc)
        + 0.07187 * sind(3 * rdc)
    )


def equation_of_time(nday: float) -> float:
    """
    Equation of time, minutes (eqs. 3-7).

    Five-piece empirical fit; the bucket limits 21, 136, 241 and 336 are
    part of the fit.

    Args:
        nday: Day of the year [1, 366]
    """
    if nday < 21:
        return 2.6 + 0.44 * nday
    if nday < 136:
        return 5.2 + 9 * math.cos((nday - 43) * 0.0357)
    if nday < 241:
        return 1.4 - 5 * math.cos((nday - 135) * 0.0449)
    if nday < 336:
        return -6.3 - 10 * math.cos((nday - 306) * 0.036)
    return 0.45 * (nday - 359)


def time_shift(utc_offset: float, longitude: float) -> float:
    """
    Time shift, hours (eq. 8).

    Args:
        utc_offset: Clock time of the location relative to UTC, hours [-12, 12]
        longitude: Longitude of the weather station, degrees, east positive
    """
    return utc_offset - longitude / 15.0


def solar_time(clock_hour: float, nday: float, utc_offset: float, longitude: float) -> float:
    """
    Solar time for a clock hour, hours (eq. 9).

    Args:
        clock_hour: Clock hour of the location [1, 24] (end of the hour section)
        nday: Day of the year [1, 366]
        utc_offset: Clock time of the location relative to UTC, hours
        longitude: Longitude of the weather station, degrees, east positive
    """
    return clock_hour - equation_of_time(nday) / 60.0 - time_shift(utc_offset, longitude)


def hour_angle(tsol: float) -> float:
    """
    Solar hour angle, degrees in (-180, 180] (eq. 10).

    The hour numbers are hour sections: section N runs from N-1 to N, so the
    mean position of the sun for section N is at N - 0.5. Morning positive.

    Args:
        tsol: Solar time, hours [1, 24]
    """
    return float(wrap_angle((12.5 - tsol) * 180.0 / 12.0))


def solar_altitude(delta: float, hangle: float, latitude: float) -> float:
    """
    Solar altitude, degrees (eq. 11).

    Angle between the solar beam and the horizontal plane. Values below
    0.0001° are returned as exactly 0.

    Args:
        delta: Solar declination, degrees
        hangle: Solar hour angle, degrees [-180, 180]
        latitude: Latitude of the weather station, degrees [-90, 90]
    """
    alt = asind(
        clip_unit(sind(delta) * sind(latitude) + cosd(delta) * cosd(latitude) * cosd(hangle))
    )
    return 0.0 if alt < MIN_SOLAR_ALTITUDE_DEG else float(alt)


def solar_zenith(altitude: float) -> float:
    """Solar zenith from solar altitude, degrees (eq. 12)."""
    return 90.0 - altitude


def altitude_from_zenith(zenith: float) -> float:
    """Solar altitude from solar zenith, degrees."""
    return 90.0 - zenith


def solar_azimuth(delta: float, hangle: float, altitude: float, latitude: float) -> float:
    """
    Solar azimuth, degrees from south, east positive, in (-180, 180] (eqs. 13-16).

    Args:
        delta: Solar declination for the day, degrees
        hangle: Hour angle for the hour, degrees (morning positive)
        altitude: Solar altitude, degrees
        latitude: Latitude of the weather station, degrees

    Returns:
        Solar azimuth. 0 when the sun stands at the zenith, where the
        azimuth is undefined.
    """
    cos_alt = float(cosd(altitude))
    if cos_alt < 1e-12:
        return 0.0

    sin_aux1 = float(cosd(delta) * sind(180.0 - hangle)) / cos_alt
    cos_aux1 = float(cosd(latitude) * sind(delta) + sind(latitude) * cosd(delta) * cosd(180.0 - hangle)) / cos_alt
    aux2 = float(asind(clip_unit(sin_aux1)))

    if sin_aux1 >= 0 and cos_aux1 > 0:
        azimuth = 180.0 - aux2
    elif cos_aux1 < 0:
        azimuth = aux2
    else:
        azimuth = -(180.0 + aux2)
    return float(wrap_angle(azimuth))


def daily_azimuth_table(nday: int, latitude: float) -> np.ndarray:
    """
    Sun altitude and azimuth for the 24 hour sections of a day.

    Args:
        nday: Day of the year
        latitude: Latitude, degrees

    Returns:
        Array of shape (24, 3) with columns (hour, altitude, azimuth)
    """
    delta = declination(nday)
    rows = []
    for hour in range(1, 25):
        hangle = hour_angle(hour)
        alt = solar_altitude(delta, hangle, latitude)
        rows.append((hour, alt, solar_azimuth(delta, hangle, alt, latitude)))
    return np.array(rows, dtype=float)
