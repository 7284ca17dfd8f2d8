"""
Beam geometry on inclined surfaces.

The closed-form incidence angle is unchanged when the hour angle and the
surface azimuth flip sign together, so these functions serve the ISO 52010
conventions (east positive) and the Duffie & Beckman conventions (east
negative) alike, as long as all azimuths and hour angles share one.
"""

from __future__ import annotations

from ..angles import acosd, atand, clip_unit, cosd, sind, tand, wrap_angle
from ..constants import AIR_MASS_ALTITUDE_LIMIT_DEG
from ..errors import DomainError


def incidence_angle(delta: float, hangle: float, latitude: float, tilt: float, azimuth: float) -> float:
    """
    Angle of incidence of the beam on an inclined surface, degrees.

    ISO 52010-1 eq. 17, Duffie & Beckman eq. 1.6.2.

    Args:
        delta: Solar declination, degrees
        hangle: Hour angle, degrees
        latitude: Latitude, degrees
        tilt: Surface tilt β, degrees [0, 180] (> 90 faces downwards)
        azimuth: Surface azimuth γ, degrees [-180, 180], same convention as ``hangle``

    Returns:
        Incidence angle in [0, 180]. Values above 90 mean the sun is behind the surface.
    """
    sd, cd = sind(delta), cosd(delta)
    sh, ch = sind(hangle), cosd(hangle)
    sl, cl = sind(latitude), cosd(latitude)
    sb, cb = sind(tilt), cosd(tilt)
    sg, cg = sind(azimuth), cosd(azimuth)
    cos_theta = (
        sd * sl * cb
        - sd * cl * sb * cg
        + cd * cl * cb * ch
        + cd * sl * sb * cg * ch
        + cd * sb * sg * sh
    )
    return float(acosd(clip_unit(cos_theta)))


def incidence_angle_vertical(delta: float, hangle: float, latitude: float, azimuth: float) -> float:
    """Angle of incidence on a vertical surface, degrees (Duffie & Beckman eq. 1.6.4)."""
    cos_theta = (
        -sind(delta) * cosd(latitude) * cosd(azimuth)
        + cosd(delta) * sind(latitude) * cosd(azimuth) * cosd(hangle)
        + cosd(delta) * sind(azimuth) * sind(hangle)
    )
    return float(acosd(clip_unit(cos_theta)))


def incidence_angle_from_sun(zenith: float, sun_azimuth: float, tilt: float, azimuth: float) -> float:
    """
    Angle of incidence from the sun position, degrees (Duffie & Beckman eq. 1.6.3).

    Args:
        zenith: Solar zenith, degrees
        sun_azimuth: Solar azimuth, degrees
        tilt: Surface tilt, degrees
        azimuth: Surface azimuth, degrees, same convention as ``sun_azimuth``
    """
    cos_theta = cosd(zenith) * cosd(tilt) + sind(zenith) * sind(tilt) * cosd(sun_azimuth - azimuth)
    return float(acosd(clip_unit(cos_theta)))


def relative_surface_azimuth(sun_azimuth: float, azimuth: float) -> float:
    """Azimuth between the sun and the surface, degrees in (-180, 180] (ISO 52010-1 eq. 18)."""
    return float(wrap_angle(sun_azimuth - azimuth))


def relative_surface_tilt(zenith: float, tilt: float) -> float:
    """Tilt between the sun and the surface, degrees in (-180, 180] (ISO 52010-1 eq. 19)."""
    return float(wrap_angle(tilt - zenith))


def air_mass(altitude: float) -> float:
    """
    Relative optical air mass (ISO 52010-1 eqs. 20, 21).

    Below 10° of altitude the Kasten-Young style correction keeps the value
    finite down to the horizon.

    Args:
        altitude: Solar altitude, degrees

    Example:
        >>> air_mass(90.0)
        1.0
    """
    sa = float(sind(altitude))
    if altitude >= AIR_MASS_ALTITUDE_LIMIT_DEG:
        return 1.0 / sa
    return 1.0 / (sa + 0.15 * (altitude + 3.885) ** -1.253)


def beam_normal_from_horizontal(beam_horizontal: float, altitude: float) -> float:
    """
    Beam irradiance at normal incidence from beam irradiance on the horizontal, W/m².

    Raises:
        DomainError: If the altitude is not positive. Callers cap the zenith
            before reaching the horizon.
    """
    if altitude <= 0:
        raise DomainError("altitude", altitude, "beam normal irradiance needs the sun above the horizon")
    return beam_horizontal / float(sind(altitude))


def beam_ratio(zenith: float, sun_azimuth: float, tilt: float, azimuth: float) -> float:
    """
    Ratio of beam irradiance on the inclined surface to that on the horizontal R_b
    (Duffie & Beckman eq. 1.8.1).

    Returns 0 when the sun is behind the surface.
    """
    cos_theta = float(cosd(incidence_angle_from_sun(zenith, sun_azimuth, tilt, azimuth)))
    cos_zenith = float(cosd(zenith))
    if cos_zenith <= 0:
        raise DomainError("zenith", zenith, "beam ratio needs the sun above the horizon")
    return max(0.0, cos_theta) / cos_zenith


def profile_angle(altitude: float, sun_azimuth: float, azimuth: float) -> float:
    """
    Profile angle, degrees (Duffie & Beckman eq. 1.6.12).

    Projection of the solar altitude on a vertical plane normal to the
    surface, as used for overhang shading.
    """
    return float(atand(tand(altitude) / cosd(sun_azimuth - azimuth)))
