"""
Perez anisotropic sky model as used by ISO 52010-1:2017, section 6.4.2.

Splits measured beam and diffuse irradiance into the components that reach
an inclined surface:

- direct beam (eq. 26)
- circumsolar diffuse (eq. 36)
- sky diffuse, including the circumsolar and horizon brightening terms (eq. 28)
- ground-reflected diffuse (eq. 35)

The circumsolar part of the sky diffuse is accounted as direct irradiance
by the aggregators in :mod:`ctesol.irradiance`.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..angles import cosd, sind
from ..constants import (
    CIRCUMSOLAR_MAX_ZENITH_DEG,
    CLEAR_SKY_CLEARNESS,
    G_SC_ISO,
    K_CLEARNESS,
    MIN_DIFFUSE_IRRADIANCE,
    TO_RAD,
)
from .geometry import air_mass


@dataclass(frozen=True)
class BrightnessCoefficients:
    """Perez brightness coefficients for one clearness bin (ISO 52010-1 table 9)."""

    f11: float
    f12: float
    f13: float
    f21: float
    f22: float
    f23: float


# (upper clearness limit, coefficients); the last bin is open ended
BRIGHTNESS_TABLE: tuple[tuple[float, BrightnessCoefficients], ...] = (
    (1.065, BrightnessCoefficients(-0.008, 0.588, -0.062, -0.060, 0.072, -0.022)),
    (1.230, BrightnessCoefficients(0.130, 0.683, -0.151, -0.019, 0.066, -0.029)),
    (1.500, BrightnessCoefficients(0.330, 0.487, -0.221, 0.055, -0.064, -0.026)),
    (1.950, BrightnessCoefficients(0.568, 0.187, -0.295, 0.109, -0.152, -0.014)),
    (2.280, BrightnessCoefficients(0.873, -0.392, -0.362, 0.226, -0.462, 0.001)),
    (4.500, BrightnessCoefficients(1.132, -1.237, -0.412, 0.288, -0.823, 0.056)),
    (6.200, BrightnessCoefficients(1.060, -1.600, -0.359, 0.264, -1.127, 0.131)),
    (float("inf"), BrightnessCoefficients(0.678, -0.327, -0.250, 0.156, -1.377, 0.251)),
)


def extraterrestrial_normal_irradiance(nday: float, solar_constant: float = G_SC_ISO) -> float:
    """
    Extraterrestrial irradiance at normal incidence, W/m² (ISO 52010-1 eq. 27).

    Args:
        nday: Day of the year [1, 366]
        solar_constant: 1370 W/m² in ISO 52010-1, 1367 W/m² in Duffie & Beckman
    """
    return solar_constant * (1 + 0.033 * float(cosd(360.0 * nday / 365.0)))


def clearness_parameter(beam: float, diffuse: float, altitude: float) -> float:
    """
    Perez clearness parameter ε, dimensionless (eq. 30).

    Args:
        beam: Beam irradiance at normal incidence, W/m²
        diffuse: Diffuse irradiance on the horizontal, W/m²
        altitude: Solar altitude, degrees

    Returns:
        Clearness parameter. 999 (fully clear sky) when there is no diffuse
        irradiance to divide by.
    """
    if diffuse < MIN_DIFFUSE_IRRADIANCE:
        return CLEAR_SKY_CLEARNESS
    kk = K_CLEARNESS * (TO_RAD * altitude) ** 3
    return ((diffuse + beam) / diffuse + kk) / (1 + kk)


def brightness_coefficients(clearness: float) -> BrightnessCoefficients:
    """
    Brightness coefficients for a clearness value (table 9).

    Step function: each bin includes its lower limit and excludes its upper
    limit, so 1.065 already selects the second bin.
    """
    for upper, coefficients in BRIGHTNESS_TABLE:
        if clearness < upper:
            return coefficients
    return BRIGHTNESS_TABLE[-1][1]


def sky_brightness(altitude: float, diffuse: float, nday: float, solar_constant: float = G_SC_ISO) -> float:
    """Sky brightness parameter Δ = m G_d / I_ext (eq. 31)."""
    return air_mass(altitude) * diffuse / extraterrestrial_normal_irradiance(nday, solar_constant)


def brightening_coefficients(
    beam: float,
    diffuse: float,
    altitude: float,
    nday: float,
    solar_constant: float = G_SC_ISO,
) -> tuple[float, float]:
    """
    Circumsolar (F1) and horizon (F2) brightening coefficients (eqs. 32, 33).

    Args:
        beam: Beam irradiance at normal incidence, W/m²
        diffuse: Diffuse irradiance on the horizontal, W/m²
        altitude: Solar altitude, degrees
        nday: Day of the year
        solar_constant: Solar constant for the extraterrestrial irradiance, W/m²

    Returns:
        Tuple (F1, F2). F1 is never negative.
    """
    zenith_rad = TO_RAD * (90.0 - altitude)
    c = brightness_coefficients(clearness_parameter(beam, diffuse, altitude))
    skybr = sky_brightness(altitude, diffuse, nday, solar_constant)
    f1 = max(0.0, c.f11 + c.f12 * skybr + c.f13 * zenith_rad)
    f2 = c.f21 + c.f22 * skybr + c.f23 * zenith_rad
    return f1, f2


def _incidence_ratio(incidence: float, altitude: float) -> float:
    # a / b, with b kept away from zero near the horizon (eqs. 28, 29)
    a = max(0.0, float(cosd(incidence)))
    b = max(float(cosd(CIRCUMSOLAR_MAX_ZENITH_DEG)), float(cosd(90.0 - altitude)))
    return a / b


def direct_on_surface(beam: float, incidence: float) -> float:
    """Direct irradiance on the inclined surface, W/m² (eq. 26)."""
    return max(0.0, beam * float(cosd(incidence)))


def circumsolar_on_surface(
    beam: float,
    diffuse: float,
    altitude: float,
    incidence: float,
    nday: float,
    solar_constant: float = G_SC_ISO,
) -> float:
    """Circumsolar diffuse irradiance on the inclined surface, W/m² (eq. 36)."""
    f1, _ = brightening_coefficients(beam, diffuse, altitude, nday, solar_constant)
    return diffuse * f1 * _incidence_ratio(incidence, altitude)


def diffuse_on_surface(
    beam: float,
    diffuse: float,
    altitude: float,
    incidence: float,
    tilt: float,
    nday: float,
    solar_constant: float = G_SC_ISO,
) -> float:
    """
    Sky diffuse irradiance on the inclined surface, W/m² (eq. 28).

    Sum of the isotropic, circumsolar and horizon brightening terms. The
    ground-reflected part is separate (:func:`ground_reflected_on_surface`).

    Args:
        beam: Beam irradiance at normal incidence, W/m²
        diffuse: Diffuse irradiance on the horizontal, W/m²
        altitude: Solar altitude, degrees
        incidence: Angle of incidence on the surface, degrees
        tilt: Surface tilt, degrees
        nday: Day of the year
        solar_constant: Solar constant, W/m²
    """
    f1, f2 = brightening_coefficients(beam, diffuse, altitude, nday, solar_constant)
    return diffuse * (
        (1 - f1) * (1 + float(cosd(tilt))) / 2
        + f1 * _incidence_ratio(incidence, altitude)
        + f2 * float(sind(tilt))
    )


def ground_reflected_on_surface(beam: float, diffuse: float, altitude: float, tilt: float, albedo: float) -> float:
    """
    Diffuse irradiance on the inclined surface by ground reflection, W/m² (eq. 35).

    Args:
        beam: Beam irradiance at normal incidence, W/m²
        diffuse: Diffuse irradiance on the horizontal, W/m²
        altitude: Solar altitude, degrees
        tilt: Surface tilt, degrees
        albedo: Solar reflectivity of the ground [0, 1]
    """
    return (diffuse + beam * float(sind(altitude))) * albedo * (1 - float(cosd(tilt))) / 2
