"""
Clear-sky irradiance and diffuse fraction correlations.

- Hottel (1976) beam transmittance of the standard clear atmosphere
- Liu & Jordan (1960) diffuse transmittance
- Erbs et al. (1982) daily and monthly diffuse fractions

Reference:
    Duffie, J.A. & Beckman, W.A. (2013). Solar Engineering of Thermal
    Processes, 4th ed. Wiley. Sections 2.8, 2.11, 2.12.
"""

from __future__ import annotations

import math

from ..angles import cosd
from ..ctesol_logging import get_logger
from ..errors import DomainError

logger = get_logger(__name__)

HOTTEL_MAX_ELEVATION_KM = 2.5

# Climate type -> (r0, r1, rk) correction factors, Duffie & Beckman table 2.8.1
HOTTEL_CORRECTIONS: dict[str, tuple[float, float, float]] = {
    "Tropical": (0.95, 0.98, 1.02),
    "Midlatitude summer": (0.97, 0.99, 1.02),
    "Subarctic summer": (0.99, 0.99, 1.01),
    "Midlatitude winter": (1.03, 1.01, 1.00),
}


def beam_transmittance(zenith: float, elevation_km: float, climate: str = "Midlatitude summer") -> float:
    """
    Beam transmittance of the standard clear atmosphere τ_b (eq. 2.8.1).

    Args:
        zenith: Solar zenith, degrees (< 90)
        elevation_km: Site elevation, km. The correlation holds below 2.5 km.
        climate: One of the keys of HOTTEL_CORRECTIONS

    Returns:
        τ_b, dimensionless

    Raises:
        DomainError: Unknown climate type, negative elevation or sun below the horizon.

    Example:
        >>> beam_transmittance(32.25, 0.27, "Midlatitude summer")  # Madison, 22 August, 11:30
        0.62...
    """
    try:
        r0, r1, rk = HOTTEL_CORRECTIONS[climate]
    except KeyError:
        raise DomainError("climate", climate, f"must be one of {sorted(HOTTEL_CORRECTIONS)}") from None
    if elevation_km < 0:
        raise DomainError("elevation_km", elevation_km, "must be >= 0")
    if elevation_km >= HOTTEL_MAX_ELEVATION_KM:
        logger.warning(f"Hottel correlation used at {elevation_km} km, outside its range (< 2.5 km)")
    cos_zenith = float(cosd(zenith))
    if cos_zenith <= 0:
        raise DomainError("zenith", zenith, "sun must be above the horizon")

    a0 = r0 * (0.4237 - 0.00821 * (6 - elevation_km) ** 2)
    a1 = r1 * (0.5055 + 0.00595 * (6.5 - elevation_km) ** 2)
    k = rk * (0.2711 + 0.01858 * (2.5 - elevation_km) ** 2)
    return a0 + a1 * math.exp(-k / cos_zenith)


def diffuse_transmittance(tau_b: float) -> float:
    """Diffuse transmittance τ_d = 0.271 - 0.294 τ_b, Liu & Jordan (eq. 2.8.5)."""
    return 0.271 - 0.294 * tau_b


def clear_sky_beam_normal(tau_b: float, g_on: float) -> float:
    """Clear-sky beam irradiance at normal incidence G_cnb, W/m²."""
    return g_on * tau_b


def clear_sky_beam_horizontal(tau_b: float, g_on: float, zenith: float) -> float:
    """Clear-sky beam irradiance on the horizontal G_cb, W/m²."""
    return g_on * tau_b * float(cosd(zenith))


def extraterrestrial_horizontal(g_on: float, zenith: float) -> float:
    """Extraterrestrial irradiance on the horizontal G_o, W/m²."""
    return g_on * float(cosd(zenith))


def clear_sky_diffuse_horizontal(tau_b: float, g_on: float, zenith: float) -> float:
    """Clear-sky diffuse irradiance on the horizontal G_cd = G_o τ_d, W/m²."""
    return extraterrestrial_horizontal(g_on, zenith) * diffuse_transmittance(tau_b)


def daily_diffuse_fraction(kt: float, sunset_hour_angle: float) -> float:
    """
    Daily diffuse fraction H_d/H from the daily clearness index, Erbs et al. (eq. 2.11.1).

    Args:
        kt: Daily clearness index K_T = H / H_o
        sunset_hour_angle: Sunset hour angle ω_s, degrees
    """
    if sunset_hour_angle <= 81.4:
        if kt < 0.715:
            return 1.0 - 0.2727 * kt + 2.4495 * kt**2 - 11.9514 * kt**3 + 9.3879 * kt**4
        return 0.143
    if kt < 0.722:
        return 1.0 + 0.2832 * kt - 2.5557 * kt**2 + 0.8448 * kt**3
    return 0.175


def monthly_diffuse_fraction(kt_mean: float, sunset_hour_angle: float) -> float:
    """
    Monthly mean diffuse fraction from the monthly mean clearness index, Erbs et al. (eq. 2.12.1).

    Valid for 0.3 <= K_T <= 0.8.

    Args:
        kt_mean: Monthly average clearness index
        sunset_hour_angle: Sunset hour angle of the mean day of the month, degrees
    """
    if sunset_hour_angle <= 81.4:
        return 1.391 - 3.560 * kt_mean + 4.189 * kt_mean**2 - 2.137 * kt_mean**3
    return 1.311 - 3.022 * kt_mean + 3.427 * kt_mean**2 - 1.821 * kt_mean**3
