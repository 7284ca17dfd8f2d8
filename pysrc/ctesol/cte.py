"""
Reference climates of the Spanish building code (CTE).

Static, read-only data for the standard CTE climates: reference latitudes,
July means of daily horizontal irradiation, clearness index and diffuse
fraction, and annual mean daily irradiation. Lookups return None for
unknown zones or regions instead of raising, so callers can iterate over
zone lists that are not fully covered.

Zone codes are the winter letter plus the summer number ("D3"), with the
Canary Islands "alpha" zones written "α1".."α4". The .met file codes
("D3", "D3c", "Alfa1c") are accepted by :func:`climate_for_met_code`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from .physics import duffie
from .physics.clearsky import monthly_diffuse_fraction

PENINSULA = "peninsula"
CANARIAS = "canarias"
REGIONS = (PENINSULA, CANARIAS)

LATITUDE_PENINSULA = 40.7
LATITUDE_CANARIAS = 28.3

# Mean day of July (17 July)
JULY_MEAN_DAY = 198

# .met file codes of the CTE reference climates; a trailing "c" marks the Canary Islands
CLIMATE_ZONES: tuple[str, ...] = (
    "A1c", "A2c", "A3c", "A4c",
    "Alfa1c", "Alfa2c", "Alfa3c", "Alfa4c",
    "B1c", "B2c", "B3c", "B4c",
    "C1c", "C2c", "C3c", "C4c",
    "D1c", "D2c", "D3c", "E1c",
    "A3", "A4", "B3", "B4",
    "C1", "C2", "C3", "C4",
    "D1", "D2", "D3", "E1",
)  # fmt: skip

# Monthly mean daily clearness index in July by summer zone number
_KT_MEAN_JULY = {
    CANARIAS: {"1": 0.531, "2": 0.591, "3": 0.605, "4": 0.645},
    PENINSULA: {"1": 0.555, "2": 0.618, "3": 0.632, "4": 0.675},
}


@dataclass(frozen=True)
class ClimateZone:
    """
    One CTE reference climate.

    Attributes:
        code: Zone code, e.g. "D3" or "α2".
        region: "peninsula" or "canarias".
        july_irradiation: Mean daily horizontal irradiation in July, Wh/m²·day.
        july_clearness: Mean clearness index in July (H / H_o).
        july_diffuse_ratio: Mean diffuse to global ratio in July.
        annual_irradiation: Mean daily horizontal irradiation over the year, Wh/m²·day.
        latitude: Reference latitude of the region, degrees.
        name: Identifier, e.g. "D3_peninsula".
    """

    code: str
    region: str
    july_irradiation: float
    july_clearness: float
    july_diffuse_ratio: float
    annual_irradiation: float
    latitude: float
    name: str

    @property
    def summer_zone(self) -> str:
        """Summer zone number, "1".."4"."""
        return self.code[-1]

    @property
    def met_code(self) -> str:
        """Code of the matching .met file, e.g. "D3c" or "Alfa1c"."""
        code = self.code.replace("α", "Alfa")
        return f"{code}c" if self.region == CANARIAS else code


def _zone(code: str, region: str, h_jul: float, kt_jul: float, ratio_jul: float, i_year: float) -> ClimateZone:
    latitude = LATITUDE_CANARIAS if region == CANARIAS else LATITUDE_PENINSULA
    label = code.replace("α", "alpha")
    return ClimateZone(code, region, h_jul, kt_jul, ratio_jul, i_year, latitude, f"{label}_{region}")


# code, H_mean July [Wh/m2 day], K_T_mean July, Hd/H mean July, I_mean year [Wh/m2 day]
_CTE_CLIMATES: tuple[ClimateZone, ...] = (
    _zone("A1", CANARIAS, 5612.81, 0.531, 0.522, 4391.833),
    _zone("A2", CANARIAS, 6248.77, 0.591, 0.445, 4666.189),
    _zone("A3", CANARIAS, 6391.52, 0.605, 0.411, 4745.775),
    _zone("A4", CANARIAS, 6821.39, 0.645, 0.364, 4868.340),
    _zone("B1", CANARIAS, 5613.48, 0.531, 0.513, 4400.211),
    _zone("B2", CANARIAS, 6248.10, 0.591, 0.438, 4515.756),
    _zone("B3", CANARIAS, 6391.23, 0.605, 0.409, 4595.452),
    _zone("B4", CANARIAS, 6821.26, 0.645, 0.367, 4717.975),
    _zone("C1", CANARIAS, 5613.26, 0.531, 0.493, 3919.501),
    _zone("C2", CANARIAS, 6248.71, 0.591, 0.427, 4107.942),
    _zone("C3", CANARIAS, 6391.26, 0.605, 0.406, 4187.551),
    _zone("C4", CANARIAS, 6821.55, 0.645, 0.375, 4310.019),
    _zone("D1", CANARIAS, 5613.39, 0.531, 0.545, 3975.115),
    _zone("D2", CANARIAS, 6248.32, 0.591, 0.426, 4163.630),
    _zone("D3", CANARIAS, 6391.39, 0.605, 0.405, 4243.293),
    _zone("E1", CANARIAS, 5612.29, 0.531, 0.531, 3906.962),
    _zone("α1", CANARIAS, 5613.35, 0.531, 0.521, 5080.658),
    _zone("α2", CANARIAS, 6248.45, 0.591, 0.413, 5366.953),
    _zone("α3", CANARIAS, 6391.29, 0.605, 0.415, 5392.156),
    _zone("α4", CANARIAS, 6820.87, 0.645, 0.375, 5471.348),
    _zone("A3", PENINSULA, 6391.42, 0.632, 0.371, 4746.003),
    _zone("A4", PENINSULA, 6820.58, 0.675, 0.327, 4868.356),
    _zone("B3", PENINSULA, 6392.10, 0.632, 0.401, 4595.452),
    _zone("B4", PENINSULA, 6820.87, 0.675, 0.340, 4717.877),
    _zone("C1", PENINSULA, 5613.65, 0.555, 0.479, 3919.586),
    _zone("C2", PENINSULA, 6248.81, 0.618, 0.397, 4107.962),
    _zone("C3", PENINSULA, 6391.26, 0.632, 0.363, 4187.540),
    _zone("C4", PENINSULA, 6821.52, 0.675, 0.330, 4310.123),
    _zone("D1", PENINSULA, 5613.16, 0.555, 0.499, 3975.205),
    _zone("D2", PENINSULA, 6249.03, 0.618, 0.382, 4163.726),
    _zone("D3", PENINSULA, 6391.90, 0.632, 0.391, 4243.211),
    _zone("E1", PENINSULA, 5613.48, 0.555, 0.496, 3907.241),
)

CTE_CLIMATES: MappingProxyType[tuple[str, str], ClimateZone] = MappingProxyType(
    {(zone.code, zone.region): zone for zone in _CTE_CLIMATES}
)


def _normalize_code(zone: str) -> str:
    code = zone.strip()
    for prefix in ("Alfa", "alfa", "Alpha", "alpha"):
        if code.startswith(prefix):
            return "α" + code[len(prefix) :]
    return code.upper() if not code.startswith("α") else code


def reference_latitude(region: str) -> float | None:
    """
    Reference latitude of a CTE region, degrees.

    Returns:
        40.7 for "peninsula", 28.3 for "canarias", None otherwise
    """
    if region == PENINSULA:
        return LATITUDE_PENINSULA
    if region == CANARIAS:
        return LATITUDE_CANARIAS
    return None


def get_climate(zone: str, region: str = PENINSULA) -> ClimateZone | None:
    """
    Reference climate by zone code and region.

    Args:
        zone: Zone code, e.g. "D3", "α1" or "alfa1"
        region: "peninsula" (default) or "canarias"

    Returns:
        ClimateZone, or None if the pair is not tabulated

    Example:
        >>> get_climate("D3").july_clearness
        0.632
        >>> get_climate("A1", "peninsula") is None
        True
    """
    return CTE_CLIMATES.get((_normalize_code(zone), region))


def met_zone_code(met_name: str) -> str:
    """Zone code of a .met file name: "zonaD3c.met" -> "D3c". Codes pass through unchanged."""
    code = Path(met_name.strip()).name
    if code.startswith("zona"):
        code = code[len("zona") :]
    if code.endswith(".met"):
        code = code[: -len(".met")]
    return code


def climate_for_met_code(met_code: str) -> ClimateZone | None:
    """
    Reference climate for a .met file code such as "D3", "D3c" or "Alfa2c".

    A trailing "c" selects the Canary Islands. Returns None for unknown codes.
    """
    code = met_zone_code(met_code)
    if code.endswith("c"):
        return get_climate(code[:-1], CANARIAS)
    return get_climate(code, PENINSULA)


def mean_july_clearness(zone_number: str | int, region: str = PENINSULA) -> float | None:
    """
    Monthly mean daily clearness index for July.

    Args:
        zone_number: Summer zone number, "1".."4" (or the int)
        region: "peninsula" (default) or "canarias"

    Returns:
        K_T mean, or None for an unknown zone number or region
    """
    return _KT_MEAN_JULY.get(region, {}).get(str(zone_number))


def july_sunset_hour_angle(region: str = PENINSULA) -> float | None:
    """Sunset hour angle of the mean July day at the region's reference latitude, degrees."""
    latitude = reference_latitude(region)
    if latitude is None:
        return None
    return duffie.sunset_hour_angle(latitude, duffie.declination(JULY_MEAN_DAY))


def july_diffuse_fraction(zone_number: str | int, region: str = PENINSULA) -> float | None:
    """
    Monthly mean diffuse fraction for July from the Erbs correlation.

    Returns None for an unknown zone number or region.

    Example:
        >>> round(july_diffuse_fraction("1", "peninsula"), 2)
        0.38
    """
    kt = mean_july_clearness(zone_number, region)
    ws = july_sunset_hour_angle(region)
    if kt is None or ws is None:
        return None
    return monthly_diffuse_fraction(kt, ws)


def climates_for_region(region: str) -> list[ClimateZone]:
    """All tabulated climates of a region, in table order. Empty for an unknown region."""
    return [zone for zone in _CTE_CLIMATES if zone.region == region]
