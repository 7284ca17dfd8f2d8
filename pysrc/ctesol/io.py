"""
Weather file input.

Reader for the ``.met`` hourly climate files distributed with the Spanish
building code (CTE), and conversion of their rows into
:class:`~ctesol.models.weather.HourlyObservation` records.

.met layout:

- line 1: file name, e.g. ``zonaD3.met``
- line 2: latitude, longitude, altitude (m), reference longitude
- following lines (8760 in the reference files), whitespace or comma
  separated: month, day, hour (1-24), dry bulb temperature (°C), effective
  sky temperature (°C), direct and diffuse irradiance on the horizontal
  (W/m²), specific humidity (kg/kg), relative humidity (%), wind speed
  (m/s), wind direction (degrees from north, E+), solar azimuth and solar
  zenith (degrees)
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING

from .cte import met_zone_code
from .errors import WeatherDataError
from .models.weather import HourlyObservation, Location

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)

MET_COLUMNS = [
    "month",
    "day",
    "hour",
    "temp_air",
    "temp_sky",
    "beam_horizontal",
    "diffuse_horizontal",
    "specific_humidity",
    "relative_humidity",
    "wind_speed",
    "wind_direction",
    "sun_azimuth",
    "sun_zenith",
]


def read_met(path: str | Path) -> tuple[pd.DataFrame, dict]:
    """
    Read a CTE ``.met`` climate file.

    Args:
        path: Path to the .met file (string or Path)

    Returns:
        Tuple of (dataframe, metadata_dict):
        - dataframe: pandas DataFrame with one row per hour and the columns of MET_COLUMNS
        - metadata_dict: Dictionary with keys:
            - metname: File name from the first line
            - zone: Climate zone code, e.g. "D3" or "Alfa1c"
            - latitude: Latitude (degrees)
            - longitude: Longitude (degrees)
            - altitude: Altitude (m)
            - reference_longitude: Reference longitude (degrees)

    Raises:
        FileNotFoundError: If the file doesn't exist
        WeatherDataError: If the header or the data rows are malformed
    """
    import pandas as pd

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"MET file not found: {path}")

    with open(path, encoding="utf-8", errors="replace") as f:
        lines = [line.strip() for line in f]
    if len(lines) < 2:
        raise WeatherDataError("header", str(path), "MET file needs a name line and a location line")
    metname = lines[0]
    location_line = lines[1].replace(",", " ").split()

    if len(location_line) < 4:
        raise WeatherDataError(
            "location", " ".join(location_line), "expected latitude, longitude, altitude and reference longitude"
        )
    try:
        latitude, longitude, altitude, reference_longitude = (float(v) for v in location_line[:4])
    except ValueError as err:
        raise WeatherDataError("location", " ".join(location_line), "fields must be numeric") from err

    metadata = {
        "metname": metname,
        "zone": met_zone_code(metname),
        "latitude": latitude,
        "longitude": longitude,
        "altitude": altitude,
        "reference_longitude": reference_longitude,
    }

    try:
        df = pd.read_csv(
            StringIO("\n".join(lines[2:])),
            header=None,
            names=MET_COLUMNS,
            sep=r"[\s,]+",
            engine="python",
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError as err:
        raise WeatherDataError("data", str(path), "MET file contains no data rows") from err
    except pd.errors.ParserError as err:
        raise WeatherDataError("data", str(path), f"expected {len(MET_COLUMNS)} fields per row") from err
    df = df.apply(pd.to_numeric, errors="coerce").dropna(how="all")

    if df.empty:
        raise WeatherDataError("data", str(path), "MET file contains no data rows")
    incomplete = df[MET_COLUMNS].isna().any(axis=1)
    if incomplete.any():
        row = int(incomplete.idxmax())
        raise WeatherDataError("data", f"row {row + 1}", f"expected {len(MET_COLUMNS)} numeric fields")

    for column in ("month", "day"):
        df[column] = df[column].astype(int)

    logger.info(f"Loaded MET file: {metadata['metname']} (zone {metadata['zone']}), {len(df)} hourly rows")

    return df, metadata


def location_from_met(metadata: dict, utc_offset: float | None = None) -> Location:
    """
    Location from the metadata of :func:`read_met`.

    Args:
        metadata: Metadata dictionary returned by read_met
        utc_offset: Clock time relative to UTC, hours. Needed only for clock to solar time conversion.
    """
    return Location(
        latitude=metadata["latitude"],
        longitude=metadata["longitude"],
        elevation_km=max(0.0, metadata["altitude"] / 1000.0),
        utc_offset=utc_offset,
    )


def observations_from_met(df: pd.DataFrame, use_sun_position: bool = True) -> list[HourlyObservation]:
    """
    Hourly observations from a .met dataframe.

    Args:
        df: Dataframe returned by read_met
        use_sun_position: Keep the tabulated solar azimuth and zenith; the zenith replaces
            the computed altitude in the irradiance split. Default True.

    Returns:
        One HourlyObservation per row, in file order
    """
    observations = []
    for row in df.itertuples(index=False):
        observations.append(
            HourlyObservation(
                month=int(row.month),
                day=int(row.day),
                hour=float(row.hour),
                beam_horizontal=float(row.beam_horizontal),
                diffuse_horizontal=float(row.diffuse_horizontal),
                sun_azimuth=float(row.sun_azimuth) if use_sun_position else None,
                sun_zenith=float(row.sun_zenith) if use_sun_position else None,
            )
        )
    return observations


def load_met(
    path: str | Path,
    utc_offset: float | None = None,
    use_sun_position: bool = True,
) -> tuple[list[HourlyObservation], Location]:
    """
    Read a .met file into observations and the station location.

    Example:
        >>> observations, location = load_met("zonaD3.met")
        >>> monthly = monthly_accumulation(radiation_for_surface(observations, location, Surface.vertical(0)))
    """
    df, metadata = read_met(path)
    return observations_from_met(df, use_sun_position), location_from_met(metadata, utc_offset)
