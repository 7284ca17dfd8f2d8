"""Shared pytest fixtures and helpers."""

from pathlib import Path

import pytest
from ctesol import HourlyObservation, Location, ModelConfig

# Madison, Wisconsin: the worked examples of Duffie & Beckman chapter 1-2
MADISON_LATITUDE = 43.0

# Header of the CTE climate file for zone D3 (Madrid)
MET_HEADER = "zonaD3.met\n40.7 -3.7 589 0\n"


def write_met(path: Path, rows: list[str], header: str = MET_HEADER) -> Path:
    """Write a .met file with the given data rows and return its path."""
    path.write_text(header + "\n".join(rows) + "\n", encoding="utf-8")
    return path


def met_row(month, day, hour, beam, diffuse, azimuth=0.0, zenith=20.0) -> str:
    """One whitespace separated .met data row with fixed auxiliary columns."""
    return f"{month} {day} {hour} 28.5 10.2 {beam} {diffuse} 0.0102 45 3.2 180 {azimuth} {zenith}"


@pytest.fixture
def madison():
    return Location(latitude=MADISON_LATITUDE, longitude=-89.4, elevation_km=0.27, utc_offset=-6)


@pytest.fixture
def madrid():
    return Location(latitude=40.7, longitude=-3.7, elevation_km=0.589, utc_offset=1)


@pytest.fixture
def summer_noon():
    """Clear summer hour with strong beam irradiance."""
    return HourlyObservation(month=7, day=17, hour=12, beam_horizontal=650.0, diffuse_horizontal=120.0)


@pytest.fixture(params=["iso52010", "duffie"])
def config(request):
    """Run a test with both solar position models."""
    return ModelConfig(model=request.param)
