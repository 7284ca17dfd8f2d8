"""
Solar position models.

Two formula families compute the position of the sun:

- ``"iso52010"``: ISO 52010-1:2017 (declination series, five-piece equation
  of time, hour sections centred half an hour before the hour number,
  solar constant 1370 W/m²)
- ``"duffie"``: Duffie & Beckman (Cooper declination, Spencer equation of
  time, hour angle zero at the hour number 12, solar constant 1367 W/m²)

Both are exposed through :class:`SolarModel` with the package-wide sign
conventions (hour angle negative in the morning, azimuth east negative), so
the irradiance aggregators never branch on the family.

Example:
    >>> model = get_model("duffie")
    >>> pos = model.sun_position(44, 9.5, latitude=43.0)
    >>> round(pos.zenith, 1), round(pos.azimuth, 1)
    (66.5, -40.1)
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .angles import wrap_angle
from .constants import G_SC_DUFFIE, G_SC_ISO
from .errors import ConfigurationError
from .models.results import SunPosition
from .models.surface import Surface
from .models.weather import Location
from .physics import duffie, iso52010
from .physics.geometry import incidence_angle
from .physics.perez import extraterrestrial_normal_irradiance


class SolarModel(ABC):
    """Solar position formulas of one family, in the package-wide conventions."""

    name: str
    solar_constant: float

    @abstractmethod
    def declination(self, nday: float) -> float:
        """Solar declination for a day of the year, degrees."""

    @abstractmethod
    def equation_of_time(self, nday: float) -> float:
        """Equation of time, minutes, with the sign used by the family."""

    @abstractmethod
    def solar_time(self, clock_hour: float, nday: float, location: Location) -> float:
        """Solar hour for a clock hour at a location with a UTC offset."""

    @abstractmethod
    def hour_angle(self, solar_hour: float) -> float:
        """Hour angle, degrees in (-180, 180], negative in the morning."""

    @abstractmethod
    def altitude(self, delta: float, hangle: float, latitude: float) -> float:
        """Solar altitude, degrees."""

    @abstractmethod
    def azimuth(self, delta: float, hangle: float, altitude: float, latitude: float) -> float:
        """Solar azimuth, degrees from south, east negative."""

    def sun_position(self, nday: int, solar_hour: float, latitude: float) -> SunPosition:
        """
        Position of the sun.

        Args:
            nday: Day of the year [1, 366]
            solar_hour: Solar hour
            latitude: Latitude, degrees

        Returns:
            SunPosition in the package-wide conventions
        """
        delta = self.declination(nday)
        hangle = self.hour_angle(solar_hour)
        alt = self.altitude(delta, hangle, latitude)
        return SunPosition(
            day_of_year=nday,
            solar_hour=solar_hour,
            declination=delta,
            hour_angle=hangle,
            altitude=alt,
            azimuth=self.azimuth(delta, hangle, alt, latitude),
        )

    def incidence_angle(self, position: SunPosition, latitude: float, surface: Surface) -> float:
        """Angle of incidence of the beam on a surface, degrees."""
        return incidence_angle(position.declination, position.hour_angle, latitude, surface.tilt, surface.azimuth)

    def extraterrestrial_irradiance(self, nday: float) -> float:
        """Extraterrestrial normal irradiance with the family's solar constant, W/m²."""
        return extraterrestrial_normal_irradiance(nday, self.solar_constant)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Iso52010Model(SolarModel):
    """ISO 52010-1:2017 formulas. Converts the standard's east-positive angles at the boundary."""

    name = "iso52010"
    solar_constant = G_SC_ISO

    def declination(self, nday: float) -> float:
        return iso52010.declination(nday)

    def equation_of_time(self, nday: float) -> float:
        return iso52010.equation_of_time(nday)

    def solar_time(self, clock_hour: float, nday: float, location: Location) -> float:
        return iso52010.solar_time(clock_hour, nday, _utc_offset(location), location.longitude)

    def hour_angle(self, solar_hour: float) -> float:
        return float(wrap_angle(-iso52010.hour_angle(solar_hour)))

    def altitude(self, delta: float, hangle: float, latitude: float) -> float:
        return iso52010.solar_altitude(delta, -hangle, latitude)

    def azimuth(self, delta: float, hangle: float, altitude: float, latitude: float) -> float:
        return float(wrap_angle(-iso52010.solar_azimuth(delta, -hangle, altitude, latitude)))


class DuffieBeckmanModel(SolarModel):
    """Duffie & Beckman formulas. Below the horizon the altitude is negative."""

    name = "duffie"
    solar_constant = G_SC_DUFFIE

    def declination(self, nday: float) -> float:
        return duffie.declination(nday)

    def equation_of_time(self, nday: float) -> float:
        return duffie.equation_of_time(nday)

    def solar_time(self, clock_hour: float, nday: float, location: Location) -> float:
        # the book measures longitudes west positive
        standard_meridian = -15.0 * _utc_offset(location)
        return clock_hour + duffie.solar_to_standard_time_correction(standard_meridian, -location.longitude, nday)

    def hour_angle(self, solar_hour: float) -> float:
        return float(wrap_angle(duffie.hour_angle(solar_hour)))

    def altitude(self, delta: float, hangle: float, latitude: float) -> float:
        return 90.0 - duffie.sun_zenith(latitude, delta, hangle)

    def azimuth(self, delta: float, hangle: float, altitude: float, latitude: float) -> float:
        return duffie.sun_azimuth(latitude, delta, hangle, 90.0 - altitude)


def _utc_offset(location: Location) -> float:
    if location.utc_offset is None:
        raise ConfigurationError("use_solar_time", "clock to solar time conversion needs Location.utc_offset")
    return location.utc_offset


_MODELS: dict[str, SolarModel] = {
    Iso52010Model.name: Iso52010Model(),
    DuffieBeckmanModel.name: DuffieBeckmanModel(),
}


def get_model(name: str = "iso52010") -> SolarModel:
    """
    Solar position model by name.

    Args:
        name: "iso52010" or "duffie"

    Raises:
        ConfigurationError: If the name is unknown.
    """
    try:
        return _MODELS[name]
    except KeyError:
        raise ConfigurationError("model", f"unknown model '{name}', expected one of {sorted(_MODELS)}") from None
