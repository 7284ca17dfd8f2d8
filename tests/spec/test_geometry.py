"""
Incidence angle, air mass, beam ratio and profile angle.

The closed-form incidence angle (from declination, hour angle and latitude)
and the one built from the sun position must agree for any surface.

Reference:
    Duffie & Beckman (2013), eqs. 1.6.2-1.6.4, 1.8.1, 1.9.12; Kasten & Young
    (1989) for the air mass near the horizon.
"""

import math

import pytest
from ctesol.errors import DomainError
from ctesol.physics import duffie
from ctesol.physics.geometry import (
    air_mass,
    beam_normal_from_horizontal,
    beam_ratio,
    incidence_angle,
    incidence_angle_from_sun,
    incidence_angle_vertical,
    profile_angle,
    relative_surface_azimuth,
    relative_surface_tilt,
)


@pytest.fixture
def february_13_morning():
    """Sun at Madison on February 13 at 10:30 solar time."""
    delta = duffie.declination(44)
    hangle = duffie.hour_angle(10.5)
    zenith = duffie.sun_zenith(43.0, delta, hangle)
    return delta, hangle, zenith, duffie.sun_azimuth(43.0, delta, hangle, zenith)


class TestIncidenceAngle:
    """Angle between the beam and the surface normal."""

    def test_tilted_surface(self, february_13_morning):
        delta, hangle, _, _ = february_13_morning
        assert incidence_angle(delta, hangle, 43.0, 45.0, 15.0) == pytest.approx(35.16, abs=0.01)

    def test_from_sun_position_agrees(self, february_13_morning):
        delta, hangle, zenith, sun_az = february_13_morning
        assert incidence_angle_from_sun(zenith, sun_az, 45.0, 15.0) == pytest.approx(
            incidence_angle(delta, hangle, 43.0, 45.0, 15.0), abs=1e-6
        )

    @pytest.mark.parametrize("azimuth", [-135.0, -30.0, 0.0, 60.0, 180.0])
    def test_horizontal_surface_sees_the_zenith(self, february_13_morning, azimuth):
        delta, hangle, zenith, _ = february_13_morning
        assert incidence_angle(delta, hangle, 43.0, 0.0, azimuth) == pytest.approx(zenith, abs=1e-6)

    @pytest.mark.parametrize("azimuth", [-90.0, 0.0, 45.0])
    def test_vertical_formula_matches_general_formula(self, february_13_morning, azimuth):
        delta, hangle, _, _ = february_13_morning
        assert incidence_angle_vertical(delta, hangle, 43.0, azimuth) == pytest.approx(
            incidence_angle(delta, hangle, 43.0, 90.0, azimuth), abs=1e-6
        )

    def test_sun_behind_the_surface(self, february_13_morning):
        delta, hangle, _, _ = february_13_morning
        assert incidence_angle(delta, hangle, 43.0, 90.0, 180.0) > 90.0

    def test_downward_facing_surface(self, february_13_morning):
        delta, hangle, zenith, _ = february_13_morning
        assert incidence_angle(delta, hangle, 43.0, 180.0, 0.0) == pytest.approx(180.0 - zenith, abs=1e-6)


class TestRelativeAngles:
    def test_relative_azimuth_wraps(self):
        assert relative_surface_azimuth(170.0, -170.0) == pytest.approx(-20.0)
        assert relative_surface_azimuth(-40.0, 15.0) == pytest.approx(-55.0)

    def test_relative_tilt(self):
        assert relative_surface_tilt(30.0, 90.0) == pytest.approx(60.0)


class TestAirMass:
    """Relative optical air mass."""

    def test_sun_overhead(self):
        assert air_mass(90.0) == pytest.approx(1.0, abs=1e-12)

    def test_high_sun_is_secant_of_zenith(self):
        assert air_mass(30.0) == pytest.approx(2.0)

    def test_finite_at_the_horizon(self):
        m = air_mass(0.0)
        assert math.isfinite(m)
        assert 30.0 < m < 40.0

    def test_decreases_with_altitude(self):
        values = [air_mass(a) for a in (0.0, 5.0, 10.0, 20.0, 45.0, 90.0)]
        assert all(a > b for a, b in zip(values, values[1:]))


class TestBeamNormal:
    def test_from_horizontal(self):
        assert beam_normal_from_horizontal(500.0, 30.0) == pytest.approx(1000.0)

    def test_sun_below_horizon_raises(self):
        with pytest.raises(DomainError) as exc:
            beam_normal_from_horizontal(100.0, 0.0)
        assert exc.value.field == "altitude"


class TestBeamRatio:
    """R_b = cos(θ) / cos(θ_z)."""

    def test_tilted_surface(self, february_13_morning):
        _, _, zenith, sun_az = february_13_morning
        assert beam_ratio(zenith, sun_az, 45.0, 15.0) == pytest.approx(1.66, abs=0.01)

    def test_horizontal_is_one(self, february_13_morning):
        _, _, zenith, sun_az = february_13_morning
        assert beam_ratio(zenith, sun_az, 0.0, 0.0) == pytest.approx(1.0)

    def test_sun_behind_surface_is_zero(self, february_13_morning):
        _, _, zenith, sun_az = february_13_morning
        assert beam_ratio(zenith, sun_az, 90.0, 180.0) == 0.0

    def test_sun_below_horizon_raises(self):
        with pytest.raises(DomainError):
            beam_ratio(95.0, 0.0, 30.0, 0.0)


class TestProfileAngle:
    def test_march_16_afternoon(self):
        delta = duffie.declination(75)
        hangle = duffie.hour_angle(16)
        zenith = duffie.sun_zenith(43.0, delta, hangle)
        sun_az = duffie.sun_azimuth(43.0, delta, hangle, zenith)
        assert zenith == pytest.approx(70.3, abs=0.05)
        assert sun_az == pytest.approx(66.8, abs=0.05)
        assert profile_angle(90.0 - zenith, sun_az, 25.0) == pytest.approx(25.6, abs=0.05)

    def test_facing_the_sun_equals_altitude(self):
        assert profile_angle(35.0, -20.0, -20.0) == pytest.approx(35.0)
