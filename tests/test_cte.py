"""
Tests for the CTE reference climate tables.
"""

import pytest
from ctesol import cte


class TestReferenceLatitude:
    def test_regions(self):
        assert cte.reference_latitude("peninsula") == 40.7
        assert cte.reference_latitude("canarias") == 28.3

    def test_unknown_region(self):
        assert cte.reference_latitude("baleares") is None


class TestClimateTable:
    def test_size(self):
        assert len(cte.CTE_CLIMATES) == 32
        assert len(cte.climates_for_region("canarias")) == 20
        assert len(cte.climates_for_region("peninsula")) == 12
        assert cte.climates_for_region("azores") == []

    def test_lookup(self):
        zone = cte.get_climate("D3")
        assert zone.region == "peninsula"
        assert zone.july_irradiation == 6391.90
        assert zone.july_clearness == 0.632
        assert zone.july_diffuse_ratio == 0.391
        assert zone.annual_irradiation == 4243.211
        assert zone.latitude == 40.7
        assert zone.name == "D3_peninsula"

    def test_alpha_zones(self):
        zone = cte.get_climate("α1", "canarias")
        assert zone.name == "alpha1_canarias"
        assert cte.get_climate("alfa1", "canarias") is zone
        assert cte.get_climate("Alfa1", "canarias") is zone
        assert zone.met_code == "Alfa1c"

    def test_lowercase_code(self):
        assert cte.get_climate("d3") is cte.get_climate("D3")

    def test_missing_pairs(self):
        assert cte.get_climate("A1", "peninsula") is None
        assert cte.get_climate("D3", "baleares") is None
        assert cte.get_climate("Z9") is None

    def test_read_only(self):
        with pytest.raises(TypeError):
            cte.CTE_CLIMATES[("D3", "peninsula")] = None

    def test_physical_ranges(self):
        for zone in cte.CTE_CLIMATES.values():
            assert 0.0 < zone.july_clearness < 1.0, f"{zone.name}: clearness {zone.july_clearness}"
            assert 0.0 < zone.july_diffuse_ratio < 1.0, f"{zone.name}: ratio {zone.july_diffuse_ratio}"
            assert 5000.0 < zone.july_irradiation < 7000.0, f"{zone.name}: H {zone.july_irradiation}"

    def test_clearness_follows_summer_zone(self):
        """Every zone's July clearness is the mean clearness of its summer zone number."""
        for zone in cte.CTE_CLIMATES.values():
            assert zone.july_clearness == cte.mean_july_clearness(zone.summer_zone, zone.region), zone.name


class TestMetCodes:
    def test_all_met_codes_resolve(self):
        for code in cte.CLIMATE_ZONES:
            zone = cte.climate_for_met_code(code)
            assert zone is not None, code
            assert zone.met_code == code

    def test_file_names(self):
        assert cte.climate_for_met_code("zonaD3.met") is cte.get_climate("D3")
        assert cte.climate_for_met_code("zonaAlfa2c.met") is cte.get_climate("α2", "canarias")

    def test_zone_code_from_file_name(self):
        assert cte.met_zone_code("zonaD3.met") == "D3"
        assert cte.met_zone_code("climas/zonaAlfa2c.met") == "Alfa2c"
        assert cte.met_zone_code(" D3c ") == "D3c"

    def test_canary_suffix(self):
        assert cte.climate_for_met_code("D3c").region == "canarias"
        assert cte.climate_for_met_code("D3").region == "peninsula"

    def test_unknown(self):
        assert cte.climate_for_met_code("A1") is None


class TestJulyMeans:
    def test_mean_clearness(self):
        assert cte.mean_july_clearness("1", "canarias") == 0.531
        assert cte.mean_july_clearness(4, "peninsula") == 0.675

    def test_mean_clearness_unknown(self):
        assert cte.mean_july_clearness("5") is None
        assert cte.mean_july_clearness("1", "baleares") is None

    def test_sunset_hour_angle(self):
        assert cte.july_sunset_hour_angle("peninsula") == pytest.approx(109.5, abs=0.1)
        assert cte.july_sunset_hour_angle("canarias") == pytest.approx(102.0, abs=0.1)
        assert cte.july_sunset_hour_angle("baleares") is None

    def test_diffuse_fraction(self):
        assert cte.july_diffuse_fraction("1", "peninsula") == pytest.approx(0.378, abs=0.001)
        assert cte.july_diffuse_fraction("1", "canarias") == pytest.approx(0.400, abs=0.001)

    def test_diffuse_fraction_falls_with_clearer_zones(self):
        values = [cte.july_diffuse_fraction(n, "peninsula") for n in "1234"]
        assert all(a > b for a, b in zip(values, values[1:]))

    def test_diffuse_fraction_unknown(self):
        assert cte.july_diffuse_fraction("9", "peninsula") is None
        assert cte.july_diffuse_fraction("1", "baleares") is None
