"""
Tests for structured error handling.

Invalid inputs raise errors naming the offending field instead of letting
NaN values propagate into the irradiance results.
"""

import pytest
from ctesol import (
    ConfigurationError,
    CtesolError,
    DomainError,
    HourlyObservation,
    Location,
    ModelConfig,
    Surface,
    WeatherDataError,
)


class TestErrorHierarchy:
    """Tests for the error class hierarchy."""

    def test_ctesol_error_is_base_exception(self):
        """CtesolError can be used to catch all ctesol errors."""
        assert issubclass(DomainError, CtesolError)
        assert issubclass(WeatherDataError, CtesolError)
        assert issubclass(ConfigurationError, CtesolError)

    def test_domain_error_is_value_error(self):
        """Callers catching ValueError also see domain errors."""
        with pytest.raises(ValueError):
            Surface(tilt=200.0)

    def test_weather_data_error_is_domain_error(self):
        assert issubclass(WeatherDataError, DomainError)

    def test_configuration_error_is_not_value_error(self):
        assert not issubclass(ConfigurationError, ValueError)


class TestErrorMessages:
    """Errors carry the field, the value and the reason."""

    def test_domain_error_fields(self):
        error = DomainError("tilt", 200.0, "must be in [0, 180]")
        assert error.field == "tilt"
        assert error.value == 200.0
        assert error.reason == "must be in [0, 180]"
        assert str(error) == "Invalid value for 'tilt': 200.0 (must be in [0, 180])"

    def test_domain_error_without_reason(self):
        error = DomainError("acosd", 1.5)
        assert error.reason is None
        assert str(error) == "Invalid value for 'acosd': 1.5"

    def test_configuration_error_message(self):
        error = ConfigurationError("model", "unknown model 'x'")
        assert error.parameter == "model"
        assert "model" in str(error)
        assert "unknown model 'x'" in str(error)


class TestValidationAtConstruction:
    """Data models reject invalid values when built."""

    def test_surface_tilt(self):
        with pytest.raises(DomainError) as exc:
            Surface(tilt=-5.0)
        assert exc.value.field == "tilt"

    def test_location_latitude(self):
        with pytest.raises(DomainError) as exc:
            Location(latitude=95.0)
        assert exc.value.field == "latitude"

    def test_observation_month(self):
        """Month 13 is caught with the field name in the message."""
        with pytest.raises(WeatherDataError) as exc:
            HourlyObservation(month=13, day=1, hour=12, beam_horizontal=0.0, diffuse_horizontal=0.0)
        assert exc.value.field == "month"
        assert "13" in str(exc.value)

    def test_config_model(self):
        with pytest.raises(ConfigurationError) as exc:
            ModelConfig(model="perez")
        assert exc.value.parameter == "model"
