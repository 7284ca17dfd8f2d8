"""ctesol error types for actionable error messages.

These exceptions say which entity and field was invalid, rather than
letting NaN values propagate through the irradiance calculations.

Example:
    try:
        surface = ctesol.Surface(tilt=200.0, azimuth=0.0)
    except ctesol.DomainError as e:
        print(f"'{e.field}' out of range: {e.value} ({e.reason})")
"""

from __future__ import annotations


class CtesolError(Exception):
    """Base class for all ctesol errors."""

    pass


class DomainError(CtesolError, ValueError):
    """Raised when an input lies outside its mathematically valid range.

    Attributes:
        field: Name of the problematic field (e.g., "tilt", "acosd").
        value: The invalid value.
        reason: Why the value is invalid (optional).
    """

    def __init__(self, field: str, value: float | str, reason: str | None = None):
        self.field = field
        self.value = value
        self.reason = reason
        message = f"Invalid value for '{field}': {value}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class WeatherDataError(DomainError):
    """Raised when an hourly weather observation is invalid.

    Example:
        >>> HourlyObservation(month=13, day=1, hour=12, beam_horizontal=0, diffuse_horizontal=0)
        WeatherDataError: Invalid value for 'month': 13 (must be in [1, 12])
    """

    pass


class ConfigurationError(CtesolError):
    """Raised when configuration is invalid or inconsistent.

    Attributes:
        parameter: The problematic parameter name.
        reason: Why the configuration is invalid.
    """

    def __init__(self, parameter: str, reason: str):
        self.parameter = parameter
        self.reason = reason
        message = f"Invalid configuration for '{parameter}': {reason}"
        super().__init__(message)
