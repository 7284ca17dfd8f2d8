"""Model configuration classes."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from ..constants import DEFAULT_ALBEDO, HORIZON_ZENITH_DEG
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

MODEL_NAMES = ("iso52010", "duffie")


@dataclass(frozen=True)
class ModelConfig:
    """
    Model configuration for irradiance calculations.

    Groups all computational settings in one typed object.
    Pure configuration - no paths or data.

    Attributes:
        model: Solar position formula family, "iso52010" (default) or "duffie".
        albedo: Ground reflectance used when a surface does not carry its own. Default 0.2.
        horizon_zenith: Largest zenith used in the irradiance split, degrees. Sun positions
            closer to the horizon are evaluated at this zenith so that divisions by
            sin(altitude) stay finite. Default 89.5.
        use_solar_time: If True, observation hours are clock hours and are converted to
            solar time with the location's longitude and UTC offset. If False (default),
            hours are already solar hours.

    Examples:
        Basic usage with defaults:

        >>> config = ModelConfig.defaults()
        >>> config.save("my_config.json")

        Classical formulas:

        >>> config = ModelConfig(model="duffie")
    """

    model: str = "iso52010"
    albedo: float = DEFAULT_ALBEDO
    horizon_zenith: float = HORIZON_ZENITH_DEG
    use_solar_time: bool = False

    def __post_init__(self):
        if self.model not in MODEL_NAMES:
            raise ConfigurationError("model", f"unknown model '{self.model}', expected one of {list(MODEL_NAMES)}")
        if not 0.0 <= self.albedo <= 1.0:
            raise ConfigurationError("albedo", f"must be in [0, 1], got {self.albedo}")
        if not 80.0 <= self.horizon_zenith < 90.0:
            raise ConfigurationError("horizon_zenith", f"must be in [80, 90), got {self.horizon_zenith}")

    @classmethod
    def defaults(cls) -> ModelConfig:
        """
        Standard configuration for most users.

        Returns:
            ModelConfig with the ISO 52010-1 model, albedo 0.2 and solar hours.
        """
        return cls()

    def save(self, path: str | Path):
        """
        Save configuration to JSON file.

        Args:
            path: Output path for JSON file

        Example:
            >>> config = ModelConfig.defaults()
            >>> config.save("my_settings.json")
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)

        logger.info(f"Saved configuration to {path}")

    @classmethod
    def load(cls, path: str | Path) -> ModelConfig:
        """
        Load configuration from JSON file.

        Missing keys take their default values; unknown keys are rejected.

        Args:
            path: Path to JSON configuration file

        Returns:
            ModelConfig loaded from file

        Raises:
            ConfigurationError: If the file holds unknown keys or invalid values.

        Example:
            >>> config = ModelConfig.load("my_settings.json")
            >>> results = radiation_for_surface(observations, location, surface, config=config)
        """
        path = Path(path)

        with open(path) as f:
            data = json.load(f)

        unknown = sorted(set(data) - set(cls.__dataclass_fields__))
        if unknown:
            raise ConfigurationError(str(path), f"unknown keys {unknown}")

        config = cls(**data)
        logger.info(f"Loaded configuration from {path}")
        return config
