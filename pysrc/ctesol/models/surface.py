"""Surface orientation data model."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import DomainError


@dataclass(frozen=True)
class Surface:
    """
    Orientation of a plane receiving irradiance.

    Attributes:
        tilt: Tilt β from the horizontal, degrees [0, 180]. 0 is horizontal facing
            up, 90 vertical, above 90 the surface has a downward-facing component.
        azimuth: Azimuth γ of the projection of the surface normal on the horizontal,
            degrees [-180, 180]: 0 south, east negative, west positive.
        albedo: Solar reflectivity of the ground in front of the surface [0, 1]. None (default)
            uses the albedo of the model configuration.
        name: Optional label.

    Example:
        >>> Surface(tilt=45, azimuth=15)  # 45° tilted, 15° west of south
        >>> Surface.vertical(-90, name="E")
    """

    tilt: float
    azimuth: float = 0.0
    albedo: float | None = None
    name: str | None = None

    def __post_init__(self):
        if not 0 <= self.tilt <= 180:
            raise DomainError("tilt", self.tilt, "must be in [0, 180]")
        if not -180 <= self.azimuth <= 180:
            raise DomainError("azimuth", self.azimuth, "must be in [-180, 180]")
        if self.albedo is not None and not 0 <= self.albedo <= 1:
            raise DomainError("albedo", self.albedo, "must be in [0, 1]")

    @classmethod
    def horizontal(cls, albedo: float | None = None, name: str | None = "Horiz.") -> Surface:
        """Horizontal surface facing up."""
        return cls(tilt=0.0, azimuth=0.0, albedo=albedo, name=name)

    @classmethod
    def vertical(cls, azimuth: float, albedo: float | None = None, name: str | None = None) -> Surface:
        """Vertical surface (wall) with the given azimuth."""
        return cls(tilt=90.0, azimuth=azimuth, albedo=albedo, name=name)

    @property
    def is_horizontal(self) -> bool:
        return self.tilt == 0.0


# Horizontal plane plus vertical walls in the eight main directions
STANDARD_ORIENTATIONS: tuple[Surface, ...] = (
    Surface.horizontal(),
    Surface.vertical(-135.0, name="NE"),
    Surface.vertical(-90.0, name="E"),
    Surface.vertical(-45.0, name="SE"),
    Surface.vertical(0.0, name="S"),
    Surface.vertical(45.0, name="SW"),
    Surface.vertical(90.0, name="W"),
    Surface.vertical(135.0, name="NW"),
    Surface.vertical(180.0, name="N"),
)


def orientation(name: str) -> Surface | None:
    """Standard orientation by name ("Horiz.", "NE", "E", ...), or None if unknown."""
    for surface in STANDARD_ORIENTATIONS:
        if surface.name == name:
            return surface
    return None
