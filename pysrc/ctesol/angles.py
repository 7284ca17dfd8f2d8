"""Trigonometric functions in degrees.

All functions accept floats or numpy arrays. The inverse functions raise
:class:`~ctesol.errors.DomainError` instead of returning NaN; formulas where
rounding can push a sine or cosine slightly outside [-1, 1] clamp with
:func:`clip_unit` first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .constants import TO_DEG, TO_RAD
from .errors import DomainError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


def sind(angle: ArrayLike):
    return np.sin(TO_RAD * np.asarray(angle, dtype=float))


def cosd(angle: ArrayLike):
    return np.cos(TO_RAD * np.asarray(angle, dtype=float))


def tand(angle: ArrayLike):
    return np.tan(TO_RAD * np.asarray(angle, dtype=float))


def _check_unit(name: str, value: ArrayLike) -> np.ndarray:
    arr = np.asarray(value, dtype=float)
    if np.any(np.isnan(arr)) or np.any(np.abs(arr) > 1.0):
        bad = arr if arr.ndim == 0 else arr[np.isnan(arr) | (np.abs(arr) > 1.0)][0]
        raise DomainError(name, float(bad), "argument must be in [-1, 1]")
    return arr


def asind(rsin: ArrayLike):
    """Arc sine in degrees. Raises DomainError outside [-1, 1]."""
    return TO_DEG * np.arcsin(_check_unit("asind", rsin))


def acosd(rcos: ArrayLike):
    """Arc cosine in degrees. Raises DomainError outside [-1, 1]."""
    return TO_DEG * np.arccos(_check_unit("acosd", rcos))


def atand(rtan: ArrayLike):
    return TO_DEG * np.arctan(np.asarray(rtan, dtype=float))


def clip_unit(value: ArrayLike):
    """Clamp a sine/cosine value into [-1, 1]."""
    return np.clip(value, -1.0, 1.0)


def wrap_angle(angle: ArrayLike):
    """
    Wrap an angle in degrees into (-180, 180].

    Args:
        angle: Angle in degrees (any finite value)

    Returns:
        Equivalent angle in (-180, 180]
    """
    wrapped = -np.mod(180.0 - np.asarray(angle, dtype=float), 360.0) + 180.0
    return wrapped
