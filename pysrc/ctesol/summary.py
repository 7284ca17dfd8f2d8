"""Monthly accumulation of hourly irradiance.

Defines :class:`MonthlyAccumulator` (incremental, one hourly result at a
time) and :func:`monthly_accumulation` (whole series at once). Both assume
uniform one-hour sampling, so summing W/m² over the hours gives Wh/m².
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .constants import WH_TO_KWH
from .errors import WeatherDataError
from .models.results import IrradianceResult, MonthlyIrradiation


class MonthlyAccumulator:
    """Accumulates direct and diffuse irradiation per month.

    Internal accumulators are float64 arrays indexed by month - 1. Results
    passed to :meth:`update` are read, never modified.
    """

    def __init__(self) -> None:
        self._direct_wh = np.zeros(12, dtype=np.float64)
        self._diffuse_wh = np.zeros(12, dtype=np.float64)
        self._hours = np.zeros(12, dtype=np.int64)
        self._days: list[set[int]] = [set() for _ in range(12)]

    def update(self, result: IrradianceResult) -> None:
        """Ingest one hourly result.

        Raises:
            WeatherDataError: If the result's month is outside [1, 12].
        """
        if not 1 <= result.month <= 12:
            raise WeatherDataError("month", result.month, "must be in [1, 12]")
        idx = result.month - 1
        self._direct_wh[idx] += result.direct
        self._diffuse_wh[idx] += result.diffuse
        self._hours[idx] += 1
        self._days[idx].add(result.day)

    def finalize(self) -> dict[int, MonthlyIrradiation]:
        """Monthly totals in kWh/m² for the months that received at least one result."""
        return {
            idx + 1: MonthlyIrradiation(
                month=idx + 1,
                direct=float(self._direct_wh[idx] * WH_TO_KWH),
                diffuse=float(self._diffuse_wh[idx] * WH_TO_KWH),
                hours=int(self._hours[idx]),
                days=len(self._days[idx]),
            )
            for idx in map(int, np.flatnonzero(self._hours > 0))
        }


def monthly_accumulation(results: Iterable[IrradianceResult]) -> dict[int, MonthlyIrradiation]:
    """
    Direct and diffuse irradiation on a surface per month.

    Args:
        results: Hourly results, one per hour (e.g. from
            :func:`ctesol.irradiance.radiation_for_surface`)

    Returns:
        Month number -> MonthlyIrradiation (kWh/m²), only for months present
        in the input

    Example:
        >>> monthly = monthly_accumulation(radiation_for_surface(observations, location, Surface.vertical(0)))
        >>> monthly[7].total
    """
    accumulator = MonthlyAccumulator()
    for result in results:
        accumulator.update(result)
    return accumulator.finalize()


def annual_total(monthly: dict[int, MonthlyIrradiation]) -> float:
    """Sum of the monthly totals, kWh/m²."""
    return float(np.sum([m.total for m in monthly.values()]))
