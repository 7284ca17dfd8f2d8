"""Day-of-year conventions.

A (month, day) pair without a year is always read in the non-leap
reference year 2001, so hourly series from 8760-hour weather files map to
days 1..365. A full ``datetime.date`` keeps its own year (days 1..366).
"""

from __future__ import annotations

import datetime as _dt

from .constants import REFERENCE_YEAR
from .errors import DomainError


def day_of_year(month: int | _dt.date, day: int | None = None) -> int:
    """
    Number of the day in the year [1, 366].

    Args:
        month: Month [1, 12], or a ``datetime.date`` / ``datetime.datetime``
        day: Day of the month [1, 31]. Required when ``month`` is an int.

    Returns:
        Day of the year. (month, day) pairs use the reference year 2001.

    Raises:
        DomainError: If the date does not exist (e.g. 29 February without a year).

    Example:
        >>> day_of_year(6, 11)
        162
        >>> day_of_year(datetime.date(2016, 12, 23))
        358
    """
    if isinstance(month, _dt.date):
        return month.timetuple().tm_yday
    if day is None:
        raise DomainError("day", "None", "day is required when month is given as a number")
    try:
        date = _dt.date(REFERENCE_YEAR, int(month), int(day))
    except ValueError as err:
        raise DomainError("date", f"{month}-{day}", f"not a valid date in reference year {REFERENCE_YEAR}") from err
    return date.timetuple().tm_yday


def day_angle(nday: float) -> float:
    """Day angle B = (n - 1) * 360 / 365 in degrees (Duffie & Beckman 1.4.2)."""
    return (nday - 1) * 360.0 / 365.0
