from __future__ import annotations

import datetime
import logging

from .exceptions import AocHelperError
from .exceptions import NoPuzzleOnDateError
from .exceptions import PuzzleInFutureError
from .utils import AOC_TZ


log = logging.getLogger(__name__)

FIRST_YEAR = 2015
LAST_DAY = 25


def _aoc_today() -> datetime.date:
    return datetime.datetime.now(tz=AOC_TZ).date()


def validate_date(year: int, day: int, today: datetime.date | None = None) -> None:
    """
    Check that a puzzle was released on December `day` of `year`.

    Raises `PuzzleInFutureError` if the date is past Christmas of the most recently
    started Advent of Code, and `NoPuzzleOnDateError` if the day is not in 1-25 or
    the date is before the very first puzzle (December 1st 2015).

    Days within the current event are not checked against the unlock schedule, so
    this is a little more forgiving than adventofcode.com itself.
    """
    if today is None:
        today = _aoc_today()
    max_year = today.year if today.month == 12 else today.year - 1
    # day 26+ doesn't exist in any year, but compare as if it did so that
    # far-future dates are reported as such
    if (year, day) > (max_year, LAST_DAY):
        raise PuzzleInFutureError(f"{year}/{day:02d} is in the future")
    if not 1 <= day <= LAST_DAY or year < FIRST_YEAR:
        raise NoPuzzleOnDateError(f"there was no puzzle on {year}/{day:02d}")
    log.debug("date %s/%02d is valid (cutoff year %s)", year, day, max_year)


def most_recent_year() -> int:
    """
    This year, if it's December.
    The most recent year, otherwise.
    Note: Advent of Code started in 2015
    """
    aoc_now = datetime.datetime.now(tz=AOC_TZ)
    year = aoc_now.year
    if aoc_now.month < 12:
        year -= 1
    if year < FIRST_YEAR:
        raise AocHelperError("Time travel not supported yet")
    return year


def current_day() -> int:
    """
    Most recent day, if it's during the Advent of Code. Happy Holidays!
    Day 1 is assumed, otherwise.
    """
    aoc_now = datetime.datetime.now(tz=AOC_TZ)
    if aoc_now.month != 12:
        log.warning("current_day is only available in December (EST)")
        return 1
    return min(aoc_now.day, LAST_DAY)
