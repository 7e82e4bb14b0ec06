from __future__ import annotations

from logging import getLogger
from pathlib import Path

from .cache import acquire
from .cache import default_input_path
from .config import resolve_session_id
from .dates import current_day
from .dates import most_recent_year
from .dates import validate_date


log = getLogger(__name__)


def get_data(
    session_id: str | None = None,
    day: int | None = None,
    year: int | None = None,
    input_path: str | Path | None = None,
) -> str:
    """
    Get data for day (1-25) and year (2015+), stripped of surrounding whitespace.
    It's read from the cache file if that was populated already, otherwise it is
    downloaded with the user's session id (puzzle inputs differ by user) and cached.
    """
    session_id = resolve_session_id(session_id)
    if day is None:
        day = current_day()
        log.info("current day=%s", day)
    if year is None:
        year = most_recent_year()
        log.info("most recent year=%s", year)
    validate_date(year, day)
    if input_path is None:
        input_path = default_input_path(year, day)
    data = acquire(input_path, year, day, session_id)
    return data.strip()
