"""
Local cache of puzzle inputs.

Each input lives in a plain UTF-8 text file, by default at
``inputs/{year}/day{day}.txt`` relative to the working directory. The file is
stored exactly as it was received from adventofcode.com. An *empty* file means
"not fetched yet", so creating an empty placeholder (or truncating a bad cache
file) will cause the input to be downloaded again on the next run.
"""
from __future__ import annotations

import logging
import typing as t
from pathlib import Path

import urllib3

from .exceptions import InputIOError
from .exceptions import MissingSessionIdError
from .utils import _ensure_intermediate_dirs
from .utils import fetch_input


log = logging.getLogger(__name__)

Fetcher = t.Callable[[int, int, str], bytes]


def default_input_path(year: int, day: int) -> Path:
    return Path("inputs", str(year), f"day{day}.txt")


def _open(path: Path) -> t.BinaryIO:
    # "a+b" creates the file if it's missing, without clobbering existing content
    try:
        return open(path, "a+b")
    except FileNotFoundError:
        log.debug("creating parent directory for %s", path)
        _ensure_intermediate_dirs(path)
        return open(path, "a+b")


def acquire(
    path: str | Path,
    year: int,
    day: int,
    token: str | None,
    fetch: Fetcher | None = None,
) -> str:
    """
    Return the raw (untrimmed) puzzle input stored at `path`. If the cache file is
    missing or empty, the input is fetched using session `token` and written to
    the cache before being read back.

    Raises `MissingSessionIdError` on a cache miss without a token, and wraps any
    disk or network failure in `InputIOError`. Nothing is retried.
    """
    if fetch is None:
        fetch = fetch_input
    path = Path(path).expanduser()
    try:
        with _open(path) as f:
            f.seek(0)
            data = f.read()
            if data:
                log.debug("input_data cache hit %s", path)
                return data.decode("utf-8")
            log.debug("input_data cache miss %s", path)
            if not token:
                raise MissingSessionIdError(
                    f"session id is needed to get the input for {year}/{day:02d}"
                )
            f.write(fetch(year, day, token))
        # the file is closed now, so this sees exactly what was written
        data = path.read_bytes()
    except (OSError, urllib3.exceptions.HTTPError) as err:
        raise InputIOError(f"failed to get input for {year}/{day:02d} at {path}: {err}") from err
    if not data:
        raise InputIOError(f"no input data received for {year}/{day:02d}")
    log.info("saved the puzzle input to %s", path)
    return data.decode("utf-8")
