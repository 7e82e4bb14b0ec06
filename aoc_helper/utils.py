from __future__ import annotations

import logging
import os
import platform
import time
from collections import deque
from importlib.metadata import version
from pathlib import Path
from zoneinfo import ZoneInfo

import urllib3

from .exceptions import InputIOError
from .exceptions import PuzzleLockedError

if platform.system() == "Windows":
    import colorama

    colorama.just_fix_windows_console()


log: logging.Logger = logging.getLogger(__name__)
AOC_TZ = ZoneInfo("America/New_York")
_v = version("advent-of-code-helper")
USER_AGENT = f"advent-of-code-helper v{_v} (python)"
URL = "https://adventofcode.com/{year}/day/{day}"


class HttpClient:
    # every request to adventofcode.com goes through this wrapper
    # so that we can put in user agent header, rate-limit, etc.
    # users should not need to use this class directly.

    pool_manager: urllib3.PoolManager
    req_count: int

    def __init__(self) -> None:
        proxy_url = os.environ.get("http_proxy") or os.environ.get("https_proxy")
        # a failed request is final, urllib3 must not quietly try again
        kw = {"headers": {"User-Agent": USER_AGENT}, "retries": False}
        if proxy_url:
            self.pool_manager = urllib3.ProxyManager(proxy_url, **kw)
        else:
            self.pool_manager = urllib3.PoolManager(**kw)
        self.req_count = 0
        self._max_t = 3.0
        self._cooloff = 0.16
        self._history = deque([time.time() - self._max_t] * 4, maxlen=4)

    def _limiter(self) -> None:
        now = time.time()
        t0 = self._history[0]
        if now - t0 < self._max_t:
            # 4 requests within 3 seconds is over the speed limit of 1 req/second.
            # the delay starts at 160ms and doubles on every repeat offence
            msg = "you're being rate-limited - slow down on the requests! (delay=%.02fs)"
            log.warning(msg, self._cooloff)
            time.sleep(self._cooloff)
            self._cooloff *= 2
            self._cooloff = min(self._cooloff, 10)
        self._history.append(now)

    def get(self, url: str, token: str | None = None) -> urllib3.BaseHTTPResponse:
        if token is None:
            headers = self.pool_manager.headers
        else:
            headers = self.pool_manager.headers | {"Cookie": f"session={token}"}
        self._limiter()
        resp = self.pool_manager.request("GET", url, headers=headers)
        self.req_count += 1
        return resp


http: HttpClient = HttpClient()


def fetch_input(year: int, day: int, token: str) -> bytes:
    """
    Download the puzzle input of the user identified by session `token`. This is
    never cached here - see `aoc_helper.cache.acquire` for that.
    """
    url = URL.format(year=year, day=day) + "/input"
    sanitized = "..." + token[-4:]
    log.info("getting data year=%s day=%s token=%s", year, day, sanitized)
    response = http.get(url, token=token)
    if response.status >= 400:
        if response.status == 404:
            raise PuzzleLockedError(f"{year}/{day:02d} not available yet")
        log.error("got %s status code token=%s", response.status, sanitized)
        log.error(response.data.decode(errors="replace"))
        raise InputIOError(f"HTTP {response.status} at {url}")
    return response.data


def _ensure_intermediate_dirs(path: Path) -> None:
    path.expanduser().parent.mkdir(parents=True, exist_ok=True)


_UNITS = (
    ("d", 86_400_000_000_000),
    ("h", 3_600_000_000_000),
    ("m", 60_000_000_000),
    ("s", 1_000_000_000),
    ("ms", 1_000_000),
    ("us", 1_000),
    ("ns", 1),
)


def format_elapsed(ns: int) -> str:
    """
    Render a duration given in nanoseconds as a breakdown from the largest to the
    smallest unit, skipping any unit which is zero. For example 1.5 seconds renders
    as "1s 500ms".
    """
    parts = []
    remaining = int(ns)
    for suffix, size in _UNITS:
        n, remaining = divmod(remaining, size)
        if n:
            parts.append(f"{n}{suffix}")
    return " ".join(parts) or "0ns"
