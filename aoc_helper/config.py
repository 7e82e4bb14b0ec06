from __future__ import annotations

import logging
import os
import typing as t
from pathlib import Path

from ._compat import tomllib


log = logging.getLogger(__name__)

SESSION_ENV_VARS = ("AOC_SESSION_ID", "AOC_SESSION")
CONFIG_ENV_VAR = "AOC_HELPER_CONFIG"
CONFIG_FILE_NAME = "aoc_helper.toml"


def config_path() -> Path:
    return Path(os.environ.get(CONFIG_ENV_VAR, CONFIG_FILE_NAME)).expanduser()


def load_config(path: Path | None = None) -> dict[str, t.Any]:
    """
    Parsed contents of the TOML config file, or an empty dict if there is no such
    file. Problems reading or parsing an existing file are left unhandled.
    """
    if path is None:
        path = config_path()
    try:
        txt = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log.debug("no config file at %s", path)
        return {}
    log.debug("loaded config from %s", path)
    return tomllib.loads(txt)


def resolve_session_id(explicit: str | None = None) -> str | None:
    """
    Discover the user's session id. The first of these which is set wins:

        1) an explicitly provided value
        2) the AOC_SESSION_ID (or AOC_SESSION) environment variable
        3) the "session-id" key in aoc_helper.toml (or the file named by the
           AOC_HELPER_CONFIG environment variable)

    Empty values count as unset. Returns None if no session id was found anywhere.
    """
    if explicit:
        return explicit
    for name in SESSION_ENV_VARS:
        token = os.environ.get(name)
        if token:
            log.debug("using session id from env var %s", name)
            return token
    token = load_config().get("session-id")
    if token:
        log.debug("using session id from config file")
        return str(token).strip()
    log.debug("no session id found")
    return None
