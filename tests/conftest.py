import pook as pook_mod
import pytest

from aoc_helper.utils import http


@pytest.fixture(autouse=True)
def mocked_sleep(mocker):
    no_sleep_till_brooklyn = mocker.patch("time.sleep")
    # nerf the rate-limiter - tests don't actually talk to AoC server at all
    http._max_t = -1.0
    return no_sleep_till_brooklyn


@pytest.fixture(autouse=True)
def remove_user_env(monkeypatch, tmp_path):
    monkeypatch.delenv("AOC_SESSION_ID", raising=False)
    monkeypatch.delenv("AOC_SESSION", raising=False)
    monkeypatch.delenv("AOC_HELPER_CONFIG", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    # default cache dir and config file are relative to the working directory
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def pook():
    pook_mod.on()
    yield pook_mod
    pook_mod.off()


@pytest.fixture
def cached_input(tmp_path):
    path = tmp_path / "inputs" / "2015" / "day1.txt"
    path.parent.mkdir(parents=True)
    return path
