import pytest

import aoc_helper
from aoc_helper.exceptions import MissingSessionIdError
from aoc_helper.exceptions import NoPuzzleOnDateError


def test_get_from_server(pook, monkeypatch, tmp_path):
    monkeypatch.setenv("AOC_SESSION", "thetesttoken")
    mock = pook.get(
        url="https://adventofcode.com/2018/day/1/input",
        response_body="fake data for year 2018 day 1\n",
    )
    data = aoc_helper.get_data(year=2018, day=1)
    assert data == "fake data for year 2018 day 1"
    assert mock.calls == 1
    cached = tmp_path / "inputs" / "2018" / "day1.txt"
    assert cached.read_text() == "fake data for year 2018 day 1\n"


def test_saved_data_is_reused_if_available(tmp_path, pook):
    mock = pook.get(
        url="https://adventofcode.com/2018/day/1/input",
        response_body="fake data for year 2018 day 1",
    )
    cached = tmp_path / "inputs" / "2018" / "day1.txt"
    cached.parent.mkdir(parents=True)
    cached.write_text("saved data for year 2018 day 1\n")
    data = aoc_helper.get_data(year=2018, day=1)
    assert data == "saved data for year 2018 day 1"
    assert mock.calls == 0


def test_get_data_custom_path(tmp_path, mocker):
    acquire = mocker.patch("aoc_helper.get.acquire", return_value=" stuff ")
    path = tmp_path / "mine.txt"
    assert aoc_helper.get_data("tok", day=2, year=2019, input_path=path) == "stuff"
    acquire.assert_called_once_with(path, 2019, 2, "tok")


def test_get_data_uses_current_date_if_unspecified(pook, freezer):
    mock = pook.get(
        url="https://adventofcode.com/2017/day/17/input",
        response_body="fake data for year 2017 day 17",
    )
    freezer.move_to("2017-12-17 12:00:00Z")
    data = aoc_helper.get_data(session_id="thetesttoken")
    assert data == "fake data for year 2017 day 17"
    assert mock.calls == 1


def test_get_data_needs_session_on_cache_miss():
    with pytest.raises(MissingSessionIdError):
        aoc_helper.get_data(year=2018, day=1)


def test_get_data_invalid_date(mocker):
    acquire = mocker.patch("aoc_helper.get.acquire")
    with pytest.raises(NoPuzzleOnDateError):
        aoc_helper.get_data(session_id="thetesttoken", year=2018, day=26)
    acquire.assert_not_called()
