import pytest

from aoc_helper.cli import main
from aoc_helper.exceptions import MissingSessionIdError


def test_main_invalid_date(mocker, capsys):
    mocker.patch("sys.argv", ["aoc-helper", "1", "2014"])
    with pytest.raises(SystemExit(1)):
        main()
    out, err = capsys.readouterr()
    assert out.startswith("usage: aoc-helper [day 1-25] [year 2015-")


def test_main_valid_date(mocker, capsys):
    mocker.patch("sys.argv", ["aoc-helper", "8", "2015"])
    getter = mocker.patch("aoc_helper.cli.get_data", return_value="stuff")
    main()
    out, err = capsys.readouterr()
    assert err == ""
    assert out == "stuff\n"
    getter.assert_called_once_with(session_id=None, year=2015, day=8, input_path=None)


def test_main_valid_date_forgiving(mocker, capsys):
    mocker.patch("sys.argv", ["aoc-helper", "2015", "8"])
    getter = mocker.patch("aoc_helper.cli.get_data", return_value="stuff")
    main()
    out, err = capsys.readouterr()
    assert out == "stuff\n"
    getter.assert_called_once_with(session_id=None, year=2015, day=8, input_path=None)


def test_main_session_and_input(mocker):
    mocker.patch("sys.argv", ["aoc-helper", "3", "2016", "-s", "tok", "-i", "x.txt"])
    getter = mocker.patch("aoc_helper.cli.get_data", return_value="stuff")
    main()
    getter.assert_called_once_with(session_id="tok", year=2016, day=3, input_path="x.txt")


def test_main_error(mocker, capsys):
    mocker.patch("sys.argv", ["aoc-helper", "3", "2016"])
    mocker.patch("aoc_helper.cli.get_data", side_effect=MissingSessionIdError("nope"))
    with pytest.raises(SystemExit(1)):
        main()
    out, err = capsys.readouterr()
    assert out == ""
    assert err == "ERROR: nope\n"


def test_main_reads_cache(tmp_path, capsys, mocker):
    cached = tmp_path / "inputs" / "2016" / "day3.txt"
    cached.parent.mkdir(parents=True)
    cached.write_text("cached input\n")
    mocker.patch("sys.argv", ["aoc-helper", "3", "2016"])
    main()
    out, err = capsys.readouterr()
    assert out == "cached input\n"
