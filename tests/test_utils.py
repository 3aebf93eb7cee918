import pytest

from employee_manager.exceptions import ValidationError
from employee_manager.utils.input_handler import get_flag, get_input, get_int
from employee_manager.utils.parse_utils import parse_flag, parse_int
from employee_manager.utils.terminal import render_header


def test_parse_int():
    assert parse_int(" 12 ") == 12
    assert parse_int("0", valid=(0, 1)) == 0
    for bad in ("", "   ", "abc", "1.5"):
        with pytest.raises(ValidationError):
            parse_int(bad)
    with pytest.raises(ValidationError):
        parse_int("2", valid=(0, 1))


def test_parse_flag():
    assert parse_flag("1") is True
    assert parse_flag("0") is False
    for bad in ("", "yes", "2", "-1"):
        with pytest.raises(ValidationError):
            parse_flag(bad)


def test_get_input_reprompts_on_empty(feed, capsys):
    feed("", "   ", "Jane")
    assert get_input("First Name") == "Jane"
    out = capsys.readouterr().out
    assert out.count("First Name> ") == 3
    assert "Please enter a value." in out


def test_get_input_allows_empty_when_asked(feed):
    feed("")
    assert get_input("Password", allow_empty=True) == ""


def test_get_int_retries_until_number(feed, capsys):
    feed("", "abc", "5")
    assert get_int("Choice") == 5
    out = capsys.readouterr().out
    assert out.count("Choice> ") == 3
    assert "ID must be of type int." in out


def test_get_int_retries_until_in_range(feed, capsys):
    feed("7", "2")
    assert get_int("Choice", valid=range(3)) == 2
    assert "Please input a valid option." in capsys.readouterr().out


def test_get_flag_shows_current_value(feed, capsys):
    feed("2", "yes", "1")
    assert get_flag("Is employee hr?", current=False) is True
    out = capsys.readouterr().out
    assert "Is employee hr? (0: no, 1: yes; Current: 0)> " in out
    assert out.count("Please input a valid option.") == 2


def test_render_header_single_line():
    rows = render_header("Search Employees", 44)
    assert len(rows) == 5
    assert all(len(r) == 44 for r in rows)
    assert rows[0] == rows[-1] == "*" * 44
    assert all(r.startswith("*") and r.endswith("*") for r in rows)
    assert rows[2].strip("* ") == "Search Employees"
    assert rows[1] == rows[3] == "*" + " " * 42 + "*"


def test_render_header_wraps_long_titles():
    title = 'Showing employees like "' + "a very long query " * 10 + '"'
    rows = render_header(title, 44)
    assert len(rows) > 5
    assert all(len(r) == 44 for r in rows)
    inner = " ".join(r.strip("*").strip() for r in rows[1:-1] if r.strip("*").strip())
    assert inner.split() == title.split()


def test_render_header_respects_width():
    rows = render_header("Hi", 20)
    assert all(len(r) == 20 for r in rows)
