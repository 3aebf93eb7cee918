# utils/input_handler.py
from __future__ import annotations

from typing import Iterable

from employee_manager.exceptions import ValidationError
from employee_manager.utils.parse_utils import parse_flag, parse_int


def _warn(message: str) -> None:
    print()
    print(message)


def get_input(label: str, allow_empty: bool = False) -> str:
    """Prints '<label>> ' and reads one line; loops on empty input unless allow_empty."""
    while True:
        v = input(f"{label}> ").strip()
        if not v and allow_empty:
            return ""
        if not v:
            _warn("Please enter a value.")
            continue
        return v


def get_int(label: str, valid: Iterable[int] | None = None) -> int:
    valid = None if valid is None else tuple(valid)
    while True:
        try:
            return parse_int(input(f"{label}> "), valid)
        except ValidationError as e:
            _warn(str(e))


def get_flag(label: str, current: bool | None = None) -> bool:
    """Yes/no prompt answered with 0 or 1; shows the current value when given."""
    hint = "0: no, 1: yes"
    if current is not None:
        hint += f"; Current: {int(current)}"
    while True:
        try:
            return parse_flag(input(f"{label} ({hint})> "))
        except ValidationError as e:
            _warn(str(e))
