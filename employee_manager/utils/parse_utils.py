# utils/parse_utils.py
from __future__ import annotations

from typing import Iterable

from employee_manager.exceptions import ValidationError


def parse_int(text: str, valid: Iterable[int] | None = None) -> int:
    """
    '12' -> 12
    empty string or non-number -> ValidationError
    with valid given, only values inside it are accepted
    """
    text = text.strip()
    if not text:
        raise ValidationError("A value is required.")
    try:
        n = int(text)
    except ValueError:
        raise ValidationError("ID must be of type int.")
    if valid is not None and n not in set(valid):
        raise ValidationError("Please input a valid option.")
    return n


def parse_flag(text: str) -> bool:
    """'0' -> False, '1' -> True, anything else is rejected."""
    try:
        return parse_int(text, valid=(0, 1)) == 1
    except ValidationError:
        raise ValidationError("Please input a valid option.")
