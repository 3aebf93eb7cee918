# utils/terminal.py
import os
import textwrap
from typing import List


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def render_header(text: str, width: int) -> List[str]:
    """
    Asterisk box of the given width around the title.
    - at least 5 rows tall
    - title wrapped to width - 4 and centred on both axes
    """
    inner = width - 2
    lines = textwrap.wrap(text, width - 4) or [""]
    height = max(len(lines) + 2, 5)
    start = (height - len(lines)) // 2

    rows = ["*" * width]
    for i in range(1, height - 1):
        idx = i - start
        content = lines[idx] if 0 <= idx < len(lines) else ""
        rows.append("*" + content.center(inner) + "*")
    rows.append("*" * width)
    return rows
