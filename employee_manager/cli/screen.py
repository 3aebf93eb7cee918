# cli/screen.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

from employee_manager.utils.terminal import clear_screen, render_header

if TYPE_CHECKING:
    from employee_manager.app import Application

# What render_interactive_content hands back:
#   "menu" / "login" / ...   a registered screen name
#   Screen instance          a one-off screen (search results, a given profile)
#   None                     no further navigation
Target = Union[str, "Screen", None]


class Screen:
    """
    One interactive unit: header box, body text, then a blocking prompt loop
    that decides which screen comes next.
    """
    name = ""
    requires_login = True
    required_permission = 0     # 0 = any logged-in employee

    def __init__(self, app: "Application"):
        self.app = app

    def header_text(self) -> str:
        return ""

    def render_header(self) -> None:
        for line in render_header(self.header_text(), self.app.config.header_width):
            print(line)
        print()

    def render_body(self) -> None:
        pass

    def render_interactive_content(self) -> Target:
        raise NotImplementedError

    def display(self) -> Target:
        clear_screen()
        self.render_header()
        self.render_body()
        return self.render_interactive_content()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


def body_line(text: str) -> None:
    print(f"***  {text}  ***")
    print()


def pause() -> None:
    input("\nPress Enter to continue...")
