# cli/menu.py
from __future__ import annotations

import logging
from typing import List, NamedTuple

from employee_manager.cli.screen import Screen, Target, body_line
from employee_manager.models.employee import GENERAL_PERMS, HR_PERMS, MANAGEMENT_PERMS, Employee
from employee_manager.utils.input_handler import get_input, get_int

log = logging.getLogger(__name__)

# (screen name, label, permission mask) in display order
MENU_CATALOG = (
    ("list", "View Employees", HR_PERMS | MANAGEMENT_PERMS),
    ("search", "Search Employees", HR_PERMS | MANAGEMENT_PERMS),
    ("add", "Add Employee", HR_PERMS),
    ("remove", "Remove Employee", HR_PERMS),
    ("file", "View Your File", GENERAL_PERMS),
)


class MenuOption(NamedTuple):
    position: int
    screen_name: str
    label: str


def build_menu_options(employee: Employee) -> List[MenuOption]:
    """Options the employee may see, numbered 1..N in catalog order."""
    options = []
    for screen_name, label, mask in MENU_CATALOG:
        if employee.has_permission(mask):
            options.append(MenuOption(len(options) + 1, screen_name, label))
    return options


class LoginScreen(Screen):
    name = "login"
    requires_login = False

    def header_text(self) -> str:
        return "Welcome to FooBar Employee Management"

    def render_body(self) -> None:
        body_line("Login to Continue")

    def render_interactive_content(self) -> Target:
        while True:
            username = get_input("Username", allow_empty=True)
            password = get_input("Password", allow_empty=True)
            if self.app.login(username, password):
                return "menu"
            print()
            print("Invalid login, please try again.")


class MenuScreen(Screen):
    """
    Options are rebuilt on every visit so permission changes made during
    the session show up the next time the menu is drawn.
    """
    name = "menu"

    def header_text(self) -> str:
        return f"Welcome {self.app.current_user.full_name}!"

    def render_body(self) -> None:
        body_line("What do you need to do today?")

    def render_interactive_content(self) -> Target:
        options = build_menu_options(self.app.current_user)
        for o in options:
            print(f"{o.position}. {o.label}")
        print()
        print("0. Exit Application")
        print()

        choice = get_int("Choice", valid=range(len(options) + 1))
        if choice == 0:
            log.info(f"Employee {self.app.current_user.id} exited the application.")
            return None
        return options[choice - 1].screen_name
