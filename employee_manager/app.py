# app.py
from __future__ import annotations

import logging
from typing import Dict, Optional

from employee_manager.cli.employee_menu import AddEmployeeScreen, FileScreen, ListScreen, SearchScreen
from employee_manager.cli.menu import LoginScreen, MenuScreen
from employee_manager.cli.screen import Screen, Target
from employee_manager.config import Config
from employee_manager.data.directory import EmployeeDirectory
from employee_manager.models.employee import Employee

log = logging.getLogger(__name__)


class Application:
    """
    Owns the directory, the logged-in identity and the named screens,
    and runs whichever screen was navigated to last until none is left.
    """

    def __init__(self, directory: EmployeeDirectory, config: Config):
        self.directory = directory
        self.config = config
        self._current_id: Optional[int] = None
        self._next: Optional[Screen] = None
        self.screens: Dict[str, Screen] = {}
        for screen in (
            LoginScreen(self),
            MenuScreen(self),
            ListScreen(self),
            SearchScreen(self),
            AddEmployeeScreen(self),
            ListScreen(self, remove=True),
            FileScreen(self),
        ):
            self.screens[screen.name] = screen

    # ---------- identity ----------
    @property
    def current_user(self) -> Optional[Employee]:
        if self._current_id is None:
            return None
        return self.directory.find_by_id(self._current_id)

    def login(self, username: str, password: str) -> bool:
        employee = self.directory.authenticate(username, password)
        if employee is None:
            log.info(f"Failed login for username '{username}'.")
            return False
        self._current_id = employee.id
        log.info(f"Employee {employee.id} ('{employee.username}') logged in.")
        return True

    def remove_employee(self, emp_id: int) -> bool:
        return self.directory.remove_by_id(emp_id, current_id=self._current_id)

    # ---------- navigation ----------
    @property
    def pending_screen(self) -> Optional[Screen]:
        return self._next

    def navigate_to(self, target: Target) -> None:
        """
        Queues the next screen, by registered name or as an instance.
        Screens the logged-in employee may not use fall back to the menu
        (or to login when nobody is logged in).
        """
        if target is None:
            self._next = None
            return
        if isinstance(target, str):
            if target not in self.screens:
                raise KeyError(f"Unknown screen '{target}'.")
            screen = self.screens[target]
        else:
            screen = target

        user = self.current_user
        if screen.requires_login and user is None:
            screen = self.screens["login"]
        elif screen.required_permission and not user.has_permission(screen.required_permission):
            log.warning(f"Employee {user.id} may not open screen '{screen.name}'.")
            screen = self.screens["menu"]
        self._next = screen

    def run(self, start: str = "login") -> int:
        """Blocks until the menu's exit option is chosen; returns the exit status."""
        self.navigate_to(start)
        while self._next is not None:
            screen, self._next = self._next, None
            target = screen.display()
            if target is not None:
                self.navigate_to(target)
        return 0
