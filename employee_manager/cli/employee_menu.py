# cli/employee_menu.py
from __future__ import annotations

import dataclasses
import logging
from typing import List, Optional

from employee_manager.cli.screen import Screen, Target, body_line, pause
from employee_manager.exceptions import StorageError
from employee_manager.models.employee import (
    GENERAL_PERMS, HR_PERMS, MANAGEMENT_PERMS, Employee, build_permissions,
)
from employee_manager.utils.input_handler import get_flag, get_input, get_int

log = logging.getLogger(__name__)


def _report_storage_error(action: str, err: StorageError) -> None:
    print()
    print(f"Could not {action}: {err}")
    pause()


class ListScreen(Screen):
    """
    Lists employees and asks for an id.
    - view mode: the chosen id opens that employee's profile
    - remove mode: the chosen id is removed and the list is shown again;
      the logged-in employee is never listed
    - employees/query: a fixed result set from a search
    """
    required_permission = HR_PERMS | MANAGEMENT_PERMS

    def __init__(self, app, remove: bool = False,
                 employees: Optional[List[Employee]] = None, query: Optional[str] = None):
        super().__init__(app)
        self.remove = remove
        self.employees = employees
        self.query = query
        if remove:
            self.name = "remove"
            self.required_permission = HR_PERMS
        elif employees is not None:
            self.name = "search-list"
        else:
            self.name = "list"

    def header_text(self) -> str:
        if self.remove:
            return "Remove Employee"
        if self.query is not None:
            return f'Showing employees like "{self.query}"'
        return "Viewing All Employees"

    def render_body(self) -> None:
        if self.remove:
            body_line("Insert Id of Employee to Remove")
        else:
            body_line("Insert Id of Employee to Edit/View")

    def get_employees(self) -> List[Employee]:
        employees = self.app.directory.all() if self.employees is None else self.employees
        if self.remove:
            current_id = self.app.current_user.id
            employees = [e for e in employees if e.id != current_id]
        return employees

    def render_interactive_content(self) -> Target:
        employees = self.get_employees()
        if not employees:
            print("No employees found.")
        for e in employees:
            print(e.summary())
        print()
        print("0. Return to Menu")
        print()

        by_id = {e.id: e for e in employees}
        while True:
            emp_id = get_int("Choice")
            if emp_id == 0:
                return "menu"
            employee = by_id.get(emp_id)
            # a search result may have been removed since the search ran
            if employee is not None and self.app.directory.find_by_id(emp_id) is employee:
                break
            print()
            print("No employee with that ID is listed.")

        if not self.remove:
            return FileScreen(self.app, employee)

        try:
            self.app.remove_employee(emp_id)
        except StorageError as e:
            _report_storage_error("remove employee", e)
        return self


class SearchScreen(Screen):
    name = "search"
    required_permission = HR_PERMS | MANAGEMENT_PERMS

    def header_text(self) -> str:
        return "Search Employees"

    def render_body(self) -> None:
        body_line("Insert Search Query by names, or username to Search")

    def render_interactive_content(self) -> Target:
        query = get_input("Query")
        results = self.app.directory.search(query)
        log.info(f"Search for '{query}' matched {len(results)} employee(s).")
        return ListScreen(self.app, employees=results, query=query)


def _ask_new_username(app, current: Optional[Employee] = None) -> str:
    """
    Loops until the username is free. With current given (edit), a blank
    answer means no change and returns "".
    """
    exclude_id = current.id if current else None
    label = "Username" if current is None else f"Username (Current: {current.username})"
    while True:
        username = get_input(label, allow_empty=current is not None)
        if not username:
            return ""
        if app.directory.is_username_unique(username, exclude_id=exclude_id):
            return username
        print()
        print("That username is already taken.")


class AddEmployeeScreen(Screen):
    name = "add"
    required_permission = HR_PERMS

    def header_text(self) -> str:
        return "Add a new Employee"

    def render_body(self) -> None:
        body_line("Answer prompts to add new employee.")

    def render_interactive_content(self) -> Target:
        first_name = get_input("First Name")
        last_name = get_input("Last Name")
        username = _ask_new_username(self.app)
        password = get_input("Password")
        is_hr = get_flag("Is employee hr?")
        is_management = get_flag("Is employee management?")

        employee = Employee(None, username, first_name, last_name, password,
                            build_permissions(is_hr, is_management))
        try:
            self.app.directory.add(employee)
        except StorageError as e:
            _report_storage_error("add employee", e)
        return "menu"


class EditScreen(Screen):
    """
    Same prompts as adding; blank text answers keep the current value.
    The permission answers always replace the stored mask.
    """
    name = "edit"
    required_permission = HR_PERMS

    def __init__(self, app, employee: Employee):
        super().__init__(app)
        self.employee = employee

    def header_text(self) -> str:
        return "Edit Employee"

    def render_body(self) -> None:
        body_line("Answer prompts to employee information (Leave blank for no change).")

    def render_interactive_content(self) -> Target:
        emp = self.employee
        first_name = get_input(f"First Name (Current: {emp.first_name})", allow_empty=True)
        last_name = get_input(f"Last Name (Current: {emp.last_name})", allow_empty=True)
        username = _ask_new_username(self.app, current=emp)
        password = get_input("Password", allow_empty=True)
        is_hr = get_flag("Is employee hr?", current=emp.has_permission(HR_PERMS))
        is_management = get_flag("Is employee management?", current=emp.has_permission(MANAGEMENT_PERMS))

        before = dataclasses.replace(emp)
        if first_name:
            emp.first_name = first_name
        if last_name:
            emp.last_name = last_name
        if username:
            emp.username = username
        if password:
            emp.update_password(password)
        emp.update_permissions(build_permissions(is_hr, is_management))

        if emp == before:
            return "menu"
        try:
            self.app.directory.update(emp)
        except StorageError as e:
            for f in dataclasses.fields(emp):
                setattr(emp, f.name, getattr(before, f.name))
            _report_storage_error("save changes", e)
        return "menu"


class FileScreen(Screen):
    """A profile page: the logged-in employee's own, or the one given."""
    required_permission = GENERAL_PERMS

    def __init__(self, app, employee: Optional[Employee] = None):
        super().__init__(app)
        self.employee = employee
        self.name = "file" if employee is None else "specific file"
        if employee is not None:
            # reached from the employee list, so the list's gate applies
            self.required_permission = HR_PERMS | MANAGEMENT_PERMS

    def get_employee(self) -> Employee:
        return self.employee if self.employee is not None else self.app.current_user

    def header_text(self) -> str:
        return "Viewing Your Profile" if self.employee is None else "Viewing Profile"

    def can_edit(self, employee: Employee) -> bool:
        viewer = self.app.current_user
        return viewer.id != employee.id and viewer.has_permission(HR_PERMS)

    def render_interactive_content(self) -> Target:
        emp = self.get_employee()
        print(emp.profile())
        print("0. Return to Menu")
        editable = self.can_edit(emp)
        if editable:
            print("1. Edit Employee")
        print()

        choice = get_int("Choice", valid=(0, 1) if editable else (0,))
        if choice == 1:
            return EditScreen(self.app, emp)
        return "menu"
