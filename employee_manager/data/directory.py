# data/directory.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from employee_manager.exceptions import MalformedRecord, StorageError
from employee_manager.models.employee import FULL_PERMS, RECORD_SUFFIX, Employee

log = logging.getLogger(__name__)


def record_id(path: Path) -> Optional[int]:
    """The employee id a record file name stands for, or None if it is not one."""
    stem = path.stem
    # canonical positive ids only: "7.txt", not "07.txt", "-7.txt" or superscript digits
    if path.suffix != RECORD_SUFFIX or not (stem.isascii() and stem.isdigit()):
        return None
    if stem.startswith("0"):
        return None
    return int(stem)


# First-run login, printed in the README. Not a secret.
BOOTSTRAP_EMPLOYEE = {
    "id": 1,
    "username": "testing",
    "first_name": "Titus",
    "last_name": "Moore",
    "password": "password",
    "permissions": FULL_PERMS,
}


class EmployeeDirectory:
    """
    In-memory set of every employee record, backed by one <id>.txt file each.
    All reads and writes of the storage directory go through here.
    """

    def __init__(self, storage_dir: Path, employees: Optional[List[Employee]] = None):
        self.storage_dir = Path(storage_dir)
        self._employees: Dict[int, Employee] = {}
        for e in sorted(employees or [], key=lambda e: e.id):
            self._employees[e.id] = e
        self.next_id = max(self._employees, default=0) + 1

    # ---------- loading ----------
    @classmethod
    def load(cls, storage_dir: Path) -> "EmployeeDirectory":
        storage_dir = Path(storage_dir)
        if not storage_dir.exists():
            return cls._bootstrap(storage_dir)

        employees = []
        highest_file_id = 0
        for path in sorted(storage_dir.iterdir()):
            if path.is_dir():
                continue
            file_id = record_id(path)
            if file_id is not None:
                highest_file_id = max(highest_file_id, file_id)
            emp = cls._load_file(path)
            if emp is not None:
                employees.append(emp)

        directory = cls(storage_dir, employees)
        # ids of skipped files are never handed out again
        directory.next_id = max(directory.next_id, highest_file_id + 1)
        log.info(f"Loaded {len(directory)} employee record(s) from '{storage_dir}'.")
        return directory

    @classmethod
    def _bootstrap(cls, storage_dir: Path) -> "EmployeeDirectory":
        try:
            storage_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Could not create storage directory '{storage_dir}': {e}") from e
        log.info(f"Initialized storage directory at '{storage_dir}'.")

        seed = Employee(**BOOTSTRAP_EMPLOYEE)
        seed.save(storage_dir)
        log.info(f"Seeded first-run employee '{seed.username}' (id {seed.id}).")
        return cls(storage_dir, [seed])

    @staticmethod
    def _load_file(path: Path) -> Optional[Employee]:
        """Returns None (and logs why) for any file that is not a usable record."""
        if path.suffix != RECORD_SUFFIX:
            log.debug(f"Ignoring non-record file '{path.name}'.")
            return None
        file_id = record_id(path)
        if file_id is None:
            log.warning(f"Skipping '{path.name}': file name is not an employee id.")
            return None

        try:
            emp = Employee.from_file(path)
        except (MalformedRecord, StorageError) as e:
            log.warning(f"Skipping '{path.name}': {e}")
            return None

        if emp.id != file_id:
            log.warning(f"Skipping '{path.name}': stored id {emp.id} does not match the file name.")
            return None
        return emp

    # ---------- queries ----------
    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self.all())

    def all(self) -> List[Employee]:
        return sorted(self._employees.values(), key=lambda e: e.id)

    def find_by_id(self, emp_id: int) -> Optional[Employee]:
        return self._employees.get(emp_id)

    def search(self, query: str) -> List[Employee]:
        """Case-insensitive substring match on first name, last name or username."""
        q = query.lower()
        return [
            e for e in self.all()
            if q in e.first_name.lower() or q in e.last_name.lower() or q in e.username.lower()
        ]

    def is_username_unique(self, username: str, exclude_id: Optional[int] = None) -> bool:
        return not any(
            e.username == username and e.id != exclude_id
            for e in self._employees.values()
        )

    def authenticate(self, username: str, password: str) -> Optional[Employee]:
        for e in self.all():
            if e.is_valid_login(username, password):
                return e
        return None

    # ---------- changes ----------
    def add(self, employee: Employee) -> Employee:
        """
        Gives the employee the next free id and writes its file.
        Nothing is inserted if the write fails.
        """
        employee.id = self.next_id
        try:
            employee.save(self.storage_dir)
        except StorageError:
            employee.id = None
            log.error(f"Could not add employee '{employee.username}'.", exc_info=True)
            raise

        self._employees[employee.id] = employee
        self.next_id += 1
        log.info(f"Added employee {employee.id} ('{employee.username}').")
        return employee

    def update(self, employee: Employee) -> None:
        """Persists in-memory changes to a record already in the directory."""
        if self._employees.get(employee.id) is not employee:
            raise KeyError(f"Employee {employee.id} is not part of this directory.")
        try:
            employee.save(self.storage_dir)
        except StorageError:
            log.error(f"Could not save employee {employee.id}.", exc_info=True)
            raise
        log.info(f"Updated employee {employee.id} ('{employee.username}').")

    def remove_by_id(self, emp_id: int, current_id: Optional[int] = None) -> bool:
        """
        Deletes the record file and drops the entry.
        Refuses to remove the employee who is logged in (current_id).
        """
        if current_id is not None and emp_id == current_id:
            log.info(f"Refused to remove the logged-in employee {emp_id}.")
            return False

        emp = self._employees.get(emp_id)
        if emp is None:
            return False

        path = emp.file_path(self.storage_dir)
        try:
            path.unlink()
        except FileNotFoundError:
            log.warning(f"Record file '{path}' was already missing.")
        except OSError as e:
            log.error(f"Could not delete '{path}': {e}")
            raise StorageError(f"Could not delete '{path}': {e}") from e

        del self._employees[emp_id]
        log.info(f"Removed employee {emp_id} ('{emp.username}').")
        return True
