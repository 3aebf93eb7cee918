# models/employee.py
from __future__ import annotations

import contextlib
import csv
import io
from dataclasses import dataclass, field
from pathlib import Path

from employee_manager.exceptions import MalformedRecord, StorageError

# Permission bits (5 significant bits)
#   0b00001  view own record
#   0b00010  view/search all records
#   0b11100  HR: modify, create, delete (one bit each)
GENERAL_PERMS = 1
MANAGEMENT_PERMS = 2
HR_PERMS = 28
FULL_PERMS = HR_PERMS | MANAGEMENT_PERMS | GENERAL_PERMS   # 31

RECORD_SUFFIX = ".txt"
FIELD_COUNT = 6


def build_permissions(is_hr: bool, is_management: bool) -> int:
    """Every employee gets GENERAL; HR and MANAGEMENT are added on top."""
    mask = GENERAL_PERMS
    if is_hr:
        mask |= HR_PERMS
    if is_management:
        mask |= MANAGEMENT_PERMS
    return mask


@dataclass
class Employee:
    id: int | None                  # assigned by the directory on add
    username: str
    first_name: str
    last_name: str
    password: str = field(repr=False)   # stored as entered
    permissions: int = GENERAL_PERMS

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def is_valid_login(self, username: str, password: str) -> bool:
        return self.username == username and self.password == password

    def has_permission(self, mask: int) -> bool:
        # any overlapping bit counts: HR_PERMS passes with a single HR bit set
        return (self.permissions & mask) != 0

    def update_password(self, password: str) -> None:
        self.password = password

    def update_permissions(self, permissions: int) -> None:
        self.permissions = permissions

    # ---------- display ----------
    def summary(self) -> str:
        return f"{self.id}: {self.full_name}, {self.username}"

    def profile(self) -> str:
        return (
            f"ID: {self.id}\n"
            f"Name: {self.full_name}\n"
            f"Username: {self.username}\n"
        )

    # ---------- storage ----------
    def serialize(self) -> str:
        """
        One CSV record: id, username, first_name, last_name, password, permissions.
        Fields holding commas, quotes, spaces or newlines are quoted by the csv module.
        """
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow([
            self.id, self.username, self.first_name,
            self.last_name, self.password, self.permissions,
        ])
        return buf.getvalue()[:-1]

    @classmethod
    def deserialize(cls, line: str) -> "Employee":
        try:
            rows = [r for r in csv.reader(io.StringIO(line)) if r]
        except csv.Error as e:
            raise MalformedRecord(f"Unreadable record: {e}") from e

        if len(rows) != 1:
            raise MalformedRecord(f"Expected one record, found {len(rows)}.")
        fields = rows[0]

        # files written by the old program: six whitespace separated tokens
        if len(fields) == 1:
            tokens = fields[0].split()
            if len(tokens) == FIELD_COUNT:
                fields = tokens

        if len(fields) != FIELD_COUNT:
            raise MalformedRecord(f"Expected {FIELD_COUNT} fields, found {len(fields)}.")

        id_raw, username, first_name, last_name, password, perms_raw = fields
        try:
            emp_id = int(id_raw)
            permissions = int(perms_raw)
        except ValueError:
            raise MalformedRecord(f"Non-integer id or permissions in record: {id_raw!r}, {perms_raw!r}")

        if emp_id <= 0:
            raise MalformedRecord(f"Record id must be positive, got {emp_id}.")
        if not 0 <= permissions <= FULL_PERMS:
            raise MalformedRecord(f"Permissions must be between 0 and {FULL_PERMS}, got {permissions}.")
        if not username:
            raise MalformedRecord("Record has an empty username.")

        return cls(emp_id, username, first_name, last_name, password, permissions)

    @classmethod
    def from_file(cls, path: Path) -> "Employee":
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not read '{path}': {e}") from e
        except UnicodeDecodeError as e:
            raise MalformedRecord(f"'{path}' is not UTF-8 text: {e}") from e
        return cls.deserialize(raw.strip("\r\n"))

    def file_path(self, directory: Path) -> Path:
        return Path(directory) / f"{self.id}{RECORD_SUFFIX}"

    def save(self, directory: Path) -> Path:
        """
        Writes (or overwrites) <id>.txt inside directory.
        Goes through a temp file so an existing record is never left half written.
        """
        if self.id is None:
            raise StorageError("Cannot save an employee that has no id yet.")

        path = self.file_path(directory)
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            tmp.write_text(self.serialize() + "\n", encoding="utf-8")
            tmp.replace(path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageError(f"Could not write '{path}': {e}") from e
        return path
