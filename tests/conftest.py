import builtins
import logging
from collections import deque

import pytest

from employee_manager.app import Application
from employee_manager.cli import screen as screen_module
from employee_manager.config import Config
from employee_manager.data.directory import EmployeeDirectory
from employee_manager.models.employee import GENERAL_PERMS, MANAGEMENT_PERMS, Employee


@pytest.fixture
def storage(tmp_path):
    """Storage directory that does not exist yet, so loading bootstraps it."""
    return tmp_path / "employees"


@pytest.fixture
def config(tmp_path, storage):
    return Config(storage_dir=storage, log_dir=tmp_path / "logs")


@pytest.fixture
def directory(storage):
    # seeded with id 1 'testing' / 'password', permissions 31
    return EmployeeDirectory.load(storage)


@pytest.fixture
def jdoe(directory):
    """A management employee stored as id 2."""
    return directory.add(Employee(None, "jdoe", "Jane", "Doe", "secret", GENERAL_PERMS | MANAGEMENT_PERMS))


@pytest.fixture
def app(directory, config):
    return Application(directory, config)


@pytest.fixture
def feed(monkeypatch):
    """
    Replaces input() with a queue of scripted answers. Prompts are echoed to
    stdout so capsys sees them; running out of answers raises EOFError so a
    prompt loop that never ends fails the test instead of hanging.
    """
    answers = deque()

    def fake_input(prompt=""):
        print(prompt, end="")
        if not answers:
            raise EOFError("scripted input exhausted")
        return answers.popleft()

    monkeypatch.setattr(builtins, "input", fake_input)
    monkeypatch.setattr(screen_module, "clear_screen", lambda: None)

    def _feed(*lines):
        answers.extend(lines)
        return answers

    return _feed


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    for h in list(root.handlers):
        if getattr(h, "_employee_manager", False):
            root.removeHandler(h)
            h.close()
