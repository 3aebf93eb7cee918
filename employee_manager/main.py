# main.py
import logging
import sys

from employee_manager.app import Application
from employee_manager.config import Config
from employee_manager.data.directory import EmployeeDirectory
from employee_manager.exceptions import ConfigError, StorageError
from employee_manager.utils.app_logger import setup_logging

log = logging.getLogger(__name__)


def main() -> int:
    try:
        config = Config.from_env()
    except ConfigError as e:
        print(f"Configuration error: {e}")
        return 1
    setup_logging(config)

    try:
        directory = EmployeeDirectory.load(config.storage_dir)
    except StorageError as e:
        log.error(f"Could not open employee storage: {e}")
        print(f"Could not open employee storage at '{config.storage_dir}'.")
        return 1

    app = Application(directory, config)
    try:
        return app.run()
    except (KeyboardInterrupt, EOFError):
        print("\nAborted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
