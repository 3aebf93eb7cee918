# utils/app_logger.py
import logging
import os

from employee_manager.config import Config

LOG_FILENAME = "employee_manager.log"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

log = logging.getLogger(__name__)


def setup_logging(config: Config) -> None:
    """
    File handler at the configured level, console handler at WARNING.
    The console stays quiet unless a record file had to be skipped or a write failed.
    """
    root_logger = logging.getLogger()
    # handlers added here carry _employee_manager; a second call is a no-op
    if any(getattr(h, "_employee_manager", False) for h in root_logger.handlers):
        return

    root_logger.setLevel(config.log_level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # CONSOLE HANDLER

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    console_handler._employee_manager = True
    root_logger.addHandler(console_handler)

    # FILE HANDLER

    try:
        os.makedirs(config.log_dir, exist_ok=True)
    except OSError as e:
        log.error(f"Log Handler Error: Could not create log directory '{config.log_dir}': {e}")
        return

    file_handler = logging.FileHandler(os.path.join(config.log_dir, LOG_FILENAME), mode='a', encoding='utf-8')
    file_handler.setFormatter(formatter)
    file_handler._employee_manager = True
    root_logger.addHandler(file_handler)
    log.info("Application logger initialized.")
