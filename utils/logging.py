# utils/logging.py
"""
Logging configuration for the API server and scripts.

Level comes from LOG_LEVEL (default INFO). Output goes to stdout and,
when LOG_FILE is set, to that file as well.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

import config


LOG_LEVEL_MAP = {
     "DEBUG": logging.DEBUG,
     "INFO": logging.INFO,
     "WARNING": logging.WARNING,
     "ERROR": logging.ERROR,
     "CRITICAL": logging.CRITICAL,
}


def get_log_level() -> int:
     """Map config.LOG_LEVEL to a logging constant (default: INFO)."""
     return LOG_LEVEL_MAP.get(config.LOG_LEVEL, logging.INFO)


def setup_logging(log_file: Optional[str] = None) -> None:
     """
     Configure the root logger.

     Args:
          log_file: Optional path to a log file (defaults to config.LOG_FILE)
     """
     formatter = logging.Formatter(
          fmt="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
          datefmt="%Y-%m-%d %H:%M:%S",
     )
     log_level = get_log_level()

     root_logger = logging.getLogger()
     root_logger.setLevel(log_level)
     root_logger.handlers.clear()

     stdout_handler = logging.StreamHandler(sys.stdout)
     stdout_handler.setLevel(log_level)
     stdout_handler.setFormatter(formatter)
     root_logger.addHandler(stdout_handler)

     log_file = log_file or config.LOG_FILE
     if log_file:
          log_path = Path(log_file)
          log_path.parent.mkdir(parents=True, exist_ok=True)
          file_handler = logging.FileHandler(log_path)
          file_handler.setLevel(log_level)
          file_handler.setFormatter(formatter)
          root_logger.addHandler(file_handler)
